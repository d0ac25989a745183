"""
Core Services Module

Provides the CRUD service for ToDo items.
"""

from .todo_service import TodoService

__all__ = ["TodoService"]
