"""
ToDo Storage Infrastructure Module

Provides the persistence store interface and its implementations.
"""

from .base import ITodoStore
from .memory_adapter import InMemoryTodoStore
from .sql_adapter import SQLTodoStore
from .factory import TodoStoreFactory

__all__ = [
    'ITodoStore',
    'InMemoryTodoStore',
    'SQLTodoStore',
    'TodoStoreFactory'
]
