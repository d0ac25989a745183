"""
Services Layer

Business logic sitting between the API endpoints and the persistence stores.
"""

__all__ = []
