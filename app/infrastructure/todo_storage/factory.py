"""
ToDo store factory
"""
from typing import Dict, Any, Optional
import logging

from .base import ITodoStore
from .memory_adapter import InMemoryTodoStore
from .sql_adapter import SQLTodoStore

logger = logging.getLogger(__name__)


class TodoStoreFactory:
    """ToDo store factory"""

    _adapters = {
        "memory": InMemoryTodoStore,
        "sql": SQLTodoStore,
    }

    @classmethod
    def create(cls, adapter_type: str, config: Optional[Dict[str, Any]] = None) -> ITodoStore:
        """
        Create a store instance

        Args:
            adapter_type: store type (memory, sql, ...)
            config: keyword arguments for the adapter, e.g. ``{"db": session}`` for sql

        Returns:
            ITodoStore: store instance

        Raises:
            ValueError: unsupported store type
            KeyError: missing or unexpected configuration parameters
        """
        if adapter_type not in cls._adapters:
            raise ValueError(f"Unsupported store type: {adapter_type}")

        adapter_class = cls._adapters[adapter_type]

        try:
            return adapter_class(**(config or {}))
        except TypeError as e:
            logger.error(f"Failed to create {adapter_type} store, bad configuration: {e}")
            raise KeyError(f"Missing or unexpected configuration parameters: {e}")

    @classmethod
    def register_adapter(cls, name: str, adapter_class):
        """
        Register a new store type

        Args:
            name: store type name
            adapter_class: class implementing ITodoStore
        """
        if not isinstance(adapter_class, type) or not issubclass(adapter_class, ITodoStore):
            raise ValueError("Store class must implement ITodoStore")

        cls._adapters[name] = adapter_class
        logger.info(f"Registered ToDo store: {name}")

    @classmethod
    def get_supported_adapters(cls) -> list:
        """Registered store types"""
        return list(cls._adapters.keys())
