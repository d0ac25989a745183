"""
API Dependencies

Provides dependency injection for the ToDo store and service.
The store type is chosen by the STORE_TYPE setting.
"""

from contextlib import contextmanager
from functools import lru_cache
from typing import Generator

from fastapi import Depends

from app.core.config import settings
from app.db.session import get_db
from app.infrastructure.todo_storage import ITodoStore, TodoStoreFactory
from app.services.core import TodoService

db_session = contextmanager(get_db)


@lru_cache()
def get_memory_store() -> ITodoStore:
    """
    Process-wide in-memory store

    Cached so every request sees the same records.
    """
    return TodoStoreFactory.create("memory")


def get_todo_store() -> Generator[ITodoStore, None, None]:
    """
    Get the configured ToDo store

    The in-memory store is shared; any other store is bound to a database
    session opened for this request and closed after it.
    """
    if settings.STORE_TYPE == "memory":
        yield get_memory_store()
        return

    with db_session() as db:
        yield TodoStoreFactory.create(settings.STORE_TYPE, config={"db": db})


def get_todo_service(store: ITodoStore = Depends(get_todo_store)) -> TodoService:
    """
    Get ToDo Service instance

    Returns:
        TodoService: service bound to the request's store
    """
    return TodoService(store=store)
