"""
Tests for store selection in app.api.dependencies.
"""

from unittest.mock import MagicMock

import pytest

from app.api import dependencies
from app.api.dependencies import get_memory_store, get_todo_service, get_todo_store
from app.db import session as db_session_module
from app.infrastructure.todo_storage import InMemoryTodoStore, SQLTodoStore


def test_memory_store_opens_no_session(monkeypatch):
    monkeypatch.setattr(dependencies.settings, "STORE_TYPE", "memory")
    session_factory = MagicMock()
    monkeypatch.setattr(db_session_module, "SessionLocal", session_factory)

    provider = get_todo_store()
    store = next(provider)
    with pytest.raises(StopIteration):
        next(provider)

    assert isinstance(store, InMemoryTodoStore)
    assert store is get_memory_store()
    session_factory.assert_not_called()


def test_sql_store_is_bound_to_request_session(monkeypatch):
    monkeypatch.setattr(dependencies.settings, "STORE_TYPE", "sql")
    session = MagicMock()
    monkeypatch.setattr(db_session_module, "SessionLocal", MagicMock(return_value=session))

    provider = get_todo_store()
    store = next(provider)

    assert isinstance(store, SQLTodoStore)
    assert store.db is session
    session.close.assert_not_called()

    with pytest.raises(StopIteration):
        next(provider)
    session.close.assert_called_once()


def test_service_wraps_store(memory_store):
    service = get_todo_service(store=memory_store)

    assert service.store is memory_store
