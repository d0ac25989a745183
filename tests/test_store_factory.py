import pytest

from app.infrastructure.todo_storage import (
    InMemoryTodoStore,
    SQLTodoStore,
    TodoStoreFactory,
)


def test_create_memory_store():
    assert isinstance(TodoStoreFactory.create("memory"), InMemoryTodoStore)


def test_create_sql_store(db_session):
    store = TodoStoreFactory.create("sql", config={"db": db_session})

    assert isinstance(store, SQLTodoStore)
    assert store.db is db_session


def test_unknown_type():
    with pytest.raises(ValueError):
        TodoStoreFactory.create("mongo")


def test_sql_store_without_session():
    with pytest.raises(KeyError):
        TodoStoreFactory.create("sql")


def test_register_adapter(monkeypatch):
    monkeypatch.setattr(TodoStoreFactory, "_adapters", dict(TodoStoreFactory._adapters))

    class CustomStore(InMemoryTodoStore):
        pass

    TodoStoreFactory.register_adapter("custom", CustomStore)

    assert "custom" in TodoStoreFactory.get_supported_adapters()
    assert isinstance(TodoStoreFactory.create("custom"), CustomStore)


def test_register_rejects_non_store():
    with pytest.raises(ValueError):
        TodoStoreFactory.register_adapter("bogus", dict)
