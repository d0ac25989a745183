"""Shared fixtures for the ToDo backend tests."""

import os

# Settings are read at import time; pin them before the app is imported
os.environ["STORE_TYPE"] = "memory"
os.environ["DATABASE_URI"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.dependencies import get_todo_store
from app.db.base import Base
from app.infrastructure.todo_storage import InMemoryTodoStore, SQLTodoStore
from app.main import app
from app.models.todo import ToDoRecord  # noqa: F401


@pytest.fixture
def memory_store():
    return InMemoryTodoStore()


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(sql_engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=sql_engine)()
    yield session
    session.close()


@pytest.fixture
def sql_store(db_session):
    return SQLTodoStore(db_session)


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Each store implementation in turn"""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def client(store):
    """TestClient serving the app on top of ``store``"""
    app.dependency_overrides[get_todo_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
