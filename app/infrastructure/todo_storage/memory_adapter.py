"""
In-memory ToDo store
"""
import logging
import threading
from typing import Dict, List, Optional

from app.schemas.todo import ToDo

from .base import ITodoStore

logger = logging.getLogger(__name__)


class InMemoryTodoStore(ITodoStore):
    """Process-local store keeping records in insertion order."""

    def __init__(self):
        self._todos: Dict[str, ToDo] = {}
        self._lock = threading.Lock()

    def find_all(self) -> List[ToDo]:
        with self._lock:
            return [todo.model_copy() for todo in self._todos.values()]

    def find_by_id(self, todo_id: str) -> Optional[ToDo]:
        with self._lock:
            todo = self._todos.get(todo_id)
            return todo.model_copy() if todo is not None else None

    def save(self, todo: ToDo) -> ToDo:
        stored = todo.model_copy()
        if not stored.id:
            stored.id = self.new_id()
        with self._lock:
            self._todos[stored.id] = stored
        logger.debug(f"Saved ToDo {stored.id}")
        return stored.model_copy()

    def delete_by_id(self, todo_id: str) -> None:
        with self._lock:
            removed = self._todos.pop(todo_id, None)
        if removed is not None:
            logger.debug(f"Deleted ToDo {todo_id}")
