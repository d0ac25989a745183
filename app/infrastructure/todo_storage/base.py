"""
ToDo persistence store abstract interface
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from app.schemas.todo import ToDo


class ITodoStore(ABC):
    """
    Abstract interface for ToDo persistence

    Every concrete store (in-memory map, relational database, remote
    service) implements these four operations. Stores hand out copies, so
    mutating a returned ToDo never changes stored state until it is saved.
    """

    @abstractmethod
    def find_all(self) -> List[ToDo]:
        """All records, in store order"""
        pass

    @abstractmethod
    def find_by_id(self, todo_id: str) -> Optional[ToDo]:
        """Record with the given id, or None"""
        pass

    @abstractmethod
    def save(self, todo: ToDo) -> ToDo:
        """
        Upsert a record

        Assigns a new id when ``todo.id`` is missing or empty, otherwise
        overwrites the record stored under that id.

        Returns:
            ToDo: the stored record
        """
        pass

    @abstractmethod
    def delete_by_id(self, todo_id: str) -> None:
        """Delete the record if present; a missing id is not an error"""
        pass

    @staticmethod
    def new_id() -> str:
        """Id for a ToDo saved without one"""
        return uuid.uuid4().hex
