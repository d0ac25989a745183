"""
SQLAlchemy backed ToDo store
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.infrastructure.exceptions import StoreFailure
from app.models.todo import ToDoRecord
from app.schemas.todo import ToDo

from .base import ITodoStore

logger = logging.getLogger(__name__)


class SQLTodoStore(ITodoStore):
    """
    Store reading and writing the ``t_todo`` table

    Works on the session it is given; one store per request session.
    Database errors roll the session back and surface as StoreFailure.
    """

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _to_schema(record: ToDoRecord) -> ToDo:
        return ToDo(**record.to_dict())

    def find_all(self) -> List[ToDo]:
        try:
            records = self.db.query(ToDoRecord).all()
        except SQLAlchemyError as e:
            raise self._failure("list ToDos", e) from e
        return [self._to_schema(record) for record in records]

    def find_by_id(self, todo_id: str) -> Optional[ToDo]:
        try:
            record = self.db.get(ToDoRecord, todo_id)
        except SQLAlchemyError as e:
            raise self._failure(f"load ToDo {todo_id}", e) from e
        return self._to_schema(record) if record is not None else None

    def save(self, todo: ToDo) -> ToDo:
        todo_id = todo.id or self.new_id()
        try:
            record = self.db.get(ToDoRecord, todo_id)
            if record is None:
                record = ToDoRecord(id=todo_id)
                self.db.add(record)
            record.name = todo.name
            record.done = todo.done
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            raise self._failure(f"save ToDo {todo_id}", e) from e
        return self._to_schema(record)

    def delete_by_id(self, todo_id: str) -> None:
        try:
            self.db.query(ToDoRecord).filter(ToDoRecord.id == todo_id).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._failure(f"delete ToDo {todo_id}", e) from e

    def _failure(self, action: str, error: SQLAlchemyError) -> StoreFailure:
        logger.error(f"Failed to {action}: {str(error)}")
        try:
            self.db.rollback()
        except SQLAlchemyError as rollback_error:
            logger.error(f"Rollback after failing to {action} also failed: {str(rollback_error)}")
        return StoreFailure(f"Failed to {action}")
