import logging
from typing import List

from app.infrastructure.exceptions import NotFoundError
from app.infrastructure.todo_storage import ITodoStore
from app.schemas.todo import ToDo

logger = logging.getLogger(__name__)


class TodoService:
    """
    ToDo operations on top of a persistence store

    Holds no state of its own beyond the store reference; every call is a
    single round trip (or two, for replace) to the store.
    """

    def __init__(self, store: ITodoStore):
        self.store = store

    def list_todos(self) -> List[ToDo]:
        return self.store.find_all()

    def get_todo(self, todo_id: str) -> ToDo:
        """
        Raises:
            NotFoundError: no ToDo stored under ``todo_id``
        """
        todo = self.store.find_by_id(todo_id)
        if todo is None:
            raise NotFoundError(todo_id)
        return todo

    def create_todo(self, todo: ToDo) -> ToDo:
        """Save the body as given; the store assigns an id when it has none."""
        saved = self.store.save(todo)
        logger.info(f"Created ToDo {saved.id}")
        return saved

    def replace_or_create_todo(self, todo_id: str, new_todo: ToDo) -> ToDo:
        """
        Replace the ToDo stored under ``todo_id``

        An existing record keeps its id and takes ``name`` and ``done`` from
        ``new_todo``. Otherwise ``new_todo`` is saved under ``todo_id``,
        whatever id it carried.
        """
        existing = self.store.find_by_id(todo_id)
        if existing is not None:
            existing.name = new_todo.name
            existing.done = new_todo.done
            saved = self.store.save(existing)
            logger.info(f"Replaced ToDo {saved.id}")
            return saved

        created = new_todo.model_copy(update={"id": todo_id})
        saved = self.store.save(created)
        logger.info(f"Created ToDo {saved.id} on replace")
        return saved

    def delete_todo(self, todo_id: str) -> None:
        # No existence check; deleting a missing id is a no-op
        self.store.delete_by_id(todo_id)
        logger.info(f"Deleted ToDo {todo_id}")
