"""
Custom exceptions for the service and infrastructure layers.
"""


class TodoBackendError(Exception):
    """Base class for errors the API maps to an HTTP response."""
    pass


class NotFoundError(TodoBackendError):
    """A ToDo with the requested id does not exist."""

    def __init__(self, todo_id: str):
        self.todo_id = todo_id
        super().__init__(f"ToDo {todo_id} not found")


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class StoreFailure(InfrastructureError, TodoBackendError):
    """The persistence store could not complete an operation."""
    pass
