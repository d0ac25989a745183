"""
ToDo API endpoints

Maps the five HTTP operations on the /todo resource onto TodoService.
NotFoundError and StoreFailure propagate to the handlers registered in
app.main, which turn them into 404 and 500 responses.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_todo_service
from app.schemas.todo import ToDo
from app.services.core import TodoService

router = APIRouter()


@router.get("", response_model=List[ToDo])
def find_all(
        service: TodoService = Depends(get_todo_service),
):
    """
    List all ToDo items

    Returns:
        List[ToDo]: every stored item, in store order
    """
    return service.list_todos()


@router.get("/{todo_id}", response_model=ToDo)
def find_by_id(
        todo_id: str,
        service: TodoService = Depends(get_todo_service),
):
    """
    Get a ToDo item by id

    Raises:
        NotFoundError: answered with 404
    """
    return service.get_todo(todo_id)


@router.post("", response_model=ToDo)
def save(
        todo: ToDo,
        service: TodoService = Depends(get_todo_service),
):
    """
    Create a ToDo item

    The id in the body is used when present, otherwise one is assigned.
    """
    return service.create_todo(todo)


@router.put("/{todo_id}", response_model=ToDo)
def replace_by_id(
        todo_id: str,
        todo: ToDo,
        service: TodoService = Depends(get_todo_service),
):
    """
    Replace name and done of a ToDo item, creating it under ``todo_id`` if missing
    """
    return service.replace_or_create_todo(todo_id, todo)


@router.delete("/{todo_id}", response_class=Response)
def delete_by_id(
        todo_id: str,
        service: TodoService = Depends(get_todo_service),
):
    """Delete a ToDo item; unknown ids are ignored"""
    service.delete_todo(todo_id)
    return Response(status_code=status.HTTP_200_OK)
