from fastapi import APIRouter

from app.api.v1.endpoints import todo


api_router = APIRouter()

api_router.include_router(todo.router, prefix="/todo", tags=["ToDo"])
