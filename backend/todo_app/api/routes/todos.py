"""Todo Routes — owner-scoped todo CRUD with category resolution.

Invariants:
    - Every endpoint requires a valid bearer token
    - Responses embed the category summary, not a raw foreign key
    - A category reference the caller does not own is a 400 INVALID_CATEGORY
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from todo_app.api.dependencies import CurrentUser, get_todo_repository
from todo_app.schemas.category import MessageResponse
from todo_app.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from todo_app.services.todo_repository import TodoRepository

router = APIRouter(prefix="/api/todos", tags=["todos"])

Todos = Annotated[TodoRepository, Depends(get_todo_repository)]


@router.get("", response_model=list[TodoResponse])
async def list_todos(user: CurrentUser, todos: Todos):
    return await todos.list(user.id)


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(todo_id: str, user: CurrentUser, todos: Todos):
    return await todos.get_one(user.id, todo_id)


@router.post(
    "", response_model=TodoResponse, status_code=status.HTTP_201_CREATED,
)
async def create_todo(body: TodoCreate, user: CurrentUser, todos: Todos):
    return await todos.create(user.id, body.model_dump(exclude_none=True))


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: str, body: TodoUpdate, user: CurrentUser, todos: Todos,
):
    return await todos.update(user.id, todo_id, body.changes())


@router.delete("/{todo_id}", response_model=MessageResponse)
async def delete_todo(todo_id: str, user: CurrentUser, todos: Todos):
    await todos.delete(user.id, todo_id)
    return {"message": "ToDo deleted successfully"}
