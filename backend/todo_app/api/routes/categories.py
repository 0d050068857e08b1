"""Category Routes — owner-scoped category CRUD.

Invariants:
    - Every endpoint requires a valid bearer token
    - Another user's category id answers 404, same as an unknown id
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from todo_app.api.dependencies import CurrentUser, get_category_repository
from todo_app.schemas.category import (
    CategoryCreate, CategoryResponse, CategoryUpdate, MessageResponse,
)
from todo_app.services.category_repository import CategoryRepository

router = APIRouter(prefix="/api/categories", tags=["categories"])

Categories = Annotated[CategoryRepository, Depends(get_category_repository)]


@router.get("", response_model=list[CategoryResponse])
async def list_categories(user: CurrentUser, categories: Categories):
    return await categories.list(user.id)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str, user: CurrentUser, categories: Categories):
    return await categories.get_one(user.id, category_id)


@router.post(
    "", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate, user: CurrentUser, categories: Categories,
):
    return await categories.create(
        user.id, body.name, body.description, body.color,
    )


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str, body: CategoryUpdate,
    user: CurrentUser, categories: Categories,
):
    return await categories.update(user.id, category_id, body.changes())


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(category_id: str, user: CurrentUser, categories: Categories):
    await categories.delete(user.id, category_id)
    return {"message": "Category deleted"}
