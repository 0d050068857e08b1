"""Category Schemas — create/update bodies and the category response shape.

Invariants:
    - CategoryCreate requires name and description (blank-after-trim rejected by the repository)
    - CategoryUpdate applies only the fields sent
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from todo_app.schemas.base import PatchModel, RequestModel, ResponseModel


class CategoryCreate(RequestModel):
    name: str = Field(max_length=200)
    description: str = Field(max_length=5000)
    color: str | None = Field(None, max_length=32)


class CategoryUpdate(PatchModel):
    name: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=5000)
    color: str | None = Field(None, max_length=32)


class CategoryResponse(ResponseModel):
    id: UUID
    name: str
    description: str
    color: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class MessageResponse(ResponseModel):
    message: str
