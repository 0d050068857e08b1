"""Todo Schemas — create/update bodies and the todo response with resolved category.

Invariants:
    - priority restricted to Low | Medium | High (anything else is a 400)
    - category is taken as a raw string so malformed ids surface as INVALID_IDENTIFIER
    - TodoResponse.category is the owner's category summary, never a bare foreign key
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from todo_app.core.domain_types import Priority
from todo_app.schemas.base import PatchModel, RequestModel, ResponseModel


class TodoCreate(RequestModel):
    title: str = Field(max_length=500)
    description: str = Field(max_length=10_000)
    priority: Priority | None = None
    category: str
    completed: bool | None = None


class TodoUpdate(PatchModel):
    title: str | None = Field(None, max_length=500)
    description: str | None = Field(None, max_length=10_000)
    priority: Priority | None = None
    category: str | None = None
    completed: bool | None = None


class CategorySummary(ResponseModel):
    """Category fields denormalised into each todo for display."""
    id: UUID
    name: str
    description: str
    color: str


class TodoResponse(ResponseModel):
    id: UUID
    title: str
    description: str
    priority: Priority
    completed: bool
    category: CategorySummary | None
    user_id: UUID
    created_at: datetime
    updated_at: datetime
