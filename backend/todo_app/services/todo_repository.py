"""Todo Repository — owner-scoped CRUD for todos with category ownership checks.

Invariants:
    - Every query filters on user_id == owner_id
    - create() and update() re-verify, at write time, that the referenced category
      belongs to the owner; the check is never cached from an earlier read
    - A todo owned by someone else is reported exactly like a missing one
    - Reads return the category resolved (name/description/color), not a bare id
    - priority defaults to Medium, completed to False

Design Decisions:
    - Category check and write are not wrapped in one transaction: a category
      deleted in between leaves the write to the FK constraint (accepted window)
    - Malformed ids raise InvalidIdentifierError before any query runs
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import (
    DEFAULT_PRIORITY, CategoryId, Priority, TodoId, UserId,
)
from todo_app.core.errors import (
    InputValidationError, InvalidCategoryError, ResourceNotFoundError,
)
from todo_app.core.validate_fields import parse_identifier, require_text
from todo_app.models.category import Category
from todo_app.models.todo import Todo

logger = logging.getLogger(__name__)


def _check_priority(value: str | Priority | None) -> str:
    try:
        return Priority(value).value
    except ValueError:
        raise InputValidationError(
            "Priority must be one of Low, Medium, High", "priority",
        )


class TodoRepository:
    """Todo persistence scoped to a single owner per call."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self, owner_id: UserId) -> list[Todo]:
        """All of owner's todos, newest first, categories resolved."""
        result = await self.db.execute(
            select(Todo)
            .where(Todo.user_id == owner_id)
            .order_by(Todo.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get_one(self, owner_id: UserId, todo_id: str | TodoId) -> Todo:
        result = await self.db.execute(
            select(Todo)
            .where(Todo.id == parse_identifier(todo_id))
            .where(Todo.user_id == owner_id),
        )
        todo = result.scalar_one_or_none()
        if todo is None:
            raise ResourceNotFoundError("ToDo")
        return todo

    async def _owned_category(
        self, owner_id: UserId, category_ref: str | CategoryId | None,
    ) -> Category:
        """Resolve category_ref to a category the owner holds right now."""
        if category_ref is None or (isinstance(category_ref, str) and not category_ref.strip()):
            raise InvalidCategoryError()
        category_id = parse_identifier(category_ref)
        result = await self.db.execute(
            select(Category)
            .where(Category.id == category_id)
            .where(Category.user_id == owner_id),
        )
        category = result.scalar_one_or_none()
        if category is None:
            logger.warning(
                "Rejected category reference",
                extra={"user_id": owner_id, "resource_id": category_id},
            )
            raise InvalidCategoryError()
        return category

    async def create(self, owner_id: UserId, fields: dict) -> Todo:
        """Create a todo; fields carries title, description, category and optional priority/completed."""
        title = require_text(fields.get("title"), "title")
        description = require_text(fields.get("description"), "description")
        priority = _check_priority(fields.get("priority") or DEFAULT_PRIORITY)
        completed = fields.get("completed")
        category = await self._owned_category(owner_id, fields.get("category"))
        todo = Todo(
            user_id=owner_id,
            title=title,
            description=description,
            priority=priority,
            completed=bool(completed) if completed is not None else False,
            category=category,
        )
        self.db.add(todo)
        await self.db.commit()
        await self.db.refresh(todo)
        logger.info(
            "Todo created", extra={"user_id": owner_id, "resource_id": todo.id},
        )
        return todo

    async def update(
        self, owner_id: UserId, todo_id: str | TodoId, fields: dict,
    ) -> Todo:
        """Apply sent fields; a new category must also belong to the owner."""
        todo = await self.get_one(owner_id, todo_id)
        category = None
        if "category" in fields:
            category = await self._owned_category(owner_id, fields["category"])

        if "title" in fields:
            todo.title = require_text(fields["title"], "title")
        if "description" in fields:
            todo.description = require_text(fields["description"], "description")
        if "priority" in fields:
            todo.priority = _check_priority(fields["priority"])
        if "completed" in fields:
            todo.completed = bool(fields["completed"])
        if category is not None:
            todo.category = category

        await self.db.commit()
        await self.db.refresh(todo)
        return todo

    async def delete(self, owner_id: UserId, todo_id: str | TodoId) -> None:
        todo = await self.get_one(owner_id, todo_id)
        await self.db.delete(todo)
        await self.db.commit()
        logger.info(
            "Todo deleted", extra={"user_id": owner_id, "resource_id": todo.id},
        )
