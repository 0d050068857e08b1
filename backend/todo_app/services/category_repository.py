"""Category Repository — owner-scoped CRUD for categories.

Invariants:
    - Every query filters on user_id == owner_id
    - A category owned by someone else is reported exactly like a missing one
    - name/description stored trimmed and never blank; color defaults when omitted
    - delete() refuses while todos still reference the category

Design Decisions:
    - Lookup by (id, user_id) in one query: no separate existence check that could
      leak other users' ids
    - In-use check before delete rather than cascading: todos are never removed
      as a side effect of deleting their category
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.domain_types import CategoryId, UserId
from todo_app.core.errors import CategoryInUseError, ResourceNotFoundError
from todo_app.core.validate_fields import parse_identifier, require_text
from todo_app.models.category import DEFAULT_COLOR, Category
from todo_app.models.todo import Todo

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("name", "description", "color")


class CategoryRepository:
    """Category persistence scoped to a single owner per call."""

    def __init__(self, db: AsyncSession, default_color: str = DEFAULT_COLOR):
        self.db = db
        self.default_color = default_color

    async def list(self, owner_id: UserId) -> list[Category]:
        """All of owner's categories, newest first."""
        result = await self.db.execute(
            select(Category)
            .where(Category.user_id == owner_id)
            .order_by(Category.created_at.desc()),
        )
        return list(result.scalars().all())

    async def find_owned(
        self, owner_id: UserId, category_id: CategoryId,
    ) -> Category | None:
        """Current owner-scoped lookup; None covers both absent and foreign."""
        result = await self.db.execute(
            select(Category)
            .where(Category.id == category_id)
            .where(Category.user_id == owner_id),
        )
        return result.scalar_one_or_none()

    async def get_one(self, owner_id: UserId, category_id: str | CategoryId) -> Category:
        category = await self.find_owned(
            owner_id, CategoryId(parse_identifier(category_id)),
        )
        if category is None:
            raise ResourceNotFoundError("Category")
        return category

    async def create(
        self,
        owner_id: UserId,
        name: str,
        description: str,
        color: str | None = None,
    ) -> Category:
        category = Category(
            user_id=owner_id,
            name=require_text(name, "name"),
            description=require_text(description, "description"),
            color=(color or "").strip() or self.default_color,
        )
        self.db.add(category)
        await self.db.commit()
        await self.db.refresh(category)
        logger.info(
            "Category created",
            extra={"user_id": owner_id, "resource_id": category.id},
        )
        return category

    async def update(
        self, owner_id: UserId, category_id: str | CategoryId, patch: dict,
    ) -> Category:
        """Apply name/description/color changes; returns the post-update record."""
        category = await self.get_one(owner_id, category_id)
        for field in _EDITABLE_FIELDS:
            if field not in patch:
                continue
            if field == "color":
                category.color = (patch["color"] or "").strip() or self.default_color
            else:
                setattr(category, field, require_text(patch[field], field))
        await self.db.commit()
        await self.db.refresh(category)
        return category

    async def delete(self, owner_id: UserId, category_id: str | CategoryId) -> None:
        category = await self.get_one(owner_id, category_id)
        in_use = await self.db.scalar(
            select(func.count(Todo.id)).where(Todo.category_id == category.id),
        )
        if in_use:
            raise CategoryInUseError(in_use)
        await self.db.delete(category)
        await self.db.commit()
        logger.info(
            "Category deleted",
            extra={"user_id": owner_id, "resource_id": category.id},
        )
