"""Todo ORM — task item owned by a user and filed under one of that user's categories.

Invariants:
    - Always belongs to a User (user_id FK) and a Category (category_id FK)
    - category.user_id == user_id (enforced by the todo repository on every write)
    - priority is Low | Medium | High, default Medium; completed defaults to False

Design Decisions:
    - category relationship loaded with selectin: every read returns the resolved
      name/description/color without a second round-trip per row
    - ondelete=RESTRICT on category_id: a category with todos cannot be deleted
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from todo_app.core.domain_types import DEFAULT_PRIORITY
from todo_app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo(Base):
    """Todo entity — scoped by user_id, filed under category_id."""
    __tablename__ = "todos"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[str] = mapped_column(
        String(10), nullable=False, default=DEFAULT_PRIORITY.value,
    )
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    category: Mapped["Category"] = relationship("Category", lazy="selectin")
