"""Category ORM — named grouping of todos owned by one user.

Invariants:
    - Always belongs to a User (user_id FK)
    - name is NOT unique, not even per user
    - description is required; color falls back to the configured default

Design Decisions:
    - Non-unique (user_id, name) index: owner-scoped lookups without forbidding duplicates
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from todo_app.db.base import Base

DEFAULT_COLOR = "#667eea"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Category(Base):
    """Category entity — scoped by user_id."""
    __tablename__ = "categories"
    __table_args__ = (Index("ix_categories_user_id_name", "user_id", "name"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    color: Mapped[str] = mapped_column(
        String(32), nullable=False, default=DEFAULT_COLOR,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )
