"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the root; Category and Todo are owned by exactly one user (user_id)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from todo_app.models.user import User  # noqa: F401
from todo_app.models.category import Category  # noqa: F401
from todo_app.models.todo import Todo  # noqa: F401
