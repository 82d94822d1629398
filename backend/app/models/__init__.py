"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata

Design Decisions:
    - Models imported here so ensure_schema() sees the full metadata
      regardless of which module touched the ORM first
"""

from app.models.user import User  # noqa: F401
