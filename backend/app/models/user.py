"""User ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database on insert
    - name, email, age are non-nullable; constraints are checked by the validator before write
    - No relationships: single-table model

Design Decisions:
    - No unique constraint on email: duplicates are accepted
    - name column sized from NAME_MAX_LENGTH so the validator bound and DDL agree
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import NAME_MAX_LENGTH
from app.db.base import Base


class User(Base):
    """A registered user."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r}, age={self.age!r})"
