"""User Store — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - Each operation opens its own session; each mutation is one committed statement
    - list() orders by id ascending so pages are disjoint and repeatable
    - get/update/delete raise NotFoundError when no row has the id
    - Input ids are ignored; update always targets the id argument

Design Decisions:
    - Returns ORM rows (expire_on_commit=False); response schemas read them via from_attributes
    - update/delete check rowcount instead of a prior SELECT: one round trip, no race window
"""

import logging

from sqlalchemy import delete, select, update

from app.core.domain_types import PageRequest, UserFilter, UserId
from app.core.errors import NotFoundError
from app.core.repository_protocols import UserLike
from app.infrastructure.database import DatabaseSessionManager
from app.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserStore:
    """Persists User rows through a DatabaseSessionManager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def list(self, user_filter: UserFilter, page: PageRequest) -> list[User]:
        query = select(User).order_by(User.id)
        if user_filter.name is not None:
            query = query.where(User.name == user_filter.name)
        if user_filter.age is not None:
            query = query.where(User.age == user_filter.age)
        query = query.offset(page.offset).limit(page.limit)

        async with self._db.session() as db:
            result = await db.execute(query)
            return list(result.scalars().all())

    async def get(self, user_id: UserId) -> User:
        async with self._db.session() as db:
            user = await db.get(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def insert(self, user: UserLike) -> User:
        row = User(name=user.name, email=user.email, age=user.age)
        async with self._db.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        logger.info("User inserted", extra={"user_id": row.id})
        return row

    async def update(self, user_id: UserId, user: UserLike) -> User:
        async with self._db.session() as db:
            result = await db.execute(
                update(User)
                .where(User.id == user_id)
                .values(name=user.name, email=user.email, age=user.age),
            )
            await db.commit()
        if result.rowcount == 0:
            raise NotFoundError("User", user_id)
        logger.info("User updated", extra={"user_id": user_id})
        return User(id=user_id, name=user.name, email=user.email, age=user.age)

    async def delete(self, user_id: UserId) -> None:
        async with self._db.session() as db:
            result = await db.execute(delete(User).where(User.id == user_id))
            await db.commit()
        if result.rowcount == 0:
            raise NotFoundError("User", user_id)
        logger.info("User deleted", extra={"user_id": user_id})
