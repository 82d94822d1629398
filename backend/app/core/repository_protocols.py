"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations constructed at startup and injected into handlers

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in UserRepository: implementations do IO; the validator that
      reads UserLike stays sync and pure
"""

from typing import Protocol

from app.core.domain_types import UserId, UserFilter, PageRequest


class UserLike(Protocol):
    """Structural contract for anything carrying User fields.

    Satisfied by the request schema, the ORM row, and plain test objects.
    """
    name: str
    email: str
    age: int


class UserRepository(Protocol):
    """Contract for user persistence, implemented by shell."""
    async def list(self, user_filter: UserFilter, page: PageRequest) -> list: ...
    async def get(self, user_id: UserId): ...
    async def insert(self, user: UserLike): ...
    async def update(self, user_id: UserId, user: UserLike): ...
    async def delete(self, user_id: UserId) -> None: ...


class CredentialVerifier(Protocol):
    """Contract for login credential checks, implemented by shell."""
    def verify(self, username: str, password: str) -> bool: ...
