"""User Routes — list, get, create, update, delete over the users table.

Invariants:
    - Create and Update run the validator before touching the store; nothing
      invalid is ever written
    - Path ids that fail to parse become 0 (no such row → 404)
    - Update forces the path id; any id in the body is ignored
    - Handlers translate nothing themselves: domain errors propagate to
      api/error_handlers.py, which owns the status mapping

Design Decisions:
    - Raw body read + lenient decode instead of a typed Body parameter: a
      malformed body becomes the empty user and fails validation with a
      message naming every missing field
    - 200 on create (not 201): clients key off the returned id, not the status
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_user_store
from app.api.request_parsing import (
    decode_user_payload, parse_filter, parse_int, parse_page,
)
from app.core.domain_types import UserId
from app.core.errors import UserValidationError
from app.core.repository_protocols import UserRepository
from app.core.validate_user import validate_user
from app.schemas.user import MessageResponse, UserPayload, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


def _path_id(raw_id: str) -> UserId:
    return UserId(parse_int(raw_id, 0))


def _require_valid(payload: UserPayload) -> None:
    violations = validate_user(payload)
    if violations:
        raise UserValidationError(violations)


@router.get("", response_model=list[UserResponse])
async def list_users(
    page: str | None = None,
    limit: str | None = None,
    name: str | None = None,
    age: str | None = None,
    store: UserRepository = Depends(get_user_store),
):
    """List users with equality filters and 1-based pagination."""
    window = parse_page(page, limit)
    users = await store.list(parse_filter(name, age), window)
    logger.info(
        "Listed users",
        extra={"count": len(users), "page": window.page, "limit": window.limit},
    )
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, store: UserRepository = Depends(get_user_store),
):
    """Get one user by id."""
    user = await store.get(_path_id(user_id))
    logger.info("Fetched user", extra={"user_id": user.id})
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse)
async def create_user(
    request: Request, store: UserRepository = Depends(get_user_store),
):
    """Validate and insert a new user. The store assigns the id."""
    payload = decode_user_payload(await request.body())
    _require_valid(payload)
    user = await store.insert(payload)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: Request,
    store: UserRepository = Depends(get_user_store),
):
    """Validate and overwrite name, email and age of an existing user."""
    target = _path_id(user_id)
    payload = decode_user_payload(await request.body())
    _require_valid(payload)
    user = await store.update(target, payload)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str, store: UserRepository = Depends(get_user_store),
):
    """Hard-delete a user."""
    await store.delete(_path_id(user_id))
    return MessageResponse(message="User deleted")
