"""Request Parsing — lenient decoding of query strings, path ids, and JSON bodies.

Invariants:
    - Integers are ASCII [+-]?[0-9]+ within the signed 64-bit range; anything
      else (whitespace, '_' separators, non-ASCII digits, overflow) is unparsable
    - Numeric query/path values that fail to parse fall back to a default, never raise
    - User bodies that fail to decode become the empty UserPayload (the validator rejects it)
    - Login bodies that fail to decode raise ParseError (400)

Design Decisions:
    - Leniency on user bodies is kept deliberately: a bad body and an empty
      body both surface as a 400 listing the missing fields
    - int64 bound matches the BIGINT/INTEGER columns of both supported databases,
      so a parsed value can always be bound as a statement parameter
"""

import logging
import re

from pydantic import ValidationError

from app.core.domain_types import (
    DEFAULT_LIMIT, DEFAULT_PAGE, INT64_MAX, INT64_MIN, PageRequest, UserFilter,
)
from app.core.errors import ParseError
from app.schemas.user import AuthRequest, UserPayload

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_int64(value: str | None) -> int | None:
    if not value or not _INTEGER.fullmatch(value):
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def parse_int(value: str | None, default: int) -> int:
    """Parsed value, or default when missing or unparsable."""
    number = _to_int64(value)
    return default if number is None else number


def parse_optional_int(value: str | None) -> int | None:
    return _to_int64(value)


def parse_page(page: str | None, limit: str | None) -> PageRequest:
    return PageRequest(
        page=parse_int(page, DEFAULT_PAGE),
        limit=parse_int(limit, DEFAULT_LIMIT),
    )


def parse_filter(name: str | None, age: str | None) -> UserFilter:
    """Empty name and unparsable age both mean no constraint."""
    return UserFilter(name=name or None, age=parse_optional_int(age))


def decode_user_payload(raw: bytes) -> UserPayload:
    try:
        return UserPayload.model_validate_json(raw)
    except ValidationError as e:
        first = e.errors()[0]
        logger.debug(
            f"Malformed user body, using empty user: {first['type']} "
            f"at {'.'.join(str(loc) for loc in first['loc']) or '<root>'} "
            f"({e.error_count()} error(s))",
        )
        return UserPayload()


def decode_auth_request(raw: bytes) -> AuthRequest:
    try:
        return AuthRequest.model_validate_json(raw)
    except ValidationError as e:
        raise ParseError() from e
