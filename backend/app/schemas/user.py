"""User Schemas — Pydantic models for the /users and /login API boundary.

Invariants:
    - UserPayload carries no id; ids come from the path or the database
    - UserPayload fields default to the empty User so a partially-typed body
      still reaches the validator instead of failing in decode
    - UserResponse mirrors the persisted row: {id, name, email, age}

Design Decisions:
    - Field constraints are NOT declared here: the validator reports every
      violation at once with its own messages, and leniently decoded bodies
      must reach it even when empty
    - extra="ignore": unknown keys (including a body "id") are dropped silently
"""

from pydantic import BaseModel, ConfigDict


class UserPayload(BaseModel):
    """Create/update body. Defaults form the empty User."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    age: int = 0


class UserResponse(BaseModel):
    """Public User shape, read straight from ORM rows."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int


class AuthRequest(BaseModel):
    """Login body. Never persisted."""
    model_config = ConfigDict(extra="ignore")

    username: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
