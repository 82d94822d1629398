"""FastAPI Dependencies — hand startup-built objects to route handlers.

Invariants:
    - Objects are read from app.state, populated once by the lifespan (or by tests)
    - Handlers never import concrete infrastructure classes
"""

from fastapi import Request

from app.config import Settings
from app.core.repository_protocols import CredentialVerifier, UserRepository


def get_user_store(request: Request) -> UserRepository:
    return request.app.state.user_store


def get_credential_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.credential_verifier


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
