"""Login Route — credential check that returns the configured token.

Invariants:
    - Malformed body → 400; credential mismatch → 401; match → 200 {token}
    - The submitted password is never logged
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_app_settings, get_credential_verifier
from app.api.request_parsing import decode_auth_request
from app.config import Settings
from app.core.errors import AuthError
from app.core.repository_protocols import CredentialVerifier
from app.schemas.user import TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    request: Request,
    verifier: CredentialVerifier = Depends(get_credential_verifier),
    settings: Settings = Depends(get_app_settings),
):
    """Exchange the configured username/password for the configured token."""
    auth = decode_auth_request(await request.body())
    logger.info("Login attempt", extra={"username": auth.username})

    if not verifier.verify(auth.username, auth.password):
        raise AuthError()
    return TokenResponse(token=settings.auth_token.get_secret_value())
