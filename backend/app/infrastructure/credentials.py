"""Credential Verification — settings-backed implementation of CredentialVerifier.

Invariants:
    - Comparison is constant-time (secrets.compare_digest)
    - The expected password is held as SecretStr and never logged
"""

import secrets

from pydantic import SecretStr


class ConfiguredCredentialVerifier:
    """Accepts exactly one username/password pair taken from configuration."""

    def __init__(self, username: str, password: SecretStr):
        self._username = username
        self._password = password

    def verify(self, username: str, password: str) -> bool:
        user_ok = secrets.compare_digest(
            username.encode("utf-8"), self._username.encode("utf-8"),
        )
        password_ok = secrets.compare_digest(
            password.encode("utf-8"),
            self._password.get_secret_value().encode("utf-8"),
        )
        return user_ok and password_ok
