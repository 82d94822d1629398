"""Credential Verification — configured pair accepted, everything else rejected."""

import pytest
from pydantic import SecretStr

from app.infrastructure.credentials import ConfiguredCredentialVerifier


@pytest.fixture
def verifier():
    return ConfiguredCredentialVerifier("user", SecretStr("password"))


def test_configured_pair_accepted(verifier):
    assert verifier.verify("user", "password") is True


@pytest.mark.parametrize("username, password", [
    ("user", "Password"),
    ("User", "password"),
    ("", ""),
    ("user", "password "),
])
def test_other_pairs_rejected(verifier, username, password):
    assert verifier.verify(username, password) is False


def test_non_ascii_input_does_not_raise(verifier):
    assert verifier.verify("usér", "pässword") is False
