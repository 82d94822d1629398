"""Service test fixtures — in-memory database, real store, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the schema created
    - app.state is populated directly (ASGITransport does not run the lifespan)
    - Login tests use a fake CredentialVerifier; the real one is tested separately

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, exercises the
      same SQLAlchemy statements the PostgreSQL deployment runs
"""

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from app.config import Settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.user_store import SqlAlchemyUserStore
from app.main import create_app

TEST_TOKEN = "test-token"


class FakeCredentialVerifier:
    """Accepts one pair and records every attempt."""

    def __init__(self, username: str = "user", password: str = "password"):
        self._pair = (username, password)
        self.attempts: list[tuple[str, str]] = []

    def verify(self, username: str, password: str) -> bool:
        self.attempts.append((username, password))
        return (username, password) == self._pair


@pytest.fixture
def test_settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        auth_token=SecretStr(TEST_TOKEN),
        log_format="text",
    )


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.ensure_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def store(db_manager):
    return SqlAlchemyUserStore(db_manager)


@pytest.fixture
def verifier():
    return FakeCredentialVerifier()


@pytest.fixture
async def client(test_settings, db_manager, store, verifier):
    """FastAPI test client with startup dependencies injected by hand."""
    app = create_app(test_settings)
    app.state.db_manager = db_manager
    app.state.user_store = store
    app.state.credential_verifier = verifier

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def create_user(client):
    """POST a user and return the decoded response body."""
    async def _create(name="John Doe", email="johndoe@example.com", age=30):
        res = await client.post(
            "/users", json={"name": name, "email": email, "age": age},
        )
        assert res.status_code == 200, res.text
        return res.json()
    return _create
