"""Root conftest — shared test configuration."""

import os

# Ensure importing app.main never points at a real database or real credentials
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_USERNAME", "user")
os.environ.setdefault("AUTH_PASSWORD", "password")
os.environ.setdefault("LOG_FORMAT", "text")
