"""Root conftest — shared test configuration."""

import os

# Keep tests off any real database and keep bcrypt cheap
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
