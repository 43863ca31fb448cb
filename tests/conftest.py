"""Root conftest — shared test configuration."""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
# Day matching in route tests must not depend on the machine's zone
os.environ.setdefault("CALENDAR_TIMEZONE", "UTC")
os.environ.setdefault("LOG_FORMAT", "text")
