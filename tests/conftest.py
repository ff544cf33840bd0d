"""Pytest configuration.

Environment defaults are set before any firedesk import so the settings
singleton loads a SQLite test configuration.

Fixtures:
- test_database: fresh SQLite file database with all tables created
- seed_user: helper inserting users directly through the ORM
- mock_logger: Mock implementing LoggerProtocol
"""

import inspect
import os
from collections.abc import Awaitable, Callable
from unittest.mock import Mock

import pytest
import pytest_asyncio

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./firedesk-test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a Database on a fresh SQLite file with the schema created.

    A file (not :memory:) database lets tests open several independent
    sessions against the same data.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from firedesk.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'audit.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
def seed_user(test_database) -> Callable[..., Awaitable[str]]:
    """Factory inserting a user (and optionally its institution).

    Usage:
        admin_id = await seed_user("admin-1", role="ADMIN")
    """
    from firedesk.infrastructure.persistence.models import (
        InstitutionModel,
        UserModel,
    )

    async def factory(
        user_id: str,
        *,
        role: str | None = None,
        name: str | None = None,
        institution_id: str | None = None,
    ) -> str:
        async with test_database.get_session() as session:
            if institution_id is not None:
                existing = await session.get(InstitutionModel, institution_id)
                if existing is None:
                    session.add(
                        InstitutionModel(id=institution_id, name=f"Kurum {institution_id}")
                    )
                    await session.flush()
            session.add(
                UserModel(
                    id=user_id,
                    name=name or f"User {user_id}",
                    email=f"{user_id}@example.com",
                    role=role,
                    institution_id=institution_id,
                )
            )
        return user_id

    return factory


@pytest.fixture
def mock_logger() -> Mock:
    """Mock logger implementing LoggerProtocol."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real database"
    )
    config.addinivalue_line("markers", "api: API tests through the FastAPI test client")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
