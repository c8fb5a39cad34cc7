"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import strawberry


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> str:
    """DSN for a throw-away SQLite database file."""
    return f"sqlite:///{tmp_path / 'companies.db'}"


@pytest.fixture(scope="function")
def reset_shared_db_connections(database_url: str) -> Generator[None, None, None]:
    """Point the shared database connections at the test database."""
    from companies.database.connection import init_database, reset_database

    os.environ["COMPANIES_DATABASE_URL"] = database_url

    reset_database()
    init_database(database_url, force_reinit=True)

    yield

    reset_database()


@pytest.fixture(scope="function")
def test_database(reset_shared_db_connections: None) -> Generator[None, None, None]:
    """Create the schema from the ORM metadata on the test database."""
    from companies.database.connection import get_engine
    from companies.dbmodels import Base

    engine = get_engine()
    Base.metadata.create_all(engine)

    yield

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def mock_info() -> Any:
    """Create a mock GraphQL info object with request context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock()}
    return info


@pytest.fixture
def mock_session() -> AsyncMock:
    """An AsyncSession stand-in with the sync methods mocked as sync."""
    session = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
