"""
Shared fixtures.

Every test gets its own container pointed at a fresh in-memory SQLite
database, so tests never touch a file on disk or each other's rows.
"""

from typing import Generator

import pytest
from dependency_injector import providers
from sqlalchemy.orm import Session

from src.config.settings import Settings
from src.container import Container
from src.infrastructure.database import create_schema, session_scope


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        database_create_schema=True,
        log_level="WARNING",
    )


@pytest.fixture
def container(settings: Settings) -> Generator[Container, None, None]:
    container = Container()
    container.settings.override(providers.Object(settings))

    yield container

    container.shutdown_resources()


@pytest.fixture
def session(container: Container) -> Generator[Session, None, None]:
    """An open session on a database with the schema in place."""
    create_schema(container.engine())
    with session_scope(container.session_factory()) as session:
        yield session
