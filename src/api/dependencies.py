"""
FastAPI dependency injection.

Dependencies pull objects out of the application container and hand them to
route handlers. Routes never build their own sessions or services, so tests
can swap the container's providers for in-memory ones.

Each dependency is a function that FastAPI calls when needed.
"""

import logging
from typing import Annotated, Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..config.settings import Settings
from ..container import Container
from ..core.coaches import Coach
from ..core.employees import EmployeeService
from ..infrastructure.database.client import session_scope

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------

def get_container(request: Request) -> Container:
    """The container created alongside the application."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


def get_app_settings(container: ContainerDep) -> Settings:
    return container.settings()


# ---------------------------------------------------------------------------
# Persistence Dependencies
# ---------------------------------------------------------------------------

def get_db_session(container: ContainerDep) -> Generator[Session, None, None]:
    """
    Provide an ORM session scoped to one request.

    This is a generator function (yields instead of returns) because
    we need to manage the session lifecycle:
    1. Open session
    2. Yield session (FastAPI injects it)
    3. Roll back on error, close always (cleanup after request)
    """
    with session_scope(container.session_factory()) as session:
        logger.debug("Opened database session")
        yield session


def get_employee_service(
    container: ContainerDep,
    session: Annotated[Session, Depends(get_db_session)],
) -> EmployeeService:
    """Provide EmployeeService wired to this request's session."""
    return container.employee_service(
        repository=container.employee_dao(session),
        unit_of_work=session,
    )


# ---------------------------------------------------------------------------
# Beans
# ---------------------------------------------------------------------------

def get_coach(container: ContainerDep) -> Coach:
    """The container-managed coach. Same instance on every request."""
    return container.coach()


# ---------------------------------------------------------------------------
# Convenience Type Aliases
# ---------------------------------------------------------------------------

# These type aliases make route signatures cleaner
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
DbSessionDep = Annotated[Session, Depends(get_db_session)]
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]
CoachDep = Annotated[Coach, Depends(get_coach)]
