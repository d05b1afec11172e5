"""
Dependency injection container.

Every long-lived object in the application is declared here: settings, the
database engine, the session factory and the coach bean. Per-session objects
(DAOs, the employee service) are factories that take the session at call
time.

The engine and the coach are resources. Call `container.coach.init()` to
bring the coach up; the engine is created on first use. `shutdown_resources()`
runs the coach cleanup hook and disposes the engine if one was ever created.

Tests override `settings` before anything else is resolved:

    container = Container()
    container.settings.override(providers.Object(Settings(database_url="sqlite://")))
"""

from typing import Iterator

from dependency_injector import containers, providers
from sqlalchemy import Engine

from .config.settings import get_settings
from .core.coaches import BaseballCoach
from .core.employees import EmployeeService
from .infrastructure.database.client import create_database_engine, create_session_factory
from .infrastructure.database.repositories import EmployeeDAO, StudentDAO


def init_engine(database_url: str, echo: bool = False) -> Iterator[Engine]:
    """Create the engine on first use and release its pool on shutdown."""
    engine = create_database_engine(database_url, echo=echo)
    yield engine
    engine.dispose()


def init_coach() -> Iterator[BaseballCoach]:
    """Build the coach, run its startup hook, and clean up on shutdown."""
    coach = BaseballCoach()
    coach.do_my_startup_stuff()
    yield coach
    coach.do_my_cleanup_stuff()


class Container(containers.DeclarativeContainer):
    """Application-wide dependency container."""

    settings = providers.Singleton(get_settings)

    # Database
    engine = providers.Resource(
        init_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.database_echo,
    )

    session_factory = providers.Singleton(
        create_session_factory,
        engine=engine,
    )

    # Beans
    coach = providers.Resource(init_coach)

    # Data access (pass the session when calling)
    student_dao = providers.Factory(StudentDAO)

    employee_dao = providers.Factory(EmployeeDAO)

    employee_service = providers.Factory(EmployeeService)
