"""
Database engine and session management.

Provides the engine factory, the session factory and a context manager that
scopes one ORM session per unit of work.

Using the repository pattern means most code never touches this module
directly - it goes through the DAOs, which receive a Session and forward
calls to it.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .mapping import metadata

logger = logging.getLogger(__name__)


class DatabaseConnectionError(Exception):
    """Raised when the database is misconfigured or cannot be reached."""
    pass


def create_database_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for a database URL.

    SQLite needs two adjustments to work behind a threaded web server:
    connections may be used from a thread other than the one that opened
    them, and an in-memory database must live on a single shared connection
    or every new connection would see an empty database.

    Raises DatabaseConnectionError when the URL cannot be parsed or names a
    dialect or driver that is not installed.
    """
    try:
        url = make_url(database_url)
        engine_kwargs: dict = {"echo": echo}

        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # One connection shared by every thread; in-memory SQLite is for tests only.
                engine_kwargs["poolclass"] = StaticPool

        engine = create_engine(url, **engine_kwargs)
    except (SQLAlchemyError, ImportError) as e:
        logger.error("Invalid database configuration", extra={"error": str(e)})
        raise DatabaseConnectionError(f"Invalid database configuration: {e}") from e

    logger.info(
        "Created database engine",
        extra={"backend": url.get_backend_name(), "database": url.database}
    )

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create the session factory bound to an engine.

    expire_on_commit is off so entities returned from a committed save can
    still be read (their generated id included) after the transaction ends.
    """
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left alone."""
    metadata.create_all(engine)
    logger.info("Database schema ready", extra={"tables": sorted(metadata.tables)})


def check_connection(engine: Engine) -> None:
    """
    Run a trivial query to prove the database is reachable.

    Raises DatabaseConnectionError if it is not.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(
            "Database connection failed",
            extra={"error": str(e), "url": engine.url.render_as_string(hide_password=True)}
        )
        raise DatabaseConnectionError(f"Database connection failed: {e}") from e


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """
    Provide an ORM session with automatic cleanup.

    Commits are left to the caller (DAO or service). Any exception escaping
    the block rolls the open transaction back before it propagates, and the
    session is always closed.

    Usage:
        with session_scope(factory) as session:
            dao = StudentDAO(session)
            dao.save(student)
    """
    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
