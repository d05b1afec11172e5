"""
Relational persistence through SQLAlchemy.

Importing this package applies the ORM mapping to the domain dataclasses.
"""

from .client import (
    DatabaseConnectionError,
    check_connection,
    create_database_engine,
    create_schema,
    create_session_factory,
    session_scope,
)
from .mapping import employee_table, metadata, student_table

__all__ = [
    "DatabaseConnectionError",
    "check_connection",
    "create_database_engine",
    "create_schema",
    "create_session_factory",
    "employee_table",
    "metadata",
    "session_scope",
    "student_table",
]
