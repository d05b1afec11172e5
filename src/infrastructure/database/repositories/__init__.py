"""
Data-access objects over a SQLAlchemy session.

DAOs translate domain requests into session calls and nothing more.
"""

from .employees import EmployeeDAO, EmployeeNotFoundError
from .students import StudentDAO, StudentNotFoundError

__all__ = [
    "EmployeeDAO",
    "EmployeeNotFoundError",
    "StudentDAO",
    "StudentNotFoundError",
]
