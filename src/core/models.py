"""
Domain models for the CRUD demos.

These are plain dataclasses. They have no dependency on SQLAlchemy; the
infrastructure layer maps them onto tables imperatively, so the core can be
exercised without a database.

Identifiers are assigned by the persistence layer on first insert. Until then
`id` is None.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Student:
    """A student row in the student tracker."""
    id: Optional[int] = field(default=None, kw_only=True)
    first_name: str
    last_name: str
    email: str


@dataclass
class Employee:
    """An employee in the employee directory."""
    id: Optional[int] = field(default=None, kw_only=True)
    first_name: str
    last_name: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
