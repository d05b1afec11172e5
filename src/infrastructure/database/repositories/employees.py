"""
Employee data-access object.

A straight call-through to the ORM session. No commits happen here; the
EmployeeService decides where a transaction ends.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import Employee


class EmployeeNotFoundError(Exception):
    """Raised when a requested employee doesn't exist."""
    pass


class EmployeeDAO:
    """Forwards find/save/delete to the session it was given."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[Employee]:
        return list(self._session.scalars(select(Employee)))

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._session.get(Employee, employee_id)

    def save(self, employee: Employee) -> Employee:
        """
        Merge the employee into the session.

        An employee without an id is inserted; one with an id is updated.
        The returned instance is the managed copy, so read the generated id
        from it rather than from the argument. The id is only populated once
        the session flushes, which happens here so callers see it right away.
        """
        db_employee = self._session.merge(employee)
        self._session.flush()
        return db_employee

    def delete_by_id(self, employee_id: int) -> None:
        employee = self._session.get(Employee, employee_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee id not found - {employee_id}")

        self._session.delete(employee)
