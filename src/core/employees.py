"""
Employee service.

The service is the transaction boundary for the employee directory. The DAO
underneath it forwards each call to the ORM session and never commits; the
service decides when a unit of work is finished.

This module is framework-agnostic. It talks to the DAO and the session
through protocols, so tests can hand it anything with the same shape.
"""

import logging
from typing import Optional, Protocol

from .models import Employee


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocols (interfaces)
# ---------------------------------------------------------------------------

class EmployeeRepository(Protocol):
    """Data access for employees."""

    def find_all(self) -> list[Employee]: ...
    def find_by_id(self, employee_id: int) -> Optional[Employee]: ...
    def save(self, employee: Employee) -> Employee: ...
    def delete_by_id(self, employee_id: int) -> None: ...


class UnitOfWork(Protocol):
    """
    Transaction control.

    A SQLAlchemy Session satisfies this protocol as-is.
    """

    def commit(self) -> None: ...
    def rollback(self) -> None: ...


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class EmployeeService:
    """
    CRUD operations on employees, one transaction per write.

    Reads go straight through. Writes commit on success; on failure the
    transaction is rolled back and the original exception re-raised.
    """

    def __init__(self, repository: EmployeeRepository, unit_of_work: UnitOfWork) -> None:
        self._repository = repository
        self._uow = unit_of_work

    def find_all(self) -> list[Employee]:
        return self._repository.find_all()

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._repository.find_by_id(employee_id)

    def save(self, employee: Employee) -> Employee:
        """Insert when employee.id is None, update otherwise."""
        try:
            saved = self._repository.save(employee)
            self._uow.commit()
        except Exception as e:
            self._uow.rollback()
            logger.error(
                "Failed to save employee",
                extra={"employee_id": employee.id, "error": str(e)}
            )
            raise

        logger.info("Saved employee", extra={"employee_id": saved.id})
        return saved

    def delete_by_id(self, employee_id: int) -> None:
        try:
            self._repository.delete_by_id(employee_id)
            self._uow.commit()
        except Exception:
            self._uow.rollback()
            raise

        logger.info("Deleted employee", extra={"employee_id": employee_id})
