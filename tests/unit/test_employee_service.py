"""
Tests for EmployeeService transaction handling.
"""

import pytest

from src.core.employees import EmployeeService
from src.core.models import Employee
from src.infrastructure.database.repositories import EmployeeDAO, EmployeeNotFoundError


@pytest.fixture
def service(session) -> EmployeeService:
    return EmployeeService(EmployeeDAO(session), session)


class RecordingUnitOfWork:
    """Counts commits and rollbacks."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


class FailingRepository:
    """Repository whose writes always blow up."""

    def find_all(self):
        return []

    def find_by_id(self, employee_id):
        return None

    def save(self, employee):
        raise RuntimeError("disk full")

    def delete_by_id(self, employee_id):
        raise EmployeeNotFoundError(f"Employee id not found - {employee_id}")


class TestEmployeeServiceWithDatabase:
    """End-to-end through the real DAO and session."""

    def test_save_commits_and_returns_id(self, service, container):
        saved = service.save(Employee("Avani", "Gupta", "avani@luv2code.com"))

        # A brand-new session sees the row only if it was committed
        with container.session_factory()() as other:
            assert other.get(Employee, saved.id) is not None

    def test_find_by_id_after_save_matches(self, service):
        saved = service.save(Employee("Juan", "Vega", "juan@luv2code.com"))

        found = service.find_by_id(saved.id)

        assert (found.first_name, found.last_name, found.email) == (
            "Juan", "Vega", "juan@luv2code.com"
        )

    def test_delete_then_find_is_absent(self, service):
        saved = service.save(Employee("Yuri", "Petrov", "yuri@luv2code.com"))

        service.delete_by_id(saved.id)

        assert service.find_by_id(saved.id) is None

    def test_find_all_lists_every_employee(self, service):
        service.save(Employee("Leslie", "Andrews", "leslie@luv2code.com"))
        service.save(Employee("Emma", "Baumgarten", "emma@luv2code.com"))

        assert {e.last_name for e in service.find_all()} == {"Andrews", "Baumgarten"}


class TestEmployeeServiceFailures:
    """Writes that fail must roll back and re-raise."""

    def test_failed_save_rolls_back(self):
        uow = RecordingUnitOfWork()
        service = EmployeeService(FailingRepository(), uow)

        with pytest.raises(RuntimeError, match="disk full"):
            service.save(Employee("Leslie", "Andrews", "leslie@luv2code.com"))

        assert uow.commits == 0
        assert uow.rollbacks == 1

    def test_failed_delete_rolls_back(self):
        uow = RecordingUnitOfWork()
        service = EmployeeService(FailingRepository(), uow)

        with pytest.raises(EmployeeNotFoundError):
            service.delete_by_id(5)

        assert uow.rollbacks == 1
