"""
Student data-access object.

Each method forwards to the ORM session. Unlike the employee DAO, this one
owns its transactions: every write commits before returning, because the
command-line runner calls it directly with no service in between.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from src.core.models import Student


logger = logging.getLogger(__name__)


class StudentNotFoundError(Exception):
    """Raised when a requested student doesn't exist."""
    pass


class StudentDAO:
    """
    CRUD access to the student table.

    - save: insert a new student; its id is set on return
    - find_by_id: one student or None
    - find_all / find_by_last_name: ordered queries
    - update: merge changes back
    - delete / delete_all: remove rows
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, student: Student) -> Student:
        self._session.add(student)
        self._commit()
        logger.debug("Inserted student", extra={"student_id": student.id})
        return student

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return self._session.get(Student, student_id)

    def find_all(self) -> list[Student]:
        query = select(Student).order_by(Student.last_name)
        return list(self._session.scalars(query))

    def find_by_last_name(self, last_name: str) -> list[Student]:
        query = select(Student).where(Student.last_name == last_name)
        return list(self._session.scalars(query))

    def update(self, student: Student) -> Student:
        merged = self._session.merge(student)
        self._commit()
        return merged

    def delete(self, student_id: int) -> None:
        student = self._session.get(Student, student_id)
        if student is None:
            raise StudentNotFoundError(f"Student {student_id} not found")

        self._session.delete(student)
        self._commit()

    def delete_all(self) -> int:
        """Delete every student. Returns the number of rows removed."""
        result = self._session.execute(delete(Student))
        self._commit()
        return result.rowcount

    def _commit(self) -> None:
        try:
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Failed to commit student changes", extra={"error": str(e)})
            raise
