"""
Command-line runner for the student tracker and the coach bean.

Usage:
    cruddemo students                       # create-multiple (default)
    cruddemo students create read list
    cruddemo students update --student-id 1 --first-name Scooby
    cruddemo students delete-all
    cruddemo coach

Tasks run in the order given, all inside one database session. There is no
error recovery: a failed task stops the run with a traceback.
"""

import argparse
import logging
from typing import Callable, Optional, Sequence

from .container import Container
from .core.models import Student
from .infrastructure.database.client import create_schema, session_scope
from .infrastructure.database.repositories import StudentDAO, StudentNotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Student tasks
# ---------------------------------------------------------------------------

def create_student(dao: StudentDAO, args: argparse.Namespace) -> None:
    print("Creating new student object ...")
    temp_student = Student("Paul", "Doe", "paul@luv2code.com")

    print("Saving the student ...")
    dao.save(temp_student)

    print(f"Saved student. Generated id: {temp_student.id}")


def create_multiple_students(dao: StudentDAO, args: argparse.Namespace) -> None:
    print("Creating 3 student objects ...")
    students = [
        Student("John", "Doe", "john@luv2code.com"),
        Student("Mary", "Public", "mary@luv2code.com"),
        Student("Bonita", "Applebum", "bonita@luv2code.com"),
    ]

    print("Saving the students ...")
    for student in students:
        dao.save(student)
        print(f"Saved student. Generated id: {student.id}")


def read_student(dao: StudentDAO, args: argparse.Namespace) -> None:
    print("Creating new student object ...")
    temp_student = Student("Daffy", "Duck", "daffy@luv2code.com")

    print("Saving the student ...")
    dao.save(temp_student)
    print(f"Saved student. Generated id: {temp_student.id}")

    print(f"\nRetrieving student with id: {temp_student.id}")
    my_student = dao.find_by_id(temp_student.id)
    print(f"Found the student: {my_student}")


def query_for_students(dao: StudentDAO, args: argparse.Namespace) -> None:
    for student in dao.find_all():
        print(student)


def query_for_students_by_last_name(dao: StudentDAO, args: argparse.Namespace) -> None:
    for student in dao.find_by_last_name(args.last_name):
        print(student)


def update_student(dao: StudentDAO, args: argparse.Namespace) -> None:
    student_id = args.student_id if args.student_id is not None else 1
    print(f"Getting student with id: {student_id}")
    my_student = dao.find_by_id(student_id)
    if my_student is None:
        raise StudentNotFoundError(f"Student {student_id} not found")

    print("Updating student ...")
    my_student.first_name = args.first_name
    dao.update(my_student)

    print(f"Updated student: {my_student}")


def delete_student(dao: StudentDAO, args: argparse.Namespace) -> None:
    student_id = args.student_id if args.student_id is not None else 3
    print(f"Deleting student id: {student_id}")
    dao.delete(student_id)


def delete_all_students(dao: StudentDAO, args: argparse.Namespace) -> None:
    print("Deleting all the students ...")
    print(f"Deleted row count: {dao.delete_all()}")


StudentTask = Callable[[StudentDAO, argparse.Namespace], None]

STUDENT_TASKS: dict[str, StudentTask] = {
    "create": create_student,
    "create-multiple": create_multiple_students,
    "read": read_student,
    "list": query_for_students,
    "find-by-last-name": query_for_students_by_last_name,
    "update": update_student,
    "delete": delete_student,
    "delete-all": delete_all_students,
}


def run_student_tasks(container: Container, args: argparse.Namespace) -> None:
    """Run the requested student tasks in order against one session."""
    settings = container.settings()

    if settings.database_create_schema:
        create_schema(container.engine())

    with session_scope(container.session_factory()) as session:
        dao = container.student_dao(session)

        for task in args.tasks:
            logger.debug("Running student task", extra={"task": task})
            STUDENT_TASKS[task](dao, args)


# ---------------------------------------------------------------------------
# Coach
# ---------------------------------------------------------------------------

def run_coach(container: Container, args: argparse.Namespace) -> None:
    """Bring the coach bean up, ask for today's workout, shut it down."""
    container.coach.init()
    try:
        print(container.coach().get_daily_workout())
    finally:
        container.coach.shutdown()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cruddemo",
        description="Run the student tracker and coach demos",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    students = commands.add_parser("students", help="Run student CRUD tasks in order")
    students.add_argument(
        "tasks",
        nargs="*",
        default=["create-multiple"],
        metavar="TASK",
        help=f"One or more of: {', '.join(STUDENT_TASKS)} (default: create-multiple)",
    )
    students.add_argument(
        "--student-id",
        type=int,
        default=None,
        help="Student for update/delete (default: 1 for update, 3 for delete)",
    )
    students.add_argument("--first-name", default="Scooby", help="New first name for update")
    students.add_argument("--last-name", default="Duck", help="Last name for find-by-last-name")
    students.set_defaults(handler=run_student_tasks)

    coach = commands.add_parser("coach", help="Print the daily workout from the coach bean")
    coach.set_defaults(handler=run_coach)

    return parser


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "students":
        unknown = [task for task in args.tasks if task not in STUDENT_TASKS]
        if unknown:
            parser.error(f"unknown task(s): {', '.join(unknown)}")

    if container is None:
        container = Container()

    settings = container.settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level.upper(),
    )

    try:
        args.handler(container, args)
    finally:
        container.shutdown_resources()
    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
