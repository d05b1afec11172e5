#!/usr/bin/env python3
"""
Seed the employee directory with demo rows.

Inserts the five sample employees through EmployeeService, so each insert
is committed the same way the REST API commits.

Usage:
    python scripts/seed_employees.py
    python scripts/seed_employees.py --dry-run

Requires:
    - .env file (or environment) with DATABASE_URL, unless the default
      SQLite file is fine
"""

import sys
from pathlib import Path

# Add project root to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from src.container import Container  # noqa: E402
from src.core.models import Employee  # noqa: E402
from src.infrastructure.database.client import create_schema, session_scope  # noqa: E402


DEMO_EMPLOYEES = [
    ("Leslie", "Andrews", "leslie@luv2code.com"),
    ("Emma", "Baumgarten", "emma@luv2code.com"),
    ("Avani", "Gupta", "avani@luv2code.com"),
    ("Yuri", "Petrov", "yuri@luv2code.com"),
    ("Juan", "Vega", "juan@luv2code.com"),
]


def seed_employees(container: Container, dry_run: bool = False) -> int:
    """
    Insert the demo employees.

    Returns the number of rows inserted (0 on a dry run).
    """
    if dry_run:
        for first_name, last_name, email in DEMO_EMPLOYEES:
            print(f"[DRY RUN] Would insert: {first_name} {last_name} <{email}>")
        return 0

    settings = container.settings()
    if settings.database_create_schema:
        create_schema(container.engine())

    inserted = 0
    with session_scope(container.session_factory()) as session:
        service = container.employee_service(
            repository=container.employee_dao(session),
            unit_of_work=session,
        )

        for first_name, last_name, email in DEMO_EMPLOYEES:
            saved = service.save(Employee(first_name, last_name, email))
            inserted += 1
            print(f"[OK] Inserted: {saved.full_name} (id={saved.id})")

    print("\n=== Seed Complete ===")
    print(f"Inserted: {inserted}")

    return inserted


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Seed the employee directory')
    parser.add_argument('--dry-run', action='store_true', help='Print only, don\'t insert')
    args = parser.parse_args()

    container = Container()
    try:
        seed_employees(container, dry_run=args.dry_run)
    finally:
        container.shutdown_resources()


if __name__ == '__main__':
    main()
