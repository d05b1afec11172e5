"""
Tests for the employee seed script.
"""

from sqlalchemy import select

from scripts.seed_employees import DEMO_EMPLOYEES, seed_employees
from src.core.models import Employee


class TestSeedEmployees:

    def test_inserts_every_demo_employee(self, container, capsys):
        inserted = seed_employees(container)

        assert inserted == len(DEMO_EMPLOYEES) == 5

        with container.session_factory()() as session:
            stored = {(e.first_name, e.last_name, e.email) for e in session.scalars(select(Employee))}
        assert stored == set(DEMO_EMPLOYEES)

        out = capsys.readouterr().out
        assert "[OK] Inserted: Leslie Andrews (id=1)" in out
        assert "Inserted: 5" in out

    def test_dry_run_touches_nothing(self, container, capsys):
        inserted = seed_employees(container, dry_run=True)

        assert inserted == 0
        assert not container.engine.initialized

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"[DRY RUN] Would insert: {first} {last} <{email}>"
            for first, last, email in DEMO_EMPLOYEES
        ]
