"""
Table definitions and ORM mapping for the domain dataclasses.

The domain classes stay plain dataclasses; the mapping is applied here,
imperatively, when this module is first imported. Column names match the
dataclass field names, so no explicit properties are needed.
"""

from sqlalchemy import Column, Integer, String, Table
from sqlalchemy.orm import registry

from src.core.models import Employee, Student


mapper_registry = registry()
metadata = mapper_registry.metadata


student_table = Table(
    "student",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(45)),
    Column("last_name", String(45)),
    Column("email", String(45)),
)

employee_table = Table(
    "employee",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(45)),
    Column("last_name", String(45)),
    Column("email", String(45)),
)


mapper_registry.map_imperatively(Student, student_table)
mapper_registry.map_imperatively(Employee, employee_table)
