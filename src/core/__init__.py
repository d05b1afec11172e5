"""
Core business logic for the CRUD demos.

This module is framework-agnostic - it doesn't import FastAPI, SQLAlchemy,
or any infrastructure concerns. Entities are plain dataclasses; the database
layer maps them onto tables.
"""

from .coaches import BaseballCoach, Coach
from .employees import EmployeeRepository, EmployeeService, UnitOfWork
from .models import Employee, Student

__all__ = [
    "BaseballCoach",
    "Coach",
    "Employee",
    "EmployeeRepository",
    "EmployeeService",
    "Student",
    "UnitOfWork",
]
