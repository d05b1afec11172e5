"""
CRUD Demo - dependency injection and ORM walkthroughs.

This package contains the complete application:
- core: Framework-agnostic entities, coach bean and employee service
- infrastructure: SQLAlchemy engine, mapping and DAOs
- api: FastAPI routes and dependencies
- config: Application configuration
- container: Dependency injection container
- cli: Student tracker and coach command-line runner
"""

__version__ = "0.1.0"
