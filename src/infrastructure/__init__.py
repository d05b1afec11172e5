"""
Infrastructure layer - external service integrations.

- database: SQLAlchemy engine, session management, table mapping and DAOs

These wrappers translate between the ORM and our domain models.
"""
