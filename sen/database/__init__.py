#!/usr/bin/env python3
"""
SEN Database Package
--------------------
Persistence layer for the sacramental records importer.

- SenDB: engine, sessions and Alembic migrations
- managers: find-or-create and typeahead per entity family
- models: SQLAlchemy ORM models
"""

from .manager import SenDB
from sen.core.exceptions import DatabaseError, ValidationError
from .decorators import log_database_operation, handle_db_errors

__all__ = [
    # Main manager
    "SenDB",
    # Exceptions
    "DatabaseError",
    "ValidationError",
    # Decorators
    "log_database_operation",
    "handle_db_errors",
]
