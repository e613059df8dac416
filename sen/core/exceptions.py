#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the SEN project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in different subsystems.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all database-related errors
    ├── ValidationError - Data validation failures
    │   └── ColumnCountError - CSV row narrower than the column schema
    └── RowImportError - One CSV row failed to import (tagged by kind)

Usage:
    from sen.core.exceptions import DatabaseError, ValidationError

    try:
        service.process_row(row)
    except ValidationError as e:
        logger.log_warning(f"Invalid data: {e}")
    except DatabaseError as e:
        logger.log_error(e)
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from sqlalchemy.exc import SQLAlchemyError


class DatabaseError(Exception):
    """
    Base exception for database-related errors.

    Raised when database operations fail due to connection issues,
    query errors, integrity violations, or other database problems.

    Examples:
        >>> raise DatabaseError("Connection to database failed")
        >>> raise DatabaseError("Data integrity violation: UNIQUE constraint failed")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Unparseable dates
    - Unknown sex designators
    - Missing required fields
    - Malformed person names

    Examples:
        >>> raise ValidationError("Invalid date '31/02/1800'")
        >>> raise ValidationError("Required field 'name' missing or empty")
    """

    pass


class ColumnCountError(ValidationError):
    """
    Exception for CSV rows that do not match the column schema.

    Raised when a row (or the first line of a file) has fewer fields than
    the sacrament column schema expects. Positional columns cannot be
    trusted once the layout has drifted.

    Attributes:
        expected: Number of columns the schema requires
        actual: Number of columns found in the row
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Column count mismatch: expected {expected} columns, found {actual}"
        )


class RowImportError(Exception):
    """
    Exception for a single CSV row that failed to import.

    Wraps whatever went wrong while processing one row so that the
    importer can report it with file and row context and carry on with
    the next row. The ``kind`` tag keeps bad data apart from storage
    failures in the logs.

    Kinds:
        - column_count: Row narrower than the column schema
        - data: Unparseable or invalid field value
        - storage: The database rejected the row (constraint, connection)
        - unexpected: Anything else

    Attributes:
        file: CSV file the row came from
        row: 1-based record number within the file
        cause: The underlying exception
        kind: One of the kinds above

    Examples:
        >>> err = RowImportError("baptisms.csv", 12, ValidationError("Invalid date"))
        >>> str(err)
        'baptisms.csv:12 - Invalid date'
    """

    KINDS = ("column_count", "data", "storage", "unexpected")

    def __init__(
        self,
        file: Union[str, Path],
        row: int,
        cause: BaseException,
        kind: str = "unexpected",
    ) -> None:
        if kind not in self.KINDS:
            raise ValueError(f"Unknown row import error kind: {kind}")
        self.file = str(file)
        self.row = row
        self.cause = cause
        self.kind = kind
        super().__init__(f"{self.file}:{self.row} - {self.message}")

    @property
    def message(self) -> str:
        """Message of the underlying cause."""
        return str(self.cause) or type(self.cause).__name__

    @classmethod
    def classify(cls, error: BaseException) -> str:
        """
        Work out the kind tag for an exception raised while importing a row.

        Args:
            error: Exception raised by the import service or the flush

        Returns:
            Kind tag string
        """
        if isinstance(error, ColumnCountError):
            return "column_count"
        if isinstance(error, ValidationError):
            return "data"
        if isinstance(error, (DatabaseError, SQLAlchemyError)):
            return "storage"
        return "unexpected"
