#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base manager providing common lookup and find-or-create utilities.
All entity managers should inherit from this class.

Key Features:
    - Generic get-or-create on exact field values
    - Field lookups with string normalization
    - Listing and counting helpers
    - Object resolution helpers

Managers never commit or roll back: the caller owns the transaction. A
failed flush surfaces as DatabaseError through ``handle_db_errors`` and
the caller decides what to discard.

Example:
    class LocationManager(BaseManager):
        def get_or_create(self, name: str) -> Location:
            return self._get_or_create(Location, {"name": name})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC
from typing import Any, Dict, List, Optional, Protocol, Type, TypeVar

# --- Third party imports ---
from sqlalchemy.orm import Mapped, Session

# --- Local imports ---
from sen.core.logging_manager import SenLogger
from sen.core.validators import DataValidator


class HasId(Protocol):
    """Protocol for objects that have an id attribute."""

    id: Mapped[int]


T = TypeVar("T", bound=HasId)


class BaseManager(ABC):
    """
    Abstract base manager providing common operations and utilities.

    Attributes:
        session: SQLAlchemy session for database operations
        logger: Optional logger for operation tracking
    """

    def __init__(self, session: Session, logger: Optional[SenLogger] = None):
        """
        Initialize the base manager.

        Args:
            session: SQLAlchemy session
            logger: Optional logger for operation tracking
        """
        self.session = session
        self.logger = logger

    # -------------------------------------------------------------------------
    # Core Helper Methods
    # -------------------------------------------------------------------------

    def _get_or_create(
        self,
        model_class: Type[T],
        lookup_fields: Dict[str, Any],
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> T:
        """
        Get an existing row matching ``lookup_fields`` exactly or create it.

        Args:
            model_class: ORM model class to query or create
            lookup_fields: Dictionary of field_name: value to filter/create
            extra_fields: Additional fields for new object creation only

        Returns:
            ORM instance of the model class

        Notes:
            - ``None`` values in ``lookup_fields`` match NULL columns
            - The session autoflushes before the query, so objects staged
              earlier in the same transaction are found
            - The new object is added to the session and flushed immediately
        """
        obj = self.session.query(model_class).filter_by(**lookup_fields).first()
        if obj:
            return obj

        fields = lookup_fields.copy()
        if extra_fields:
            fields.update(extra_fields)

        obj = model_class(**fields)
        self.session.add(obj)
        self.session.flush()
        return obj

    # -------------------------------------------------------------------------
    # Generic Query Helpers
    # -------------------------------------------------------------------------

    def _get_by_field(
        self,
        model_class: Type[T],
        field_name: str,
        value: Any,
        normalize: bool = True,
    ) -> Optional[T]:
        """
        Get entity by a specific field value.

        Args:
            model_class: ORM model class
            field_name: Field name to filter by
            value: Value to look up
            normalize: Whether to normalize string values

        Returns:
            Entity if found, None otherwise
        """
        if value is None:
            return None

        if normalize and isinstance(value, str):
            value = DataValidator.normalize_string(value)
            if not value:
                return None

        return (
            self.session.query(model_class).filter_by(**{field_name: value}).first()
        )

    def _get_all(
        self,
        model_class: Type[T],
        order_by: Optional[str] = None,
        **filters: Any,
    ) -> List[T]:
        """
        Get all entities of a type with optional filtering and ordering.

        Args:
            model_class: ORM model class
            order_by: Field name to order by (optional)
            **filters: Additional filter conditions

        Returns:
            List of entities
        """
        query = self.session.query(model_class)

        if filters:
            query = query.filter_by(**filters)

        if order_by and hasattr(model_class, order_by):
            query = query.order_by(getattr(model_class, order_by))

        return query.all()

    def _count(self, model_class: Type[T], **filters: Any) -> int:
        """
        Count entities with optional filtering.

        Args:
            model_class: ORM model class
            **filters: Additional filter conditions

        Returns:
            Count of matching entities
        """
        query = self.session.query(model_class)
        if filters:
            query = query.filter_by(**filters)
        return query.count()
