#!/usr/bin/env python3
"""
location_manager.py
--------------------
Manages Location entities.

Locations are unique by name. A category passed for an existing location
that has none is filled in; an existing category is never overwritten.
"""
from __future__ import annotations

from typing import List, Optional

from sen.core.exceptions import ValidationError
from sen.core.validators import DataValidator
from sen.database.decorators import handle_db_errors, log_database_operation
from sen.database.models import Location, LocationCategory
from .base_manager import BaseManager


class LocationManager(BaseManager):
    """Manages Location table operations."""

    @handle_db_errors
    def get(self, name: str) -> Optional[Location]:
        return self._get_by_field(Location, "name", name)

    @handle_db_errors
    @log_database_operation("get_or_create_location")
    def get_or_create(
        self, name: str, category: Optional[LocationCategory] = None
    ) -> Location:
        """
        Get a location by exact name or create it.

        Args:
            name: Place name
            category: Optional LocationCategory (e.g. church)

        Returns:
            Existing or newly created Location
        """
        normalized = DataValidator.normalize_string(name)
        if normalized is None:
            raise ValidationError("Location name cannot be empty")

        location = self._get_or_create(
            Location, {"name": normalized}, {"category": category}
        )
        if location.category is None and category is not None:
            location.category = category
            self.session.flush()
        return location

    @handle_db_errors
    def get_all(self) -> List[Location]:
        return self._get_all(Location, order_by="name")
