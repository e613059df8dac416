#!/usr/bin/env python3
"""
lookup_manager.py
-----------------
Config-driven manager for small reference tables: event, witness, location
and relationship categories, and notaries.

Each lookup type is defined by a LookupManagerConfig that specifies:
- The model class
- Whether rows carry a display label derived from the name
- A human-readable name for messages

Usage:
    # Get pre-configured managers
    categories = LookupManager.for_event_categories(session, logger)
    notaries = LookupManager.for_notaries(session, logger)

    # Common operations
    baptism = categories.get_or_create("baptism")   # label 'Baptism'
    notary = notaries.get_or_create("Name 1")
    matches = categories.typeahead("bap")
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Type

from sqlalchemy import or_
from sqlalchemy.orm import Session

from sen.core.exceptions import ValidationError
from sen.core.logging_manager import SenLogger, safe_logger
from sen.core.validators import DataValidator
from sen.database.decorators import handle_db_errors, log_database_operation
from sen.database.models import (
    EventCategory,
    LocationCategory,
    Notary,
    RelationshipCategory,
    WitnessCategory,
)
from .base_manager import BaseManager


@dataclass
class LookupManagerConfig:
    """
    Configuration for a lookup manager.

    Attributes:
        model_class: SQLAlchemy model class
        display_name: Human-readable name for error messages
        has_label: Whether the model stores a title-cased display label
    """

    model_class: Type
    display_name: str
    has_label: bool = True


# Pre-defined configurations for each lookup type
EVENT_CATEGORY_CONFIG = LookupManagerConfig(EventCategory, "event category")
WITNESS_CATEGORY_CONFIG = LookupManagerConfig(WitnessCategory, "witness category")
LOCATION_CATEGORY_CONFIG = LookupManagerConfig(LocationCategory, "location category")
RELATIONSHIP_CATEGORY_CONFIG = LookupManagerConfig(
    RelationshipCategory, "relationship category"
)
NOTARY_CONFIG = LookupManagerConfig(Notary, "notary", has_label=False)

# Lookup kinds addressable by name from the CLI and seed file
LOOKUP_CONFIGS: Dict[str, LookupManagerConfig] = {
    "event_categories": EVENT_CATEGORY_CONFIG,
    "witness_categories": WITNESS_CATEGORY_CONFIG,
    "location_categories": LOCATION_CATEGORY_CONFIG,
    "relationship_categories": RELATIONSHIP_CATEGORY_CONFIG,
    "notaries": NOTARY_CONFIG,
}


class LookupManager(BaseManager):
    """
    Generic manager for lookup entities resolved by exact name.

    Names are matched exactly (no case or diacritic folding); a row that
    is created gets ``label = title-case(name)`` unless a label is given.
    """

    def __init__(
        self,
        session: Session,
        logger: Optional[SenLogger],
        config: LookupManagerConfig,
    ):
        super().__init__(session, logger)
        self.config = config

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def for_model(
        cls, model_class: Type, session: Session, logger: Optional[SenLogger] = None
    ) -> "LookupManager":
        """Create a manager for any configured lookup model class."""
        for config in LOOKUP_CONFIGS.values():
            if config.model_class is model_class:
                return cls(session, logger, config)
        raise ValueError(f"{model_class.__name__} is not a lookup model")

    @classmethod
    def for_kind(
        cls, kind: str, session: Session, logger: Optional[SenLogger] = None
    ) -> "LookupManager":
        """Create a manager from a kind name such as 'event_categories'."""
        try:
            config = LOOKUP_CONFIGS[kind]
        except KeyError:
            choices = ", ".join(LOOKUP_CONFIGS)
            raise ValueError(f"Unknown lookup kind '{kind}'. Expected one of: {choices}")
        return cls(session, logger, config)

    @classmethod
    def for_event_categories(
        cls, session: Session, logger: Optional[SenLogger] = None
    ) -> "LookupManager":
        """Create a manager for EventCategory entities."""
        return cls(session, logger, EVENT_CATEGORY_CONFIG)

    @classmethod
    def for_witness_categories(
        cls, session: Session, logger: Optional[SenLogger] = None
    ) -> "LookupManager":
        """Create a manager for WitnessCategory entities."""
        return cls(session, logger, WITNESS_CATEGORY_CONFIG)

    @classmethod
    def for_location_categories(
        cls, session: Session, logger: Optional[SenLogger] = None
    ) -> "LookupManager":
        """Create a manager for LocationCategory entities."""
        return cls(session, logger, LOCATION_CATEGORY_CONFIG)

    @classmethod
    def for_relationship_categories(
        cls, session: Session, logger: Optional[SenLogger] = None
    ) -> "LookupManager":
        """Create a manager for RelationshipCategory entities."""
        return cls(session, logger, RELATIONSHIP_CATEGORY_CONFIG)

    @classmethod
    def for_notaries(
        cls, session: Session, logger: Optional[SenLogger] = None
    ) -> "LookupManager":
        """Create a manager for Notary entities."""
        return cls(session, logger, NOTARY_CONFIG)

    # -------------------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------------------

    def _normalize_name(self, name: Optional[str]) -> str:
        normalized = DataValidator.normalize_string(name)
        if normalized is None:
            raise ValidationError(f"{self.config.display_name.capitalize()} name cannot be empty")
        return normalized

    @handle_db_errors
    def get(self, name: str) -> Optional[object]:
        """
        Retrieve a lookup row by its exact name.

        Returns:
            The row if found, None otherwise
        """
        return self._get_by_field(self.config.model_class, "name", name)

    @handle_db_errors
    @log_database_operation("get_or_create_lookup")
    def get_or_create(self, name: str, label: Optional[str] = None) -> object:
        """
        Get a lookup row by exact name or create it.

        Args:
            name: Machine name as it appears in the source
            label: Display label for a new row (default: title-cased name)

        Returns:
            Existing or newly created row

        Raises:
            ValidationError: If name is empty
            DatabaseError: If the insert fails
        """
        name = self._normalize_name(name)
        extra = None
        if self.config.has_label:
            extra = {"label": label or DataValidator.title_case(name)}

        obj = self._get_or_create(self.config.model_class, {"name": name}, extra)
        safe_logger(self.logger).log_debug(
            f"Resolved {self.config.display_name}", {"name": name, "id": obj.id}
        )
        return obj

    @handle_db_errors
    def get_all(self) -> List[object]:
        """Return every row of this lookup, ordered by name."""
        return self._get_all(self.config.model_class, order_by="name")

    @handle_db_errors
    def count(self) -> int:
        return self._count(self.config.model_class)

    @handle_db_errors
    @log_database_operation("lookup_typeahead")
    def typeahead(self, query: str, limit: int = 20) -> List[object]:
        """
        Find lookup rows whose name (or label) starts with ``query``.

        Args:
            query: Prefix to search for
            limit: Maximum number of results

        Returns:
            Matching rows ordered by name
        """
        model = self.config.model_class
        pattern = f"{query}%"
        condition = model.name.like(pattern)
        if self.config.has_label:
            condition = or_(condition, model.label.like(pattern))

        return (
            self.session.query(model)
            .filter(condition)
            .order_by(model.name)
            .limit(limit)
            .all()
        )
