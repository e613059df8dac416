#!/usr/bin/env python3
"""
entity_resolver.py
------------------
Find-or-create resolution of the entities a sacrament row refers to.

This module provides the EntityResolver class which turns names from a
spreadsheet row into database rows:

- People by exact (first name, last name, race, sex)
- Lookup rows (event, witness, location and relationship categories,
  notaries) by exact name
- Locations by name, with an optional location category
- Ledgers by notary name and year

Resolved rows are cached for the lifetime of the importer. The cache holds
session-bound objects, so it must be cleared whenever the session is
rolled back.

Usage:
    resolver = EntityResolver(session, logger)
    person = resolver.find_or_create_person("John", "Smith", "1", "M")
    church = resolver.find_or_create_lookup(LocationCategory, "church")
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Type, Union

from sqlalchemy.orm import Session

from sen.core.logging_manager import SenLogger
from sen.database.managers import (
    LedgerManager,
    LocationManager,
    LookupManager,
    PersonManager,
)
from sen.database.models import Ledger, Location, LocationCategory, Notary, Person, Sex


class EntityResolver:
    """
    Resolves row values to entities, creating them on first encounter.

    Attributes:
        session: Session owned by the importer
        logger: Optional logger

    Caches:
        people: identity tuple -> Person
        lookups: (model class, name) -> lookup row
        locations: name -> Location
        ledgers: (notary name, year) -> Ledger
    """

    def __init__(self, session: Session, logger: Optional[SenLogger] = None):
        self.session = session
        self.logger = logger

        self.person_manager = PersonManager(session, logger)
        self.location_manager = LocationManager(session, logger)
        self.ledger_manager = LedgerManager(session, logger)
        self._lookup_managers: Dict[Type, LookupManager] = {}

        self.people: Dict[Tuple[Any, ...], Person] = {}
        self.lookups: Dict[Tuple[Type, str], Any] = {}
        self.locations: Dict[str, Location] = {}
        self.ledgers: Dict[Tuple[str, int], Ledger] = {}

    def clear_caches(self) -> None:
        """
        Clear entity caches.

        Call this after a session rollback to avoid stale/detached objects.
        """
        self.people.clear()
        self.lookups.clear()
        self.locations.clear()
        self.ledgers.clear()

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def find_or_create_person(
        self,
        first_name: Optional[str],
        last_name: Optional[str] = None,
        race_id: Optional[str] = None,
        sex: Union[Sex, str, None] = None,
    ) -> Person:
        """
        Resolve a person by exact identity, staging a new Person if absent.

        Raises:
            ValidationError: If the first name is empty or sex is invalid
        """
        identity = PersonManager.identity(first_name, last_name, race_id, sex)
        cache_key = tuple(identity.values())

        if cache_key in self.people:
            return self.people[cache_key]

        person = self.person_manager.get_or_create(**identity)
        self.people[cache_key] = person
        return person

    def find_or_create_lookup(self, model_class: Type, name: str) -> Any:
        """
        Resolve a lookup row by exact name; new rows get a title-cased label.

        Args:
            model_class: EventCategory, WitnessCategory, LocationCategory,
                RelationshipCategory or Notary
            name: Machine name
        """
        cache_key = (model_class, name)
        if cache_key in self.lookups:
            return self.lookups[cache_key]

        manager = self._lookup_managers.get(model_class)
        if manager is None:
            manager = LookupManager.for_model(model_class, self.session, self.logger)
            self._lookup_managers[model_class] = manager

        row = manager.get_or_create(name)
        self.lookups[cache_key] = row
        return row

    def find_or_create_location(
        self, name: str, category: Optional[str] = None
    ) -> Location:
        """
        Resolve a location by name.

        Args:
            name: Place name
            category: LocationCategory name to give a location that has none
        """
        location = self.locations.get(name)
        location_category = (
            self.find_or_create_lookup(LocationCategory, category) if category else None
        )

        if location is None:
            location = self.location_manager.get_or_create(name, location_category)
            self.locations[name] = location
        elif location.category is None and location_category is not None:
            location.category = location_category
        return location

    def find_or_create_ledger(self, notary_name: str, year: int) -> Ledger:
        """Resolve the ledger kept by ``notary_name`` for ``year``."""
        cache_key = (notary_name, year)
        if cache_key in self.ledgers:
            return self.ledgers[cache_key]

        notary = self.find_or_create_lookup(Notary, notary_name)
        ledger = self.ledger_manager.get_or_create(notary, year)
        self.ledgers[cache_key] = ledger
        return ledger
