#!/usr/bin/env python3
"""
person_manager.py
--------------------
Manages Person entities and the facts hanging directly off them.

Handles:
    - Identity lookup on (first name, last name, race, sex)
    - Find-or-create of people mentioned anywhere in a row
    - Aliases, occupations, residences and family relationships
    - Typeahead search by name prefix

Every ``add_*`` method is idempotent: adding a fact that is already
present returns the existing row.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional, Union

# --- Third party imports ---
from sqlalchemy import or_

# --- Local imports ---
from sen.core.exceptions import ValidationError
from sen.core.logging_manager import safe_logger
from sen.core.validators import DataValidator
from sen.database.decorators import handle_db_errors, log_database_operation
from sen.database.models import (
    Alias,
    Location,
    Occupation,
    Person,
    Relationship,
    RelationshipCategory,
    Residence,
    Sex,
)
from .base_manager import BaseManager


class PersonManager(BaseManager):
    """
    Manages Person table operations.

    A person is identified by the exact tuple ``(first_name, last_name,
    race_id, sex)``; empty values compare as NULL.
    """

    @staticmethod
    def identity(
        first_name: Optional[str],
        last_name: Optional[str],
        race_id: Optional[str],
        sex: Union[Sex, str, None],
    ) -> dict:
        """Normalized identity as keyword arguments for filter_by."""
        first = DataValidator.normalize_string(first_name)
        if first is None:
            raise ValidationError("Person first name cannot be empty")
        return {
            "first_name": first,
            "last_name": DataValidator.normalize_string(last_name),
            "race_id": DataValidator.normalize_string(race_id),
            "sex": DataValidator.normalize_enum(sex, Sex, "sex"),
        }

    @handle_db_errors
    @log_database_operation("get_person")
    def get(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        race_id: Optional[str] = None,
        sex: Union[Sex, str, None] = None,
        person_id: Optional[int] = None,
    ) -> Optional[Person]:
        """
        Retrieve a person by identity tuple or by ID.

        Notes:
            If ``person_id`` is given it takes precedence.
        """
        if person_id is not None:
            return self.session.get(Person, person_id)

        identity = self.identity(first_name, last_name, race_id, sex)
        return self.session.query(Person).filter_by(**identity).first()

    @handle_db_errors
    @log_database_operation("get_or_create_person")
    def get_or_create(
        self,
        first_name: Optional[str],
        last_name: Optional[str] = None,
        race_id: Optional[str] = None,
        sex: Union[Sex, str, None] = None,
    ) -> Person:
        """
        Get a person by identity tuple or stage a new one.

        Args:
            first_name: Given name (required)
            last_name: Surname
            race_id: Race designator
            sex: 'M', 'F', a Sex member, or empty

        Returns:
            Existing or newly created Person

        Raises:
            ValidationError: If the first name is empty or sex is invalid
        """
        identity = self.identity(first_name, last_name, race_id, sex)
        person = self._get_or_create(Person, identity)
        safe_logger(self.logger).log_debug(
            "Resolved person", {"id": person.id, "name": person.full_name}
        )
        return person

    @handle_db_errors
    def get_all(self) -> List[Person]:
        return (
            self.session.query(Person)
            .order_by(Person.last_name, Person.first_name)
            .all()
        )

    @handle_db_errors
    @log_database_operation("person_typeahead")
    def typeahead(self, query: str, limit: int = 20) -> List[Person]:
        """
        Find people whose last or first name starts with ``query``.

        Returns:
            Matching people ordered by last name, then first name
        """
        pattern = f"{query}%"
        return (
            self.session.query(Person)
            .filter(or_(Person.last_name.like(pattern), Person.first_name.like(pattern)))
            .order_by(Person.last_name, Person.first_name, Person.id)
            .limit(limit)
            .all()
        )

    # -------------------------------------------------------------------------
    # Attached facts
    # -------------------------------------------------------------------------

    @handle_db_errors
    def add_alias(self, person: Person, alias_name: str) -> Alias:
        """Attach an alias unless the person already has it."""
        for alias in person.aliases:
            if alias.name == alias_name:
                return alias
        alias = Alias(name=alias_name)
        person.aliases.append(alias)
        self.session.flush()
        return alias

    @handle_db_errors
    def add_occupation(self, person: Person, occupation_name: str) -> Occupation:
        """Attach an occupation unless the person already has it."""
        for occupation in person.occupations:
            if occupation.name == occupation_name:
                return occupation
        occupation = Occupation(name=occupation_name)
        person.occupations.append(occupation)
        self.session.flush()
        return occupation

    @handle_db_errors
    def add_residence(self, person: Person, location: Location) -> Residence:
        """Record that the person lived at ``location``."""
        for residence in person.residences:
            if residence.location is location:
                return residence
        residence = Residence(location=location)
        person.residences.append(residence)
        self.session.flush()
        return residence

    @handle_db_errors
    def add_relationship(
        self, person: Person, relation: Person, category: RelationshipCategory
    ) -> Relationship:
        """
        Record that ``relation`` is the ``category`` of ``person``.

        Only the given direction is stored; callers add the reverse edge.
        """
        for link in person.relationships:
            if link.relation is relation and link.category is category:
                return link
        link = Relationship(relation=relation, category=category)
        person.relationships.append(link)
        self.session.flush()
        return link
