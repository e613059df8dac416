#!/usr/bin/env python3
"""
import_service.py
-----------------
Applies one normalized sacrament row to the database.

ImportService resolves the row's principal person and attaches every
fact the row records, always in the same order:

    find_person, set_written_race, set_status, add_manumission,
    add_aliases, add_occupations, set_native, add_birth,
    set_birth_status, add_baptism, add_parents, add_godparents,
    add_marriage, add_spouse, add_marriage_witnesses, add_death,
    add_residences, set_notes

Each step reads its own columns, does nothing when they are empty, and
reuses what an earlier import already stored, so importing the same row
twice leaves the database unchanged. The service stages changes in the
session it is given and never commits or rolls back.
"""
from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from sen.core.exceptions import ValidationError
from sen.core.logging_manager import SenLogger, safe_logger
from sen.core.validators import DataValidator
from sen.database.managers import EventManager, PersonManager
from sen.database.models import (
    Event,
    EventCategory,
    Person,
    RelationshipCategory,
    Sex,
    WitnessCategory,
)
from .columns import SacramentColumn as Col, validate_row
from .entity_resolver import EntityResolver

CHURCH = "church"


class ImportService:
    """
    Per-row import logic for sacrament spreadsheets.

    Attributes:
        session: Session owned by the caller
        resolver: EntityResolver shared across the caller's rows
        logger: Optional logger
    """

    def __init__(
        self,
        session: Session,
        resolver: EntityResolver,
        logger: Optional[SenLogger] = None,
    ):
        self.session = session
        self.resolver = resolver
        self.logger = logger
        self.people = PersonManager(session, logger)
        self.events = EventManager(session, logger)

    def process_row(self, row: Sequence[str]) -> Person:
        """
        Import one normalized row.

        Args:
            row: Normalized cells, at least COLUMN_COUNT wide

        Returns:
            The row's principal person

        Raises:
            ColumnCountError: If the row is too narrow
            ValidationError: If a cell cannot be parsed
            DatabaseError: If a flush fails
        """
        validate_row(row)

        person = self.find_person(row)
        self.set_written_race(person, row)
        self.set_status(person, row)
        self.add_manumission(person, row)
        self.add_aliases(person, row)
        self.add_occupations(person, row)
        self.set_native(person, row)
        self.add_birth(person, row)
        self.set_birth_status(person, row)
        baptism = self.add_baptism(person, row)
        self.add_parents(person, row)
        self.add_godparents(person, row, baptism)
        marriage = self.add_marriage(person, row)
        self.add_spouse(person, row, marriage)
        self.add_marriage_witnesses(person, row, marriage)
        self.add_death(person, row)
        self.add_residences(person, row)
        self.set_notes(person, row)

        safe_logger(self.logger).log_debug(
            "Row processed", {"person_id": person.id, "name": person.full_name}
        )
        return person

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _cell(row: Sequence[str], column: Col) -> Optional[str]:
        return DataValidator.normalize_string(row[column])

    def _category(self, name: str) -> EventCategory:
        return self.resolver.find_or_create_lookup(EventCategory, name)

    def _named_person(self, cell: str, sex: Optional[Sex] = None) -> Person:
        """Resolve a person written in a single cell; race is unknown."""
        first_name, last_name = DataValidator.split_name(cell)
        return self.resolver.find_or_create_person(first_name, last_name, None, sex)

    def _link(self, person: Person, relation: Person, category: str) -> None:
        self.people.add_relationship(
            person,
            relation,
            self.resolver.find_or_create_lookup(RelationshipCategory, category),
        )

    def _life_event(
        self,
        person: Person,
        row: Sequence[str],
        attr: str,
        category: str,
        date_column: Col,
        place_column: Col,
        place_category: Optional[str] = None,
    ) -> Optional[Event]:
        """
        Create or complete one of the person's own birth/baptism/death events.

        An existing event is kept and only its missing date or place are
        filled in.
        """
        written = self._cell(row, date_column)
        place = self._cell(row, place_column)
        if written is None and place is None:
            return getattr(person, attr)

        event_date = DataValidator.normalize_date(written)
        location = (
            self.resolver.find_or_create_location(place, place_category)
            if place
            else None
        )

        event = getattr(person, attr)
        if event is None:
            event = self.events.create(
                self._category(category),
                event_date=event_date,
                written_date=written,
                location=location,
            )
            setattr(person, attr, event)
        else:
            if event.date is None and event_date is not None:
                event.date = event_date
                event.written_date = written
            if event.location is None and location is not None:
                event.location = location
        return event

    @staticmethod
    def _find_event(
        events: Sequence[Event], category: str, event_date: Optional[date]
    ) -> Optional[Event]:
        for event in events:
            if event.category.name == category and event.date == event_date:
                return event
        return None

    # -------------------------------------------------------------------------
    # Steps, in processing order
    # -------------------------------------------------------------------------

    def find_person(self, row: Sequence[str]) -> Person:
        """Resolve the row's principal by name, race and sex."""
        return self.resolver.find_or_create_person(
            row[Col.FIRST_NAME],
            row[Col.LAST_NAME],
            row[Col.RACE_ID],
            row[Col.SEX],
        )

    def set_written_race(self, person: Person, row: Sequence[str]) -> None:
        value = self._cell(row, Col.WRITTEN_RACE)
        if value:
            person.written_race = value

    def set_status(self, person: Person, row: Sequence[str]) -> None:
        value = self._cell(row, Col.STATUS)
        if value:
            person.status = value

    def add_manumission(self, person: Person, row: Sequence[str]) -> Optional[Event]:
        """
        Record a manumission, filed in the notary's ledger for that year.

        Raises:
            ValidationError: If a notary is given without a date
        """
        written = self._cell(row, Col.MANUMISSION_DATE)
        notary = self._cell(row, Col.MANUMISSION_NOTARY)
        if written is None and notary is None:
            return None

        event_date = DataValidator.normalize_date(written)
        if notary and event_date is None:
            raise ValidationError(f"Manumission notary '{notary}' given without a date")

        existing = self._find_event(person.events, "manumission", event_date)
        if existing is not None:
            return existing

        ledger = (
            self.resolver.find_or_create_ledger(notary, event_date.year)
            if notary
            else None
        )
        event = self.events.create(
            self._category("manumission"),
            event_date=event_date,
            written_date=written,
            ledger=ledger,
        )
        self.events.add_participant(event, person)
        return event

    def add_aliases(self, person: Person, row: Sequence[str]) -> None:
        for alias in DataValidator.split_list(row[Col.ALIASES]):
            self.people.add_alias(person, alias)

    def add_occupations(self, person: Person, row: Sequence[str]) -> None:
        for occupation in DataValidator.split_list(row[Col.OCCUPATIONS]):
            self.people.add_occupation(person, occupation)

    def set_native(self, person: Person, row: Sequence[str]) -> None:
        place = self._cell(row, Col.NATIVE)
        if place:
            person.native = self.resolver.find_or_create_location(place)

    def add_birth(self, person: Person, row: Sequence[str]) -> Optional[Event]:
        return self._life_event(
            person, row, "birth", "birth", Col.BIRTH_DATE, Col.BIRTH_PLACE
        )

    def set_birth_status(self, person: Person, row: Sequence[str]) -> None:
        value = self._cell(row, Col.BIRTH_STATUS)
        if value:
            person.birth_status = value

    def add_baptism(self, person: Person, row: Sequence[str]) -> Optional[Event]:
        """Record the baptism; the place is categorized as a church."""
        return self._life_event(
            person,
            row,
            "baptism",
            "baptism",
            Col.BAPTISM_DATE,
            Col.BAPTISM_PLACE,
            place_category=CHURCH,
        )

    def add_parents(self, person: Person, row: Sequence[str]) -> None:
        """Link father and mother, in both directions."""
        for column, sex, category in (
            (Col.FATHER, Sex.MALE, "father"),
            (Col.MOTHER, Sex.FEMALE, "mother"),
        ):
            cell = self._cell(row, column)
            if not cell:
                continue
            parent = self._named_person(cell, sex)
            self._link(person, parent, category)
            self._link(parent, person, "child")

    def add_godparents(
        self, person: Person, row: Sequence[str], baptism: Optional[Event]
    ) -> None:
        """
        Record each godparent as a witness of the baptism.

        Raises:
            ValidationError: If godparents are listed but there is no baptism
        """
        names = DataValidator.split_list(row[Col.GODPARENTS])
        if not names:
            return
        if baptism is None:
            raise ValidationError("Godparents listed without a baptism")

        category = self.resolver.find_or_create_lookup(WitnessCategory, "godparent")
        for name in names:
            self.events.add_witness(baptism, self._named_person(name), category)

    def add_marriage(self, person: Person, row: Sequence[str]) -> Optional[Event]:
        """
        Record a marriage with the person as participant.

        A marriage of the person on the same date is reused.
        """
        written = self._cell(row, Col.MARRIAGE_DATE)
        place = self._cell(row, Col.MARRIAGE_PLACE)
        if written is None and place is None:
            return None

        event_date = DataValidator.normalize_date(written)
        location = (
            self.resolver.find_or_create_location(place, CHURCH) if place else None
        )

        marriage = self._find_event(person.marriages, "marriage", event_date)
        if marriage is None:
            marriage = self.events.create(
                self._category("marriage"),
                event_date=event_date,
                written_date=written,
                location=location,
            )
            self.events.add_participant(marriage, person)
        elif marriage.location is None and location is not None:
            marriage.location = location
        return marriage

    def add_spouse(
        self, person: Person, row: Sequence[str], marriage: Optional[Event]
    ) -> Optional[Person]:
        """
        Link the spouse to the person and to the marriage, if any.

        The spouse is assumed to be of the other sex when the person's sex
        is known.
        """
        cell = self._cell(row, Col.SPOUSE)
        if not cell:
            return None

        sex = None
        if person.sex is not None:
            sex = Sex.FEMALE if person.sex is Sex.MALE else Sex.MALE

        spouse = self._named_person(cell, sex)
        if marriage is not None:
            self.events.add_participant(marriage, spouse)
        self._link(person, spouse, "spouse")
        self._link(spouse, person, "spouse")
        return spouse

    def add_marriage_witnesses(
        self, person: Person, row: Sequence[str], marriage: Optional[Event]
    ) -> None:
        """
        Record each wedding witness on the marriage.

        Raises:
            ValidationError: If witnesses are listed but there is no marriage
        """
        names = DataValidator.split_list(row[Col.MARRIAGE_WITNESSES])
        if not names:
            return
        if marriage is None:
            raise ValidationError("Marriage witnesses listed without a marriage")

        category = self.resolver.find_or_create_lookup(WitnessCategory, "wedding")
        for name in names:
            self.events.add_witness(marriage, self._named_person(name), category)

    def add_death(self, person: Person, row: Sequence[str]) -> Optional[Event]:
        return self._life_event(
            person, row, "death", "death", Col.DEATH_DATE, Col.DEATH_PLACE
        )

    def add_residences(self, person: Person, row: Sequence[str]) -> None:
        for place in DataValidator.split_list(row[Col.RESIDENCES]):
            self.people.add_residence(person, self.resolver.find_or_create_location(place))

    def set_notes(self, person: Person, row: Sequence[str]) -> None:
        """Append the row's notes unless the same text is already there."""
        note = self._cell(row, Col.NOTES)
        if not note:
            return
        if not person.notes:
            person.notes = note
        elif note not in person.notes:
            person.notes = f"{person.notes}\n{note}"
