#!/usr/bin/env python3
"""
event_manager.py
--------------------
Manages Event entities, their participants and witnesses.

Events are created for a single person fact (a birth, a baptism...) and
are never deduplicated across people: two people baptised on the same day
have two events. Deduplication happens per person in the import service.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from sen.database.decorators import handle_db_errors, log_database_operation
from sen.database.models import (
    Event,
    EventCategory,
    Ledger,
    Location,
    Person,
    Witness,
    WitnessCategory,
)
from .base_manager import BaseManager


class EventManager(BaseManager):
    """Manages Event and Witness table operations."""

    @handle_db_errors
    @log_database_operation("create_event")
    def create(
        self,
        category: EventCategory,
        event_date: Optional[date] = None,
        written_date: Optional[str] = None,
        location: Optional[Location] = None,
        ledger: Optional[Ledger] = None,
        note: Optional[str] = None,
    ) -> Event:
        """
        Stage a new event.

        Args:
            category: EventCategory (birth, baptism...)
            event_date: Parsed date
            written_date: Date as transcribed
            location: Where it happened
            ledger: Ledger it was recorded in
            note: Free-text note

        Returns:
            The new, flushed Event
        """
        event = Event(
            category=category,
            date=event_date,
            written_date=written_date,
            location=location,
            ledger=ledger,
            note=note,
        )
        self.session.add(event)
        self.session.flush()
        return event

    @handle_db_errors
    def add_participant(self, event: Event, person: Person) -> None:
        """Add a principal to the event if not already present."""
        if person not in event.participants:
            event.participants.append(person)
            self.session.flush()

    @handle_db_errors
    def add_witness(
        self, event: Event, person: Person, category: WitnessCategory
    ) -> Witness:
        """Record ``person`` as a witness of ``event`` in ``category``."""
        for witness in event.witnesses:
            if witness.person is person and witness.category is category:
                return witness
        witness = Witness(person=person, category=category)
        event.witnesses.append(witness)
        self.session.flush()
        return witness

    @handle_db_errors
    def get_for_category(self, category: EventCategory) -> List[Event]:
        return (
            self.session.query(Event)
            .filter(Event.category_id == category.id)
            .order_by(Event.date)
            .all()
        )
