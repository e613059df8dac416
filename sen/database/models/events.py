"""
Event Models
-------------

Dated facts recorded in the registers and the people who witnessed them.

Models:
    - Event: A birth, baptism, marriage, death or manumission
    - Witness: A person present at an event in a given capacity

Events are distinguished by their EventCategory rather than by separate
tables; a person's birth, baptism and death are linked directly from the
Person row while marriages go through the participants association.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import datetime as dt
from typing import TYPE_CHECKING, List, Optional

# --- Third party imports ---
from sqlalchemy import Date, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

# --- Local imports ---
from .associations import event_participants
from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .geography import Location
    from .lookups import EventCategory, WitnessCategory
    from .people import Person
    from .records import Ledger


class Event(Base, TimestampMixin):
    """
    A dated fact from a register entry.

    Attributes:
        id: Primary key
        category_id: EventCategory (birth, baptism, marriage...)
        date: Parsed date, if any
        written_date: Date exactly as transcribed
        location_id: Where it happened
        ledger_id: Notarial ledger the fact was recorded in (manumissions)
        note: Free-text note

    Relationships:
        participants: Principals of the event (spouses of a marriage)
        witnesses: Witness records
    """

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("event_categories.id"), nullable=False, index=True
    )
    date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True, index=True)
    written_date: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    location_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("locations.id"), nullable=True
    )
    ledger_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("ledgers.id"), nullable=True
    )
    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    category: Mapped["EventCategory"] = relationship(
        "EventCategory", back_populates="events"
    )
    location: Mapped[Optional["Location"]] = relationship(
        "Location", back_populates="events"
    )
    ledger: Mapped[Optional["Ledger"]] = relationship("Ledger", back_populates="events")
    participants: Mapped[List["Person"]] = relationship(
        "Person", secondary=event_participants, back_populates="events"
    )
    witnesses: Mapped[List["Witness"]] = relationship(
        "Witness", back_populates="event", cascade="all, delete-orphan"
    )

    @property
    def date_formatted(self) -> str:
        """Date as YYYY-MM-DD, or the written form when unparsed."""
        if self.date is not None:
            return self.date.isoformat()
        return self.written_date or ""

    def __str__(self) -> str:
        return f"{self.category} {self.date_formatted}".strip()

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, category_id={self.category_id}, date={self.date})>"


class Witness(Base, TimestampMixin):
    """
    A person who witnessed an event in some capacity.

    The triple (person, event, category) is unique so re-importing the
    same row never adds a second godparent or wedding witness.
    """

    __tablename__ = "witnesses"
    __table_args__ = (
        UniqueConstraint("person_id", "event_id", "category_id", name="uq_witness"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"), nullable=False, index=True
    )
    event_id: Mapped[int] = mapped_column(
        ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("witness_categories.id"), nullable=False
    )

    person: Mapped["Person"] = relationship("Person", back_populates="witnessed")
    event: Mapped["Event"] = relationship("Event", back_populates="witnesses")
    category: Mapped["WitnessCategory"] = relationship(
        "WitnessCategory", back_populates="witnesses"
    )

    def __str__(self) -> str:
        return f"{self.person} ({self.category})"
