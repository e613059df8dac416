"""
People Models
--------------

Models for the people named in the registers and the facts attached to
them.

Models:
    - Person: An individual, identified by name, race designator and sex
    - Alias: Alternative name a person was known by
    - Occupation: Trade or office recorded for a person
    - Residence: A place a person lived (owned by exactly one person)
    - Relationship: Directed family link between two people

A Person is created once per unique (first name, last name, race, sex)
combination and then enriched by every row that mentions it, whether as
principal, parent, godparent, spouse or witness.
"""

# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import datetime as dt
from typing import TYPE_CHECKING, List, Optional

# --- Third party imports ---
from sqlalchemy import Date, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

# --- Local imports ---
from .associations import event_participants
from .base import Base, TimestampMixin
from .enums import Sex

if TYPE_CHECKING:
    from .events import Event, Witness
    from .geography import Location
    from .lookups import RelationshipCategory


class Person(Base, TimestampMixin):
    """
    Represents a person named in a sacramental or notarial record.

    Attributes:
        id: Primary key
        first_name: Given name(s)
        last_name: Surname, if recorded
        race_id: Race designator as written in the source column
        sex: Sex designator (M/F), if recorded
        written_race: Race as literally written in the document
        status: Legal status (e.g. enslaved, free)
        birth_status: Birth status (e.g. legitimate, natural)
        notes: Transcriber notes

    Relationships:
        native: Place of origin
        birth / baptism / death: The person's own life events
        events: Events the person is a principal of (marriages)
        aliases, occupations, residences: Attached facts
        relationships: Outgoing family links
        witnessed: Witness records for this person

    Computed Properties:
        full_name: "First Last"
        marriages: Events in ``events`` whose category is marriage
    """

    __tablename__ = "people"
    __table_args__ = (
        Index("ix_people_identity", "first_name", "last_name", "race_id", "sex"),
    )

    # ---- Identity ----
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    race_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    sex: Mapped[Optional[Sex]] = mapped_column(
        SQLEnum(Sex, values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )

    # ---- Facts ----
    written_race: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    birth_status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    native_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("locations.id"), nullable=True
    )
    birth_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("events.id", ondelete="SET NULL"), nullable=True
    )
    baptism_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("events.id", ondelete="SET NULL"), nullable=True
    )
    death_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("events.id", ondelete="SET NULL"), nullable=True
    )

    # ---- Relationships ----
    native: Mapped[Optional["Location"]] = relationship(
        "Location", back_populates="natives"
    )
    birth: Mapped[Optional["Event"]] = relationship("Event", foreign_keys=[birth_id])
    baptism: Mapped[Optional["Event"]] = relationship("Event", foreign_keys=[baptism_id])
    death: Mapped[Optional["Event"]] = relationship("Event", foreign_keys=[death_id])
    events: Mapped[List["Event"]] = relationship(
        "Event", secondary=event_participants, back_populates="participants"
    )
    aliases: Mapped[List["Alias"]] = relationship(
        "Alias", back_populates="person", cascade="all, delete-orphan"
    )
    occupations: Mapped[List["Occupation"]] = relationship(
        "Occupation", back_populates="person", cascade="all, delete-orphan"
    )
    residences: Mapped[List["Residence"]] = relationship(
        "Residence", back_populates="person", cascade="all, delete-orphan"
    )
    relationships: Mapped[List["Relationship"]] = relationship(
        "Relationship",
        foreign_keys="Relationship.person_id",
        back_populates="person",
        cascade="all, delete-orphan",
    )
    witnessed: Mapped[List["Witness"]] = relationship(
        "Witness", back_populates="person", cascade="all, delete-orphan"
    )

    # ---- Computed properties ----
    @property
    def full_name(self) -> str:
        """Given name followed by surname."""
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name

    @property
    def marriages(self) -> List["Event"]:
        """Marriage events this person is a spouse in."""
        return [
            event
            for event in self.events
            if event.category is not None and event.category.name == "marriage"
        ]

    @property
    def alias_names(self) -> List[str]:
        return [alias.name for alias in self.aliases]

    @property
    def occupation_names(self) -> List[str]:
        return [occupation.name for occupation in self.occupations]

    def __str__(self) -> str:
        return self.full_name

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name='{self.full_name}', race_id={self.race_id!r}, sex={self.sex})>"


class Alias(Base, TimestampMixin):
    """Alternative name a person was known by."""

    __tablename__ = "aliases"
    __table_args__ = (
        UniqueConstraint("person_id", "name", name="uq_alias_person_name"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    person_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    )

    person: Mapped["Person"] = relationship("Person", back_populates="aliases")

    def __repr__(self) -> str:
        return f"<Alias(person_id={self.person_id}, name='{self.name}')>"


class Occupation(Base, TimestampMixin):
    """Trade or office recorded for a person."""

    __tablename__ = "occupations"
    __table_args__ = (
        UniqueConstraint("person_id", "name", name="uq_occupation_person_name"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    person_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    )

    person: Mapped["Person"] = relationship("Person", back_populates="occupations")

    def __repr__(self) -> str:
        return f"<Occupation(person_id={self.person_id}, name='{self.name}')>"


class Residence(Base, TimestampMixin):
    """
    A place a person lived.

    Each residence belongs to exactly one person.

    Attributes:
        person_id: Owning person
        location_id: Where the person lived
        date: When the residence was recorded, if known
    """

    __tablename__ = "residences"
    __table_args__ = (
        UniqueConstraint("person_id", "location_id", name="uq_residence_person_location"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"), nullable=False, index=True
    )
    location_id: Mapped[int] = mapped_column(ForeignKey("locations.id"), nullable=False)
    date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)

    person: Mapped["Person"] = relationship("Person", back_populates="residences")
    location: Mapped["Location"] = relationship("Location", back_populates="residences")

    def __str__(self) -> str:
        return f"{self.person} - {self.location}"


class Relationship(Base, TimestampMixin):
    """
    Directed family link: ``relation`` is the ``category`` of ``person``.

    A father link is stored as (child, father, 'father') together with the
    reverse (father, child, 'child').
    """

    __tablename__ = "relationships"
    __table_args__ = (
        UniqueConstraint(
            "person_id", "relation_id", "category_id", name="uq_relationship"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"), nullable=False, index=True
    )
    relation_id: Mapped[int] = mapped_column(
        ForeignKey("people.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("relationship_categories.id"), nullable=False
    )

    person: Mapped["Person"] = relationship(
        "Person", foreign_keys=[person_id], back_populates="relationships"
    )
    relation: Mapped["Person"] = relationship("Person", foreign_keys=[relation_id])
    category: Mapped["RelationshipCategory"] = relationship(
        "RelationshipCategory", back_populates="relationships"
    )

    def __str__(self) -> str:
        return f"{self.relation} ({self.category}) of {self.person}"
