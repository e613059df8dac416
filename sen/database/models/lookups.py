"""
Lookup Models
--------------

Small reference tables shared by many people and events.

Models:
    - EventCategory: birth, baptism, marriage, death, manumission...
    - WitnessCategory: capacity of a witness (godparent, wedding...)
    - LocationCategory: kind of place (church...)
    - RelationshipCategory: family link (father, mother, child, spouse)

All of them are resolved by exact name and created on first encounter
during an import.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import TYPE_CHECKING, List

# --- Third party imports ---
from sqlalchemy.orm import Mapped, relationship

# --- Local imports ---
from .base import Base, LookupMixin

if TYPE_CHECKING:
    from .events import Event, Witness
    from .geography import Location
    from .people import Relationship


class EventCategory(Base, LookupMixin):
    """Kind of event recorded in a register entry."""

    __tablename__ = "event_categories"

    events: Mapped[List["Event"]] = relationship("Event", back_populates="category")


class WitnessCategory(Base, LookupMixin):
    """Capacity in which a person witnessed an event."""

    __tablename__ = "witness_categories"

    witnesses: Mapped[List["Witness"]] = relationship(
        "Witness", back_populates="category"
    )


class LocationCategory(Base, LookupMixin):
    """Kind of place (church, plantation, parish...)."""

    __tablename__ = "location_categories"

    locations: Mapped[List["Location"]] = relationship(
        "Location", back_populates="category"
    )


class RelationshipCategory(Base, LookupMixin):
    """Kind of family link between two people."""

    __tablename__ = "relationship_categories"

    relationships: Mapped[List["Relationship"]] = relationship(
        "Relationship", back_populates="category"
    )
