"""
Geography Models
-----------------

Places named in the registers.

Models:
    - Location: A named place (church, town, plantation), optionally
      categorized
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .events import Event
    from .lookups import LocationCategory
    from .people import Person, Residence


class Location(Base, TimestampMixin):
    """
    A place where an event happened or a person lived or came from.

    Attributes:
        id: Primary key
        name: Place name as transcribed (unique)
        category_id: Optional LocationCategory

    Relationships:
        events: Events that took place here
        residences: Residences at this place
        natives: People native to this place
    """

    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("location_categories.id"), nullable=True
    )

    category: Mapped[Optional["LocationCategory"]] = relationship(
        "LocationCategory", back_populates="locations"
    )
    events: Mapped[List["Event"]] = relationship("Event", back_populates="location")
    residences: Mapped[List["Residence"]] = relationship(
        "Residence", back_populates="location"
    )
    natives: Mapped[List["Person"]] = relationship("Person", back_populates="native")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<Location(id={self.id}, name='{self.name}')>"
