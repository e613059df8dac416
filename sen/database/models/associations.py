"""
Association Tables
-------------------

Many-to-many relationship tables for the SEN database.

- event_participants: people who are the principals of an event
  (both spouses of a marriage)

Witnesses are not a plain association: they carry a category and live in
the Witness model.
"""
# --- Third party imports ---
from sqlalchemy import Column, ForeignKey, Integer, Table

# --- Local imports ---
from .base import Base

event_participants = Table(
    "event_participants",
    Base.metadata,
    Column(
        "event_id",
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "person_id",
        Integer,
        ForeignKey("people.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
