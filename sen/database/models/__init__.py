"""
Database Models Package
------------------------

SQLAlchemy ORM models for the SEN sacramental records database.

This package provides a modular organization of database models:
- base: Base class and mixins
- associations: Many-to-many relationship tables
- enums: Enumeration types
- lookups: EventCategory, WitnessCategory, LocationCategory, RelationshipCategory
- people: Person, Alias, Occupation, Residence, Relationship
- events: Event, Witness
- geography: Location
- records: Notary, Ledger

Usage:
    from sen.database.models import Person, Event, EventCategory
"""
# Base classes
from .base import Base, LookupMixin, TimestampMixin

# Enumerations
from .enums import Sex

# Association tables (for direct usage if needed)
from .associations import event_participants

# Lookup models
from .lookups import (
    EventCategory,
    LocationCategory,
    RelationshipCategory,
    WitnessCategory,
)

# Geography models
from .geography import Location

# People models
from .people import Alias, Occupation, Person, Relationship, Residence

# Event models
from .events import Event, Witness

# Notarial records
from .records import Ledger, Notary

__all__ = [
    # Base
    "Base",
    "LookupMixin",
    "TimestampMixin",
    # Enums
    "Sex",
    # Association tables
    "event_participants",
    # Lookups
    "EventCategory",
    "LocationCategory",
    "RelationshipCategory",
    "WitnessCategory",
    # Geography
    "Location",
    # People
    "Alias",
    "Occupation",
    "Person",
    "Relationship",
    "Residence",
    # Events
    "Event",
    "Witness",
    # Records
    "Ledger",
    "Notary",
]
