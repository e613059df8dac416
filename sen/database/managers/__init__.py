"""
Entity Managers
---------------

Session-bound managers grouping find-or-create, fact attachment and
search operations per entity family.

Usage:
    with db.session_scope() as session:
        person = db.people.get_or_create("John", "Smith", "1", "M")
        baptism = db.lookups("event_categories").get_or_create("baptism")
"""
from .base_manager import BaseManager
from .event_manager import EventManager
from .ledger_manager import LedgerManager
from .location_manager import LocationManager
from .lookup_manager import LOOKUP_CONFIGS, LookupManager, LookupManagerConfig
from .person_manager import PersonManager

__all__ = [
    "BaseManager",
    "EventManager",
    "LedgerManager",
    "LocationManager",
    "LookupManager",
    "LookupManagerConfig",
    "LOOKUP_CONFIGS",
    "PersonManager",
]
