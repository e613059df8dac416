"""
Enumeration Types
------------------

Enum classes for the SEN database models.

Enums:
    - Sex: Sex designator as written in the registers
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum


class Sex(str, Enum):
    """
    Sex designator recorded for a person.

    Stored as the single-letter code used in the transcriptions.
    - MALE: 'M'
    - FEMALE: 'F'
    """

    MALE = "M"
    FEMALE = "F"
