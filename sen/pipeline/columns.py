#!/usr/bin/env python3
"""
columns.py
----------
Column layout of the sacramental records spreadsheet.

Every reader of a normalized row goes through SacramentColumn instead of
bare integer positions, so the layout is declared exactly once.

Cell conventions:
    - Multi-valued cells (aliases, godparents...) are ``;``-separated
    - A person named in a cell is ``First Last`` or ``Last, First``
    - Dates are ``DD/MM/YYYY`` or ``YYYY-MM-DD``
    - Sex is ``M`` or ``F``
"""
from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from sen.core.exceptions import ColumnCountError


class SacramentColumn(IntEnum):
    """Zero-based position of each field in a sacrament row."""

    LAST_NAME = 0
    FIRST_NAME = 1
    RACE_ID = 2
    SEX = 3
    WRITTEN_RACE = 4
    STATUS = 5
    MANUMISSION_DATE = 6
    MANUMISSION_NOTARY = 7
    ALIASES = 8
    OCCUPATIONS = 9
    NATIVE = 10
    BIRTH_DATE = 11
    BIRTH_PLACE = 12
    BIRTH_STATUS = 13
    BAPTISM_DATE = 14
    BAPTISM_PLACE = 15
    FATHER = 16
    MOTHER = 17
    GODPARENTS = 18
    MARRIAGE_DATE = 19
    MARRIAGE_PLACE = 20
    SPOUSE = 21
    MARRIAGE_WITNESSES = 22
    DEATH_DATE = 23
    DEATH_PLACE = 24
    RESIDENCES = 25
    NOTES = 26


COLUMN_COUNT = len(SacramentColumn)


def validate_row(row: Sequence[str]) -> None:
    """
    Check that a row is wide enough for every SacramentColumn.

    Extra trailing columns are allowed and ignored.

    Raises:
        ColumnCountError: If the row has fewer than COLUMN_COUNT fields
    """
    if len(row) < COLUMN_COUNT:
        raise ColumnCountError(COLUMN_COUNT, len(row))
