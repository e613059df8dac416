#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for SEN imports.

Provides type-safe conversion of spreadsheet cells into the values the
database layer stores: dates in the transcription conventions, sex
designators, person names, multi-valued cells and labels.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional, Tuple, Type, TypeVar

from .exceptions import ValidationError

E = TypeVar("E", bound=Enum)

# Separator for cells holding more than one value (aliases, godparents...)
LIST_SEPARATOR = ";"

_DMY_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_ISO_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


class DataValidator:
    """Centralized data validation for import and database operations."""

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Strip a value and collapse empty strings to None.

        Args:
            value: Value to normalize

        Returns:
            Stripped string or None
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_date(value: Any) -> Optional[date]:
        """
        Parse a transcribed date.

        Accepted forms are day-first ``DD/MM/YYYY`` (the transcription
        convention, so ``01/02/1800`` is 1 February 1800) and ISO
        ``YYYY-MM-DD``.

        Args:
            value: Date string, date or datetime

        Returns:
            Parsed date, or None for empty input

        Raises:
            ValidationError: If the value cannot be parsed
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value

        text = DataValidator.normalize_string(value)
        if text is None:
            return None

        match = _DMY_PATTERN.match(text)
        if match:
            day, month, year = (int(part) for part in match.groups())
        else:
            match = _ISO_PATTERN.match(text)
            if not match:
                raise ValidationError(f"Invalid date '{text}'")
            year, month, day = (int(part) for part in match.groups())

        try:
            return date(year, month, day)
        except ValueError as e:
            raise ValidationError(f"Invalid date '{text}': {e}") from e

    @staticmethod
    def normalize_enum(
        value: Any, enum_class: Type[E], field_name: str
    ) -> Optional[E]:
        """
        Convert a cell to an enum member, matching values case-insensitively.

        Args:
            value: Raw cell or enum member
            enum_class: Target enum class
            field_name: Field name for error messages

        Returns:
            Enum member or None for empty input

        Raises:
            ValidationError: If the value is not a valid member
        """
        if value is None or isinstance(value, enum_class):
            return value

        text = DataValidator.normalize_string(value)
        if text is None:
            return None

        for member in enum_class:
            if str(member.value).lower() == text.lower():
                return member

        choices = ", ".join(str(m.value) for m in enum_class)
        raise ValidationError(
            f"Invalid {field_name} '{text}'. Expected one of: {choices}"
        )

    @staticmethod
    def split_list(value: Any) -> List[str]:
        """
        Split a multi-valued cell on semicolons.

        Empty pieces are dropped and duplicates collapsed, keeping the first
        occurrence's position.

        Examples:
            >>> DataValidator.split_list("Juana; La Negra;;Juana")
            ['Juana', 'La Negra']
        """
        text = DataValidator.normalize_string(value)
        if text is None:
            return []

        items: List[str] = []
        for piece in text.split(LIST_SEPARATOR):
            piece = piece.strip()
            if piece and piece not in items:
                items.append(piece)
        return items

    @staticmethod
    def split_name(value: Any) -> Tuple[str, Optional[str]]:
        """
        Split a person name written in a single cell.

        ``"Last, First"`` is split on the comma; otherwise the first word is
        the first name and the rest is the last name.

        Examples:
            >>> DataValidator.split_name("Maria Josefa Garcia")
            ('Maria', 'Josefa Garcia')
            >>> DataValidator.split_name("Garcia, Maria")
            ('Maria', 'Garcia')
            >>> DataValidator.split_name("Maria")
            ('Maria', None)

        Raises:
            ValidationError: If the cell holds no name
        """
        text = DataValidator.normalize_string(value)
        if text is None:
            raise ValidationError("Person name cannot be empty")

        if "," in text:
            last, _, first = text.partition(",")
            first_name = first.strip()
            last_name = last.strip() or None
        else:
            first_name, _, last = text.partition(" ")
            last_name = last.strip() or None

        if not first_name:
            raise ValidationError(f"Invalid person name '{text}'")
        return first_name, last_name

    @staticmethod
    def title_case(value: str) -> str:
        """
        Title-case a lookup name to derive its display label.

        Examples:
            >>> DataValidator.title_case("first communion")
            'First Communion'
            >>> DataValidator.title_case("1st communion")
            '1st Communion'
        """
        return re.sub(
            r"(^|\s)(\w)", lambda m: m.group(1) + m.group(2).upper(), value.lower()
        )
