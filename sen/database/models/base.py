"""
Base Classes and Mixins
------------------------

Foundational ORM classes for the SEN database.

Classes:
    - Base: Declarative base for all SQLAlchemy models
    - TimestampMixin: created/updated bookkeeping columns
    - LookupMixin: name/label columns shared by reference tables
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timezone
from typing import Optional

# --- Third party ---
from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Base ORM class ---
class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Serves as the declarative base for SQLAlchemy models and provides
    access to the metadata object for table creation and migrations.
    """

    pass


class TimestampMixin:
    """
    Mixin recording when a row was created and last changed.

    Attributes:
        created: Timestamp of insertion (UTC)
        updated: Timestamp of the last update (UTC)
    """

    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )


class LookupMixin(TimestampMixin):
    """
    Mixin for small reference tables resolved by exact name.

    ``name`` is the machine name as it appears in source spreadsheets and
    is unique; ``label`` is the display form, title-cased from the name
    when the importer creates the row.

    Attributes:
        id: Primary key
        name: Unique machine name (e.g. 'godparent')
        label: Display label (e.g. 'Godparent')
        description: Optional editorial description
    """

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True, index=True)
    label: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, name='{self.name}')>"
