"""
Notarial Record Models
-----------------------

Notaries and the ledgers they kept.

Models:
    - Notary: A notary public, identified by name
    - Ledger: One year (and optional volume) of a notary's protocol
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import TYPE_CHECKING, List, Optional

# --- Third party imports ---
from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

# --- Local imports ---
from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .events import Event


class Notary(Base, TimestampMixin):
    """A notary public whose ledgers record manumissions."""

    __tablename__ = "notaries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    ledgers: Mapped[List["Ledger"]] = relationship(
        "Ledger", back_populates="notary", cascade="all, delete-orphan"
    )

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<Notary(id={self.id}, name='{self.name}')>"


class Ledger(Base, TimestampMixin):
    """
    A notary's ledger for one year.

    Attributes:
        notary_id: Owning notary
        year: Year covered by the ledger
        volume: Volume label, when a year spans several books
    """

    __tablename__ = "ledgers"
    __table_args__ = (
        UniqueConstraint("notary_id", "year", "volume", name="uq_ledger_notary_year_volume"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    notary_id: Mapped[int] = mapped_column(
        ForeignKey("notaries.id", ondelete="CASCADE"), nullable=False, index=True
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    volume: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    notary: Mapped["Notary"] = relationship("Notary", back_populates="ledgers")
    events: Mapped[List["Event"]] = relationship("Event", back_populates="ledger")

    def __str__(self) -> str:
        if self.volume:
            return f"{self.notary} {self.year} ({self.volume})"
        return f"{self.notary} {self.year}"

    def __repr__(self) -> str:
        return f"<Ledger(id={self.id}, notary_id={self.notary_id}, year={self.year})>"
