#!/usr/bin/env python3
"""
ledger_manager.py
--------------------
Manages notarial Ledger entities.

A ledger is identified by its notary, year and optional volume. Ledgers
are searched by the leading characters of the notary's name, which is how
transcribers look them up while entering manumissions.
"""
from __future__ import annotations

from typing import List, Optional

from sen.core.exceptions import ValidationError
from sen.database.decorators import handle_db_errors, log_database_operation
from sen.database.models import Ledger, Notary
from .base_manager import BaseManager


class LedgerManager(BaseManager):
    """Manages Ledger table operations."""

    @handle_db_errors
    @log_database_operation("get_or_create_ledger")
    def get_or_create(
        self, notary: Notary, year: int, volume: Optional[str] = None
    ) -> Ledger:
        """
        Get the ledger of ``notary`` for ``year`` (and volume) or create it.

        Raises:
            ValidationError: If year is missing
        """
        if year is None:
            raise ValidationError("Ledger year is required")
        return self._get_or_create(
            Ledger, {"notary": notary, "year": year, "volume": volume}
        )

    @handle_db_errors
    @log_database_operation("ledger_typeahead")
    def typeahead(self, query: str, limit: int = 20) -> List[Ledger]:
        """
        Find ledgers whose notary name starts with ``query``.

        Returns:
            Matching ledgers ordered by notary name, then year
        """
        return (
            self.session.query(Ledger)
            .join(Ledger.notary)
            .filter(Notary.name.like(f"{query}%"))
            .order_by(Notary.name, Ledger.year, Ledger.id)
            .limit(limit)
            .all()
        )
