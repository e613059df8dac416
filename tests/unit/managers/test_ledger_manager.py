"""Tests for LedgerManager."""
import pytest

from sen.core.exceptions import ValidationError
from sen.database.models import Ledger


class TestLedgerGetOrCreate:
    """Test ledger resolution by notary, year and volume."""

    def test_creates_ledger(self, ledger_manager, notary_manager):
        notary = notary_manager.get_or_create("Jose Lopez")
        ledger = ledger_manager.get_or_create(notary, 1800)

        assert ledger.id is not None
        assert ledger.notary is notary
        assert ledger.year == 1800
        assert str(ledger) == "Jose Lopez 1800"

    def test_same_notary_and_year_reused(self, ledger_manager, notary_manager, db_session):
        notary = notary_manager.get_or_create("Jose Lopez")
        first = ledger_manager.get_or_create(notary, 1800)
        second = ledger_manager.get_or_create(notary, 1800)

        assert first is second
        assert db_session.query(Ledger).count() == 1

    def test_year_and_volume_distinguish(self, ledger_manager, notary_manager, db_session):
        notary = notary_manager.get_or_create("Jose Lopez")
        ledger_manager.get_or_create(notary, 1800)
        ledger_manager.get_or_create(notary, 1801)
        volume = ledger_manager.get_or_create(notary, 1800, volume="II")

        assert str(volume) == "Jose Lopez 1800 (II)"
        assert db_session.query(Ledger).count() == 3

    def test_year_required(self, ledger_manager, notary_manager):
        notary = notary_manager.get_or_create("Jose Lopez")
        with pytest.raises(ValidationError, match="year"):
            ledger_manager.get_or_create(notary, None)


class TestLedgerTypeahead:
    """Test notary name prefix search."""

    def test_orders_by_notary_then_year(self, ledger_manager, notary_manager):
        lopez = notary_manager.get_or_create("Lopez")
        lara = notary_manager.get_or_create("Lara")
        diaz = notary_manager.get_or_create("Diaz")
        ledger_manager.get_or_create(lopez, 1802)
        ledger_manager.get_or_create(lopez, 1800)
        ledger_manager.get_or_create(lara, 1810)
        ledger_manager.get_or_create(diaz, 1790)

        results = [str(ledger) for ledger in ledger_manager.typeahead("L")]
        assert results == ["Lara 1810", "Lopez 1800", "Lopez 1802"]

    def test_limit(self, ledger_manager, notary_manager):
        notary = notary_manager.get_or_create("Lopez")
        for year in range(1800, 1805):
            ledger_manager.get_or_create(notary, year)
        assert len(ledger_manager.typeahead("Lo", limit=2)) == 2
