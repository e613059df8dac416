"""
Tests for LookupManager.

Tests the factory methods and exact-name find-or-create shared by event,
witness, location and relationship categories and notaries.
"""
import pytest

from sen.core.exceptions import ValidationError
from sen.database.managers import LOOKUP_CONFIGS, LookupManager
from sen.database.models import EventCategory, Notary, WitnessCategory


class TestLookupFactories:
    """Test manager construction."""

    def test_for_model(self, db_session):
        manager = LookupManager.for_model(WitnessCategory, db_session)
        assert manager.config.model_class is WitnessCategory

    def test_for_model_rejects_non_lookup(self, db_session):
        from sen.database.models import Person

        with pytest.raises(ValueError, match="not a lookup model"):
            LookupManager.for_model(Person, db_session)

    @pytest.mark.parametrize("kind", sorted(LOOKUP_CONFIGS))
    def test_for_kind(self, db_session, kind):
        manager = LookupManager.for_kind(kind, db_session)
        assert manager.config is LOOKUP_CONFIGS[kind]

    def test_for_kind_unknown(self, db_session):
        with pytest.raises(ValueError, match="Unknown lookup kind 'races'"):
            LookupManager.for_kind("races", db_session)


class TestLookupGetOrCreate:
    """Test exact-name find-or-create."""

    def test_creates_with_title_cased_label(self, event_category_manager):
        category = event_category_manager.get_or_create("first communion")

        assert category.id is not None
        assert category.name == "first communion"
        assert category.label == "First Communion"

    def test_explicit_label(self, event_category_manager):
        category = event_category_manager.get_or_create("baptism", label="Bautismo")
        assert category.label == "Bautismo"

    def test_existing_row_is_reused(self, event_category_manager, db_session):
        first = event_category_manager.get_or_create("baptism")
        second = event_category_manager.get_or_create("baptism", label="Other")

        assert first is second
        assert second.label == "Baptism"
        assert db_session.query(EventCategory).count() == 1

    def test_name_is_stripped(self, event_category_manager):
        assert event_category_manager.get_or_create("  death ").name == "death"

    def test_match_is_exact(self, event_category_manager):
        lower = event_category_manager.get_or_create("baptism")
        upper = event_category_manager.get_or_create("Baptism")
        assert lower is not upper

    def test_empty_name_raises(self, event_category_manager):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            event_category_manager.get_or_create("  ")

    def test_notaries_have_no_label(self, notary_manager, db_session):
        notary = notary_manager.get_or_create("Jose Lopez")
        assert isinstance(notary, Notary)
        assert db_session.query(Notary).one().name == "Jose Lopez"


class TestLookupQueries:
    """Test get, get_all, count and typeahead."""

    def test_get(self, event_category_manager):
        event_category_manager.get_or_create("birth")
        assert event_category_manager.get("birth").name == "birth"
        assert event_category_manager.get("burial") is None
        assert event_category_manager.get("") is None

    def test_get_all_ordered_by_name(self, event_category_manager):
        for name in ("marriage", "baptism", "death"):
            event_category_manager.get_or_create(name)
        names = [c.name for c in event_category_manager.get_all()]
        assert names == ["baptism", "death", "marriage"]
        assert event_category_manager.count() == 3

    def test_typeahead_matches_name_or_label(self, event_category_manager):
        event_category_manager.get_or_create("baptism")
        event_category_manager.get_or_create("burial", label="Entierro")
        event_category_manager.get_or_create("death")

        assert [c.name for c in event_category_manager.typeahead("b")] == [
            "baptism",
            "burial",
        ]
        assert [c.name for c in event_category_manager.typeahead("Ent")] == ["burial"]

    def test_typeahead_notaries(self, notary_manager):
        notary_manager.get_or_create("Jose Lopez")
        notary_manager.get_or_create("Juan Diaz")
        assert [n.name for n in notary_manager.typeahead("Jo")] == ["Jose Lopez"]
