"""
Tests for PersonManager.

Tests identity resolution, typeahead search and the idempotent add_*
helpers for aliases, occupations, residences and relationships.
"""
import pytest

from sen.core.exceptions import ValidationError
from sen.database.managers import LookupManager, PersonManager
from sen.database.models import Person, Sex


class TestPersonIdentity:
    """Test identity normalization."""

    def test_identity_normalizes(self):
        identity = PersonManager.identity(" John ", "", "1", "m")
        assert identity == {
            "first_name": "John",
            "last_name": None,
            "race_id": "1",
            "sex": Sex.MALE,
        }

    def test_empty_first_name_raises(self):
        with pytest.raises(ValidationError, match="first name"):
            PersonManager.identity("", "Smith", None, None)

    def test_invalid_sex_raises(self):
        with pytest.raises(ValidationError, match="sex"):
            PersonManager.identity("John", "Smith", None, "X")


class TestPersonGetOrCreate:
    """Test find-or-create by identity tuple."""

    def test_creates_person(self, person_manager, db_session):
        person = person_manager.get_or_create("John", "Smith", "1", "M")

        assert person.id is not None
        assert person.full_name == "John Smith"
        assert person.sex is Sex.MALE
        assert db_session.query(Person).count() == 1

    def test_same_identity_returns_same_person(self, person_manager):
        first = person_manager.get_or_create("John", "Smith", "1", "M")
        second = person_manager.get_or_create("John", " Smith ", "1", Sex.MALE)
        assert first is second

    def test_any_identity_difference_creates_new_person(self, person_manager, db_session):
        person_manager.get_or_create("John", "Smith", "1", "M")
        person_manager.get_or_create("John", "Smith", "2", "M")
        person_manager.get_or_create("John", "Smith", "1", "F")
        person_manager.get_or_create("John", "Smith", None, None)
        assert db_session.query(Person).count() == 4

    def test_match_is_exact(self, person_manager):
        """Case differences are different people."""
        upper = person_manager.get_or_create("JOHN", "SMITH")
        lower = person_manager.get_or_create("John", "Smith")
        assert upper is not lower

    def test_get_by_id_and_identity(self, person_manager):
        person = person_manager.get_or_create("Maria", "Garcia", None, "F")

        assert person_manager.get(person_id=person.id) is person
        assert person_manager.get("Maria", "Garcia", None, "F") is person
        assert person_manager.get("Maria", "Garcia", None, None) is None


class TestPersonTypeahead:
    """Test name prefix search."""

    def test_matches_last_or_first_name(self, person_manager):
        person_manager.get_or_create("John", "Smith")
        person_manager.get_or_create("Sarah", "Jones")
        person_manager.get_or_create("Maria", "Garcia")

        names = [p.full_name for p in person_manager.typeahead("S")]
        assert names == ["Sarah Jones", "John Smith"]

    def test_limit(self, person_manager):
        for i in range(5):
            person_manager.get_or_create(f"Juan{i}", "Perez")
        assert len(person_manager.typeahead("Perez", limit=3)) == 3

    def test_no_match(self, person_manager):
        person_manager.get_or_create("John", "Smith")
        assert person_manager.typeahead("Zz") == []


class TestPersonFacts:
    """Test attaching aliases, occupations, residences and relationships."""

    def test_add_alias_is_idempotent(self, person_manager):
        person = person_manager.get_or_create("Juana")
        first = person_manager.add_alias(person, "La Negra")
        second = person_manager.add_alias(person, "La Negra")

        assert first is second
        assert person.alias_names == ["La Negra"]

    def test_add_occupation_is_idempotent(self, person_manager):
        person = person_manager.get_or_create("Juan")
        person_manager.add_occupation(person, "carpenter")
        person_manager.add_occupation(person, "carpenter")
        person_manager.add_occupation(person, "cooper")
        assert person.occupation_names == ["carpenter", "cooper"]

    def test_add_residence_is_idempotent(self, person_manager, location_manager):
        person = person_manager.get_or_create("Juan")
        town = location_manager.get_or_create("Matanzas")
        person_manager.add_residence(person, town)
        person_manager.add_residence(person, town)

        assert len(person.residences) == 1
        assert person.residences[0].location is town

    def test_add_relationship_stores_one_direction(self, person_manager, db_session):
        child = person_manager.get_or_create("Juan")
        father = person_manager.get_or_create("Pedro", None, None, "M")
        category = LookupManager.for_relationship_categories(db_session).get_or_create(
            "father"
        )

        person_manager.add_relationship(child, father, category)
        person_manager.add_relationship(child, father, category)

        assert len(child.relationships) == 1
        assert child.relationships[0].relation is father
        assert child.relationships[0].category.name == "father"
        assert father.relationships == []
