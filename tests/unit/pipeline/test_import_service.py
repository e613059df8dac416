"""
Tests for ImportService.

Each test builds a full-width row with the sacrament_row factory and
checks what process_row stages in the session.
"""
from datetime import date

import pytest

from sen.core.exceptions import ColumnCountError, ValidationError
from sen.database.models import Event, Person, Relationship, Sex, Witness


def relations(person):
    """(category name, relation full name) pairs of a person."""
    return sorted(
        (link.category.name, link.relation.full_name) for link in person.relationships
    )


class TestPrincipal:
    """Test resolution of the row's principal person."""

    def test_john_smith_birth(self, import_service, sacrament_row):
        row = sacrament_row(
            first_name="John",
            last_name="Smith",
            race_id="1",
            sex="M",
            birth_date="01/02/1800",
        )
        person = import_service.process_row(row)

        assert person.first_name == "John"
        assert person.last_name == "Smith"
        assert person.race_id == "1"
        assert person.sex is Sex.MALE
        assert person.birth.category.name == "birth"
        assert person.birth.date == date(1800, 2, 1)
        assert person.birth.written_date == "01/02/1800"

    def test_same_identity_resolves_to_same_person(
        self, import_service, sacrament_row, db_session
    ):
        row = sacrament_row(first_name="John", last_name="Smith", race_id="1", sex="M")
        first = import_service.process_row(row)
        second = import_service.process_row(list(row))

        assert first is second
        assert db_session.query(Person).count() == 1

    def test_person_attributes(self, import_service, sacrament_row):
        row = sacrament_row(
            first_name="Juana",
            written_race="parda",
            status="libre",
            birth_status="legitima",
            native="Havana",
            aliases="La Negra; Juanita",
            occupations="laundress",
            residences="Matanzas;Havana",
        )
        person = import_service.process_row(row)

        assert person.written_race == "parda"
        assert person.status == "libre"
        assert person.birth_status == "legitima"
        assert person.native.name == "Havana"
        assert person.alias_names == ["La Negra", "Juanita"]
        assert person.occupation_names == ["laundress"]
        assert [r.location.name for r in person.residences] == ["Matanzas", "Havana"]

    def test_missing_first_name_fails(self, import_service, sacrament_row):
        with pytest.raises(ValidationError, match="first name"):
            import_service.process_row(sacrament_row(last_name="Smith"))

    def test_narrow_row_fails(self, import_service):
        with pytest.raises(ColumnCountError):
            import_service.process_row(["John", "Smith", "1", "M"])


class TestLifeEvents:
    """Test birth, baptism and death."""

    def test_empty_birth_is_no_op(self, import_service, sacrament_row, db_session):
        person = import_service.process_row(sacrament_row(first_name="John"))

        assert person.birth is None
        assert person.baptism is None
        assert person.death is None
        assert db_session.query(Event).count() == 0

    def test_baptism_place_is_a_church(self, import_service, sacrament_row):
        row = sacrament_row(
            first_name="John", baptism_date="1800-02-10", baptism_place="Santa Maria"
        )
        person = import_service.process_row(row)

        assert person.baptism.category.name == "baptism"
        assert person.baptism.location.name == "Santa Maria"
        assert person.baptism.location.category.name == "church"

    def test_death_place_only(self, import_service, sacrament_row):
        person = import_service.process_row(
            sacrament_row(first_name="John", death_place="Havana")
        )
        assert person.death.date is None
        assert person.death.location.name == "Havana"

    def test_later_row_completes_existing_event(self, import_service, sacrament_row):
        import_service.process_row(sacrament_row(first_name="John", birth_place="Havana"))
        person = import_service.process_row(
            sacrament_row(first_name="John", birth_date="01/02/1800", birth_place="Matanzas")
        )

        assert person.birth.date == date(1800, 2, 1)
        assert person.birth.location.name == "Havana"

    def test_bad_date_fails(self, import_service, sacrament_row):
        with pytest.raises(ValidationError, match="Invalid date"):
            import_service.process_row(
                sacrament_row(first_name="John", birth_date="31/02/1800")
            )


class TestManumission:
    """Test manumission events and ledgers."""

    def test_manumission_in_notary_ledger(self, import_service, sacrament_row):
        row = sacrament_row(
            first_name="Juana",
            manumission_date="15/06/1805",
            manumission_notary="Jose Lopez",
        )
        person = import_service.process_row(row)

        [event] = person.events
        assert event.category.name == "manumission"
        assert event.date == date(1805, 6, 15)
        assert event.ledger.notary.name == "Jose Lopez"
        assert event.ledger.year == 1805

    def test_manumission_reused_for_same_date(
        self, import_service, sacrament_row, db_session
    ):
        row = sacrament_row(first_name="Juana", manumission_date="15/06/1805")
        import_service.process_row(row)
        import_service.process_row(row)
        assert db_session.query(Event).count() == 1

    def test_notary_without_date_fails(self, import_service, sacrament_row):
        with pytest.raises(ValidationError, match="without a date"):
            import_service.process_row(
                sacrament_row(first_name="Juana", manumission_notary="Jose Lopez")
            )


class TestFamily:
    """Test parents, godparents, marriage and spouse."""

    def test_parents_linked_both_ways(self, import_service, sacrament_row):
        row = sacrament_row(
            first_name="John", last_name="Smith", father="Pedro Smith", mother="Smith, Ana"
        )
        person = import_service.process_row(row)

        assert relations(person) == [("father", "Pedro Smith"), ("mother", "Ana Smith")]
        father = person.relationships[0].relation
        assert father.sex is Sex.MALE
        assert relations(father) == [("child", "John Smith")]

    def test_godparents_witness_the_baptism(self, import_service, sacrament_row):
        row = sacrament_row(
            first_name="John",
            baptism_date="10/02/1800",
            godparents="Ana Ruiz; Luis Vega",
        )
        person = import_service.process_row(row)

        witnesses = person.baptism.witnesses
        assert [w.person.full_name for w in witnesses] == ["Ana Ruiz", "Luis Vega"]
        assert {w.category.name for w in witnesses} == {"godparent"}

    def test_godparents_without_baptism_fail(self, import_service, sacrament_row):
        with pytest.raises(ValidationError, match="without a baptism"):
            import_service.process_row(
                sacrament_row(first_name="John", godparents="Ana Ruiz")
            )

    def test_marriage_spouse_and_witnesses(self, import_service, sacrament_row):
        row = sacrament_row(
            first_name="John",
            last_name="Smith",
            sex="M",
            marriage_date="01/05/1820",
            marriage_place="Santa Maria",
            spouse="Maria Garcia",
            marriage_witnesses="Luis Vega",
        )
        person = import_service.process_row(row)

        [marriage] = person.marriages
        assert marriage.date == date(1820, 5, 1)
        assert marriage.location.category.name == "church"

        spouse = next(p for p in marriage.participants if p is not person)
        assert spouse.full_name == "Maria Garcia"
        assert spouse.sex is Sex.FEMALE
        assert relations(person) == [("spouse", "Maria Garcia")]
        assert relations(spouse) == [("spouse", "John Smith")]

        [witness] = marriage.witnesses
        assert witness.person.full_name == "Luis Vega"
        assert witness.category.name == "wedding"

    def test_spouse_without_marriage(self, import_service, sacrament_row):
        person = import_service.process_row(
            sacrament_row(first_name="Maria", sex="F", spouse="John Smith")
        )
        spouse = person.relationships[0].relation
        assert spouse.sex is Sex.MALE
        assert person.marriages == []

    def test_marriage_witnesses_without_marriage_fail(self, import_service, sacrament_row):
        with pytest.raises(ValidationError, match="without a marriage"):
            import_service.process_row(
                sacrament_row(first_name="John", marriage_witnesses="Luis Vega")
            )


class TestRepeatedRows:
    """Importing the same row twice leaves the database unchanged."""

    def test_full_row_is_idempotent(self, import_service, sacrament_row, db_session):
        row = sacrament_row(
            first_name="John",
            last_name="Smith",
            sex="M",
            aliases="Juanito",
            birth_date="01/02/1800",
            baptism_date="10/02/1800",
            baptism_place="Santa Maria",
            father="Pedro Smith",
            godparents="Ana Ruiz",
            marriage_date="01/05/1820",
            spouse="Maria Garcia",
            marriage_witnesses="Luis Vega",
            residences="Havana",
            notes="Entry damaged",
        )

        def counts():
            return tuple(
                db_session.query(model).count()
                for model in (Person, Event, Witness, Relationship)
            )

        person = import_service.process_row(row)
        before = counts()
        import_service.process_row(row)

        assert counts() == before
        assert person.notes == "Entry damaged"


class TestNotes:
    """Test note accumulation."""

    def test_notes_are_appended(self, import_service, sacrament_row):
        import_service.process_row(sacrament_row(first_name="John", notes="First entry"))
        person = import_service.process_row(
            sacrament_row(first_name="John", notes="Second entry")
        )
        assert person.notes == "First entry\nSecond entry"
