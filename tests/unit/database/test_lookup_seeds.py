"""Tests for the lookup seed file loader."""
import pytest

from sen.core.exceptions import ValidationError
from sen.core.paths import LOOKUPS_FILE
from sen.database.configs import LookupSeed, load_lookup_seeds


class TestLoadLookupSeeds:
    """Tests for load_lookup_seeds."""

    def test_default_file(self):
        seeds = load_lookup_seeds(LOOKUPS_FILE)
        kinds = {seed.kind for seed in seeds}

        assert LookupSeed("event_categories", "baptism") in seeds
        assert kinds == {
            "event_categories",
            "witness_categories",
            "location_categories",
            "relationship_categories",
        }

    def test_mapping_entries(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text(
            "witness_categories:\n"
            "  - name: wedding\n"
            "    label: Wedding\n"
            "    description: Witness of a marriage\n",
            encoding="utf-8",
        )
        assert load_lookup_seeds(path) == [
            LookupSeed("witness_categories", "wedding", "Wedding", "Witness of a marriage")
        ]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text("", encoding="utf-8")
        assert load_lookup_seeds(path) == []

    def test_unknown_kind(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text("races:\n  - one\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Unknown lookup kind 'races'"):
            load_lookup_seeds(path)

    def test_entry_without_name(self, tmp_path):
        path = tmp_path / "seeds.yaml"
        path.write_text("notaries:\n  - label: Nameless\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Invalid notaries entry"):
            load_lookup_seeds(path)
