"""Tests for SacramentImporter driven directly on a session."""
from sen.database.models import Person


class TestSacramentImporter:
    """Test per-row isolation and reporting."""

    def test_reports_failures_and_keeps_going(
        self, db_session, sacrament_csv, sacrament_row
    ):
        from sen.pipeline.sacrament_importer import SacramentImporter

        reported = []
        importer = SacramentImporter(db_session, on_error=reported.append)
        path = sacrament_csv(
            "people.csv",
            [
                sacrament_row(first_name="John", godparents="Ana Ruiz"),
                sacrament_row(first_name="Maria"),
            ],
        )

        stats = importer.import_files([path])

        assert [(e.row, e.kind) for e in reported] == [(2, "data")]
        assert importer.errors == reported
        assert stats.rows_read == 2
        assert stats.rows_imported == 1
        assert stats.rows_failed == 1
        assert [p.first_name for p in db_session.query(Person)] == ["Maria"]

    def test_resolver_cache_cleared_after_failure(
        self, db_session, sacrament_csv, sacrament_row
    ):
        """A person staged by a failed row is recreated by the next row."""
        from sen.pipeline.sacrament_importer import SacramentImporter

        importer = SacramentImporter(db_session)
        path = sacrament_csv(
            "people.csv",
            [
                sacrament_row(first_name="John", birth_date="not a date"),
                sacrament_row(first_name="John"),
            ],
        )

        importer.import_files([path])

        [person] = db_session.query(Person).all()
        assert person.first_name == "John"
        assert importer.resolver.people[("John", None, None, None)] is person

    def test_narrow_first_line_skips_file(self, db_session, sacrament_csv):
        from sen.pipeline.sacrament_importer import SacramentImporter

        reported = []
        importer = SacramentImporter(db_session, on_error=reported.append)
        path = sacrament_csv("narrow.csv", [["John"]], header=["first_name"])

        stats = importer.import_files([path])

        assert stats.files_processed == 1
        assert stats.files_skipped == 1
        assert stats.rows_read == 0
        assert [(e.row, e.kind) for e in reported] == [(1, "column_count")]

    def test_empty_file(self, db_session, tmp_dir):
        from sen.pipeline.sacrament_importer import SacramentImporter

        path = tmp_dir / "empty.csv"
        path.write_text("", encoding="utf-8")

        stats = SacramentImporter(db_session).import_files([path])

        assert stats.files_processed == 1
        assert stats.errors == 0

    def test_unparseable_record_fails_alone(
        self, db_session, sacrament_csv, sacrament_row
    ):
        from sen.pipeline.sacrament_importer import SacramentImporter

        reported = []
        importer = SacramentImporter(db_session, on_error=reported.append)
        path = sacrament_csv(
            "people.csv",
            [
                sacrament_row(first_name="John", notes="x" * 200_000),
                sacrament_row(first_name="Maria"),
                sacrament_row(first_name="Ana"),
            ],
        )

        stats = importer.import_files([path])

        assert [(e.row, e.kind) for e in reported] == [(2, "data")]
        assert stats.rows_read == 3
        assert stats.rows_imported == 2
        assert stats.rows_failed == 1
        names = sorted(p.first_name for p in db_session.query(Person))
        assert names == ["Ana", "Maria"]
