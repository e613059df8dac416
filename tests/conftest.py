"""
conftest.py
-----------
Shared pytest fixtures for SEN tests.

Provides fixtures for:
- Database setup and teardown
- Session-bound managers
- Sacrament rows and CSV files
"""
import csv
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from sen.pipeline.columns import COLUMN_COUNT, SacramentColumn


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Row Factories -----

def make_row(**cells):
    """
    Build a full-width sacrament row.

    Keyword arguments are SacramentColumn names in lower case, e.g.
    ``make_row(first_name="John", birth_date="01/02/1800")``.
    """
    row = [""] * COLUMN_COUNT
    for name, value in cells.items():
        row[SacramentColumn[name.upper()]] = value
    return row


HEADER = [column.name.lower() for column in SacramentColumn]


def write_csv(path, rows, header=HEADER):
    """Write rows (and a header unless ``header`` is None) to ``path``."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        if header is not None:
            writer.writerow(header)
        writer.writerows(rows)
    return path


# ----- Database Fixtures -----

@pytest.fixture
def test_db_path(tmp_dir):
    """Create temporary test database path."""
    return tmp_dir / "test.db"


@pytest.fixture
def test_alembic_dir():
    """Path to the Alembic migration environment."""
    return Path(__file__).parent.parent / "sen" / "migrations"


@pytest.fixture
def test_db(test_db_path, test_alembic_dir):
    """
    Create test database instance with schema.

    Returns a SenDB instance with an initialized schema.
    Database is torn down after the test.
    """
    from sen.database.manager import SenDB
    from sen.database.models import Base
    from sqlalchemy import create_engine

    # Create engine and initialize schema
    engine = create_engine(f"sqlite:///{test_db_path}")
    Base.metadata.create_all(engine)

    db = SenDB(db_path=test_db_path, alembic_dir=test_alembic_dir)

    yield db

    # Cleanup
    db.close()
    engine.dispose()
    if test_db_path.exists():
        test_db_path.unlink()


@pytest.fixture
def db_session(test_db):
    """
    Create a database session for tests.

    Provides a session with automatic rollback after test.
    """
    with test_db.session_scope() as session:
        yield session
        session.rollback()


# ----- Manager Fixtures -----

@pytest.fixture
def person_manager(db_session):
    """PersonManager bound to the test session."""
    from sen.database.managers import PersonManager

    return PersonManager(db_session)


@pytest.fixture
def event_manager(db_session):
    """EventManager bound to the test session."""
    from sen.database.managers import EventManager

    return EventManager(db_session)


@pytest.fixture
def location_manager(db_session):
    """LocationManager bound to the test session."""
    from sen.database.managers import LocationManager

    return LocationManager(db_session)


@pytest.fixture
def ledger_manager(db_session):
    """LedgerManager bound to the test session."""
    from sen.database.managers import LedgerManager

    return LedgerManager(db_session)


@pytest.fixture
def event_category_manager(db_session):
    """LookupManager for event categories bound to the test session."""
    from sen.database.managers import LookupManager

    return LookupManager.for_event_categories(db_session)


@pytest.fixture
def notary_manager(db_session):
    """LookupManager for notaries bound to the test session."""
    from sen.database.managers import LookupManager

    return LookupManager.for_notaries(db_session)


# ----- Pipeline Fixtures -----

@pytest.fixture
def resolver(db_session):
    """EntityResolver bound to the test session."""
    from sen.pipeline.entity_resolver import EntityResolver

    return EntityResolver(db_session)


@pytest.fixture
def import_service(db_session, resolver):
    """ImportService bound to the test session."""
    from sen.pipeline.import_service import ImportService

    return ImportService(db_session, resolver)


@pytest.fixture
def sacrament_row():
    """Factory for full-width sacrament rows (see make_row)."""
    return make_row


@pytest.fixture
def sacrament_csv(tmp_dir):
    """
    Factory writing sacrament rows to a CSV file under tmp_dir.

    Usage:
        path = sacrament_csv("people.csv", [make_row(first_name="John")])
    """

    def _write(name, rows, header=HEADER):
        return write_csv(tmp_dir / name, rows, header)

    return _write
