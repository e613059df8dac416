"""
SEN Sacramental Records Package
===============================

Import and search toolkit for transcribed sacramental records.

Sacramental registers (baptisms, marriages, burials) and related notarial
records are transcribed into CSV spreadsheets, one document per row. This
package loads those rows into a relational schema of people, events,
witnesses, residences, notaries and ledgers, and offers typeahead search
over the result.

Main Components:
    - pipeline: CSV normalization, column schema and the import pipeline
    - database: SQLAlchemy ORM models, entity managers and the database CLI
    - core: Logging, validation, exceptions and path configuration

Primary Interfaces:
    - sen.pipeline.cli: Import CLI (import:sacrament, import:event-categories)
    - sen.database.cli: Database management CLI (init, seed, query, stats)
    - sen.database.manager.SenDB: Main database interface

Example Usage:
    >>> from sen import SenDB
    >>> from sen.core.paths import DB_PATH, ALEMBIC_DIR, LOG_DIR
    >>> db = SenDB(db_path=DB_PATH, alembic_dir=ALEMBIC_DIR, log_dir=LOG_DIR)
    >>> with db.session_scope() as session:
    ...     people = db.people.typeahead("Gar")

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "SEN Project"

# Expose primary interfaces for convenience
from sen.database.manager import SenDB
from sen.core.paths import DATA_DIR, DB_PATH, LOG_DIR

__all__ = [
    "SenDB",
    "DATA_DIR",
    "DB_PATH",
    "LOG_DIR",
]
