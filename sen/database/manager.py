#!/usr/bin/env python3
"""
manager.py
--------------------
Database manager for the SEN sacramental records system.

Provides the SenDB class for interacting with the SQLite database.
Handles:
    - Initialization of the database engine and sessionmaker
    - Session scopes exposing the entity managers
    - Schema creation and migration management via Alembic
    - Row counts for reporting

Notes
==============
- Migrations live in ``sen/migrations`` and are run through Alembic
- The session factory autoflushes, so objects staged earlier in a
  transaction are visible to later queries in the same transaction
- Objects stay loaded after commit (``expire_on_commit=False``) so the
  importer can keep resolved lookups across rows
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

# --- Third party ---
from sqlalchemy import Engine, create_engine, func, inspect, select
from sqlalchemy.orm import Session, sessionmaker

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext

# --- Local imports ---
from sen.core.exceptions import DatabaseError
from sen.core.logging_manager import SenLogger
from sen.core.paths import ALEMBIC_INI
from .decorators import handle_db_errors, log_database_operation
from .managers import (
    EventManager,
    LedgerManager,
    LocationManager,
    LookupManager,
    PersonManager,
)
from .models import Base


# ----- Main Database Manager -----
class SenDB:
    """
    Main database manager for the SEN database.

    Attributes:
        - db_path (Path): Filesystem path to the SQLite database file.
        - alembic_dir (Path): Filesystem path to the Alembic directory.
        - engine (Engine): SQLAlchemy engine instance.
        - SessionLocal (sessionmaker): SQLAlchemy session factory.

    Usage:
        db = SenDB("data/db/sen.db", "sen/migrations")
        with db.session_scope() as session:
            person = db.people.get_or_create("John", "Smith", "1", "M")
    """

    # ---- Initialization ----
    def __init__(
        self,
        db_path: Union[str, Path],
        alembic_dir: Union[str, Path],
        log_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Initialize database engine and session factory.

        Args:
            db_path (str | Path): Path to the SQLite file.
            alembic_dir (str | Path): Path to the Alembic directory.
            log_dir (str | Path): Directory for log files (optional)
        """
        self.db_path = Path(db_path).expanduser().resolve()
        self.alembic_dir = Path(alembic_dir).expanduser().resolve()

        # --- Logging ---
        if log_dir:
            self.log_dir = Path(log_dir).expanduser().resolve() / "system"
            self.logger: Optional[SenLogger] = SenLogger(
                self.log_dir, component_name="database"
            )
        else:
            self.logger = None

        # Entity managers are bound per session in session_scope
        self._person_manager: Optional[PersonManager] = None
        self._event_manager: Optional[EventManager] = None
        self._location_manager: Optional[LocationManager] = None
        self._ledger_manager: Optional[LedgerManager] = None
        self._session: Optional[Session] = None

        self._setup_engine()

    def _setup_engine(self) -> None:
        """Initialize database engine and session factory."""
        try:
            if self.logger:
                self.logger.log_operation(
                    "database_init_start",
                    {
                        "db_path": str(self.db_path),
                        "alembic_dir": str(self.alembic_dir),
                    },
                )

            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            is_new_file = not self.db_path.exists()

            self.engine: Engine = create_engine(
                f"sqlite:///{self.db_path}",
                echo=False,
                future=True,
                pool_pre_ping=True,
            )

            self.SessionLocal: sessionmaker = sessionmaker(
                bind=self.engine,
                autoflush=True,
                expire_on_commit=False,
                future=True,
            )

            self.alembic_cfg: Config = self._setup_alembic()

            if is_new_file:
                self.initialize_schema()

            if self.logger:
                self.logger.log_operation("database_init_complete", {"success": True})

        except Exception as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "database_init"})
            raise DatabaseError(f"Database initialization failed: {e}") from e

    def close(self) -> None:
        """Dispose of the engine and release log handlers."""
        self.engine.dispose()
        if self.logger:
            self.logger.close()

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around operations with logging.

        Also binds the entity managers to the session; they are available
        via properties (db.people, db.events, ...) until the scope exits.

        Usage:
            with db.session_scope() as session:
                category = db.lookups("event_categories").get_or_create("baptism")
        """
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

        self._session = session
        self._person_manager = PersonManager(session, self.logger)
        self._event_manager = EventManager(session, self.logger)
        self._location_manager = LocationManager(session, self.logger)
        self._ledger_manager = LedgerManager(session, self.logger)

        if self.logger:
            self.logger.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            if self.logger:
                self.logger.log_debug("session_commit", {"session_id": session_id})

        except Exception as e:
            session.rollback()
            if self.logger:
                self.logger.log_error(
                    e, {"operation": "session_rollback", "session_id": session_id}
                )
            raise
        finally:
            self._session = None
            self._person_manager = None
            self._event_manager = None
            self._location_manager = None
            self._ledger_manager = None

            session.close()
            if self.logger:
                self.logger.log_debug("session_close", {"session_id": session_id})

    def get_session(self) -> Session:
        """Create and return a new SQLAlchemy session."""
        return self.SessionLocal()

    # -------------------------------------------------------------------------
    # Entity Manager Properties
    # -------------------------------------------------------------------------

    def _require(self, manager, name: str):
        if manager is None:
            raise DatabaseError(
                f"{name} requires active session. "
                "Use within session_scope: "
                "with db.session_scope() as session: ..."
            )
        return manager

    @property
    def people(self) -> PersonManager:
        """
        Access PersonManager for person operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._person_manager, "PersonManager")

    @property
    def events(self) -> EventManager:
        """
        Access EventManager for event and witness operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._event_manager, "EventManager")

    @property
    def locations(self) -> LocationManager:
        """
        Access LocationManager for location operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._location_manager, "LocationManager")

    @property
    def ledgers(self) -> LedgerManager:
        """
        Access LedgerManager for ledger operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._ledger_manager, "LedgerManager")

    def lookups(self, kind: str) -> LookupManager:
        """
        Access a LookupManager by kind ('event_categories', 'notaries', ...).

        Raises:
            DatabaseError: If accessed outside of session_scope context
            ValueError: If the kind is unknown
        """
        session = self._require(self._session, "LookupManager")
        return LookupManager.for_kind(kind, session, self.logger)

    # ---- Alembic setup ----
    def _setup_alembic(self) -> Config:
        """Setup Alembic configuration."""
        try:
            if self.logger:
                self.logger.log_debug("Setting up Alembic configuration...")

            if ALEMBIC_INI.exists():
                alembic_cfg: Config = Config(str(ALEMBIC_INI))
            else:
                alembic_cfg = Config()
            alembic_cfg.set_main_option("script_location", str(self.alembic_dir))
            alembic_cfg.set_main_option("sqlalchemy.url", f"sqlite:///{self.db_path}")
            alembic_cfg.set_main_option(
                "file_template",
                "%%(year)d%%(month).2d%%(day).2d_%%(hour).2d%%(minute).2d_%%(slug)s",
            )
            return alembic_cfg
        except Exception as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "setup_alembic"})
            raise DatabaseError(f"Alembic configuration failed: {e}") from e

    @handle_db_errors
    @log_database_operation("initialize_schema")
    def initialize_schema(self) -> None:
        """
        Initialize database - create tables if needed and run migrations.

        Actions:
            Checks if the database is fresh (no tables)
            If fresh,
                creates all tables from the ORM models
                stamps the Alembic revision to head
            If not,
                runs pending migrations to update schema
        """
        try:
            table_names = inspect(self.engine).get_table_names()

            if not table_names:
                Base.metadata.create_all(bind=self.engine)
                try:
                    command.stamp(self.alembic_cfg, "head")
                    if self.logger:
                        self.logger.log_operation(
                            "fresh_database_created",
                            {"tables_created": len(Base.metadata.tables)},
                        )
                except Exception as e:
                    if self.logger:
                        self.logger.log_error(e, {"operation": "stamp_database"})
            else:
                self.upgrade_database()
                if self.logger:
                    self.logger.log_operation(
                        "existing_database_migrated",
                        {"table_count": len(table_names)},
                    )

        except DatabaseError:
            raise
        except Exception as e:
            raise DatabaseError(f"Could not initialize database: {e}") from e

    @handle_db_errors
    @log_database_operation("upgrade_database")
    def upgrade_database(self, revision: str = "head") -> None:
        """
        Upgrade the database schema to the specified Alembic revision.

        Args:
            revision (str, optional):
                The target revision to upgrade to.
                Defaults to 'head' (latest revision).
        """
        try:
            command.upgrade(self.alembic_cfg, revision)
        except Exception as e:
            raise DatabaseError(f"Database upgrade failed: {e}") from e

    def get_migration_history(self) -> Dict[str, Optional[str]]:
        """
        Get the current migration status of the database.

        Returns:
            Dictionary with 'current_revision' and 'status', or 'error'
        """
        try:
            with self.engine.connect() as conn:
                context = MigrationContext.configure(conn)
                current_rev = context.get_current_revision()

            return {
                "current_revision": current_rev,
                "status": "up_to_date" if current_rev else "needs_migration",
            }
        except Exception as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "get_migration_history"})
            return {"error": str(e)}

    # ---- Reporting ----
    @handle_db_errors
    def count_rows(self) -> Dict[str, int]:
        """Row count per model table, in dependency order."""
        counts: Dict[str, int] = {}
        with self.engine.connect() as conn:
            for table in Base.metadata.sorted_tables:
                counts[table.name] = conn.execute(
                    select(func.count()).select_from(table)
                ).scalar_one()
        return counts

    # ----- Context Manager Support -----
    def __enter__(self) -> "SenDB":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        del exc_type, exc_val, exc_tb
        self.close()
