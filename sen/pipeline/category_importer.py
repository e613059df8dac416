#!/usr/bin/env python3
"""
category_importer.py
--------------------
Imports event category names from CSV files.

The first column of every record after the skipped headers is a standard
category name. A category is looked up by exact name and created when
missing, with its label title-cased from the name, and flushed at once so
a repeated name later in the same file finds it. There is no per-row
rollback: categories are committed together when the caller's session
scope ends.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from sqlalchemy.orm import Session

from sen.core.cli import ImportStats
from sen.core.exceptions import DatabaseError, RowImportError
from sen.core.logging_manager import SenLogger, safe_logger
from sen.database.managers import LookupManager
from .normalizer import normalize_field, open_csv, read_records


class EventCategoryImporter:
    """
    Find-or-create EventCategory rows from column 0 of CSV files.

    Attributes:
        session: Session owned by the caller
        manager: EventCategory lookup manager
        stats: Counters for the whole run
    """

    def __init__(
        self,
        session: Session,
        logger: Optional[SenLogger] = None,
        on_error: Optional[Callable[[RowImportError], None]] = None,
    ):
        self.session = session
        self.logger = logger
        self.on_error = on_error
        self.manager = LookupManager.for_event_categories(session, logger)
        self.stats = ImportStats()

    def import_files(
        self, paths: Iterable[Union[str, Path]], skip: int = 1
    ) -> ImportStats:
        for path in paths:
            self.import_file(path, skip=skip)

        safe_logger(self.logger).log_operation(
            "import_event_categories_complete", self.stats.to_dict()
        )
        return self.stats

    def import_file(self, path: Union[str, Path], skip: int = 1) -> None:
        """
        Import the categories named in one file.

        A file that cannot be read, or a category that cannot be stored,
        stops this file only; it is reported and the next file is read.
        A record the csv module rejects is reported and skipped.
        """
        logger = safe_logger(self.logger)
        logger.log_info("Importing event categories", {"file": str(path), "skip": skip})

        row_number = 0
        try:
            with open_csv(path) as handle:
                self.stats.files_processed += 1
                records = read_records(
                    handle,
                    on_error=lambda number, e: self._report(
                        RowImportError(path, number, e, "data")
                    ),
                )
                for row_number, raw in records:
                    if row_number <= skip or not raw:
                        continue
                    name = normalize_field(raw[0])
                    if not name:
                        continue

                    self.stats.rows_read += 1
                    if self.manager.get(name) is None:
                        self.manager.get_or_create(name)
                        self.stats.created += 1
                        logger.log_debug("Event category created", {"name": name})
                    self.stats.rows_imported += 1

        except (OSError, DatabaseError) as e:
            self._report(RowImportError(path, row_number, e, RowImportError.classify(e)))

    def _report(self, error: RowImportError) -> None:
        self.stats.errors += 1
        safe_logger(self.logger).log_row_error(error)
        if self.on_error is not None:
            self.on_error(error)
