#!/usr/bin/env python3
"""
sacrament_importer.py
---------------------
Imports sacrament spreadsheets row by row.

For each file the importer:
    1. checks that the first record is as wide as the column layout and
       skips the whole file otherwise;
    2. skips the header records;
    3. normalizes, validates and imports each remaining record in its own
       RowTransaction.

A row that fails is rolled back and reported as a RowImportError through
the ``on_error`` callback and the logger; the next row is imported as if
nothing happened. Nothing raised by a row escapes the file loop.
A record the csv module cannot parse, such as one with a cell over the
csv field size limit, is reported the same way as a failed data row.

Usage:
    with db.session_scope() as session:
        importer = SacramentImporter(session, logger, on_error=print)
        stats = importer.import_files(["baptisms.csv"], skip=1)
"""
from __future__ import annotations

from itertools import chain
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from sqlalchemy.orm import Session

from sen.core.cli import ImportStats
from sen.core.exceptions import ColumnCountError, RowImportError
from sen.core.logging_manager import SenLogger, safe_logger
from .columns import COLUMN_COUNT
from .entity_resolver import EntityResolver
from .import_service import ImportService
from .normalizer import normalize_row, open_csv, read_records
from .transaction import RowTransaction


class SacramentImporter:
    """
    Drives ImportService over CSV files with per-row isolation.

    Attributes:
        session: Session owned by the caller; committed row by row
        resolver: Shared EntityResolver (cache cleared on every rollback)
        service: ImportService applying each row
        transaction: RowTransaction used for every row
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
        self.resolver = EntityResolver(session, logger)
        self.service = ImportService(session, self.resolver, logger)
        self.transaction = RowTransaction(session, on_discard=self.resolver.clear_caches)
        self.stats = ImportStats()
        self.errors: List[RowImportError] = []

    def import_files(
        self, paths: Iterable[Union[str, Path]], skip: int = 1
    ) -> ImportStats:
        """Import every file in order and return the run statistics."""
        for path in paths:
            self.import_file(path, skip=skip)

        safe_logger(self.logger).log_operation("import_sacrament_complete", self.stats.to_dict())
        return self.stats

    def import_file(self, path: Union[str, Path], skip: int = 1) -> None:
        """
        Import one file.

        Args:
            path: CSV file
            skip: Number of leading records (headers) to skip
        """
        logger = safe_logger(self.logger)
        logger.log_info("Importing sacrament file", {"file": str(path), "skip": skip})

        row_number = 0
        try:
            with open_csv(path) as handle:
                records = read_records(
                    handle, on_error=lambda number, e: self._reject_record(path, number, e)
                )
                first = next(records, None)
                self.stats.files_processed += 1
                if first is None:
                    return

                if len(first[1]) < COLUMN_COUNT:
                    self.stats.files_skipped += 1
                    self._report(
                        RowImportError(
                            path,
                            first[0],
                            ColumnCountError(COLUMN_COUNT, len(first[1])),
                            "column_count",
                        )
                    )
                    return

                for row_number, raw in chain([first], records):
                    if row_number <= skip:
                        continue
                    self._import_record(path, row_number, raw)

        except OSError as e:
            self._report(RowImportError(path, row_number + 1, e, "unexpected"))

    def _reject_record(self, path: Union[str, Path], row_number: int, error: Exception) -> None:
        """Report a record the csv module could not parse as a failed row."""
        self.stats.rows_read += 1
        self._report(RowImportError(path, row_number, error, "data"))

    def _import_record(self, path: Union[str, Path], row_number: int, raw: List[str]) -> None:
        if not any(cell.strip() for cell in raw):
            return

        self.stats.rows_read += 1
        row = normalize_row(raw)
        try:
            with self.transaction.scope(path, row_number):
                self.service.process_row(row)
        except RowImportError as e:
            self._report(e)
            return
        self.stats.rows_imported += 1

    def _report(self, error: RowImportError) -> None:
        self.stats.errors += 1
        self.errors.append(error)
        safe_logger(self.logger).log_row_error(error)
        if self.on_error is not None:
            self.on_error(error)
