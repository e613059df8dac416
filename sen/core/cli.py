#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for SEN commands.

Functions:
    setup_logger: Initialize SenLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ImportStats: Row and file counters for CSV imports

Usage:
    from sen.core.cli import setup_logger, ImportStats

    logger = setup_logger(log_dir, "import")
    stats = ImportStats()
    stats.rows_imported += 1
    click.echo(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

# --- Local imports ---
from sen.core.logging_manager import SenLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> SenLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a SenLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'import')

    Returns:
        Configured SenLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return SenLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files opened and read
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time."""
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        """Human-readable summary of operation statistics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Dictionary form for JSON logging."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ImportStats(OperationStats):
    """
    Statistics for CSV import runs.

    Attributes:
        rows_read: Data rows read after skipping headers
        rows_imported: Rows committed to the database
        files_skipped: Files rejected before reading any data row
        created: Lookup or category rows created (category import only)
    """
    rows_read: int = 0
    rows_imported: int = 0
    files_skipped: int = 0
    created: int = 0

    @property
    def rows_failed(self) -> int:
        """Rows that were rolled back."""
        return self.errors

    def summary(self) -> str:
        return (
            f"{self.files_processed} files, "
            f"{self.rows_read} rows read, "
            f"{self.rows_imported} imported, "
            f"{self.rows_failed} failed, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "rows_read": self.rows_read,
                "rows_imported": self.rows_imported,
                "rows_failed": self.rows_failed,
                "files_skipped": self.files_skipped,
                "created": self.created,
            }
        )
        return data

