#!/usr/bin/env python3
"""
conftest.py
-----------
Shared fixtures for CLI integration tests.

Fixtures:
    runner: Click test runner
    test_dirs: Temporary database and log locations
    invoke_import: Invoke the ``sen`` import CLI against test_dirs
    invoke_db: Invoke the ``sendb`` database CLI against test_dirs
    open_db: Open the database the CLIs wrote to
    diagnostics: Pick the per-row problem lines out of CLI output
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third-party imports ---
import pytest
from click.testing import CliRunner

# --- Local imports ---
from sen.core.paths import ALEMBIC_DIR
from sen.database.cli import cli as db_cli
from sen.database.manager import SenDB
from sen.pipeline.cli import cli as import_cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def test_dirs(tmp_path):
    """Create temporary directories for testing."""
    dirs = {
        "db_path": tmp_path / "db" / "test.db",
        "alembic_dir": ALEMBIC_DIR,
        "log_dir": tmp_path / "logs",
    }
    dirs["log_dir"].mkdir()
    return dirs


def _base_args(test_dirs):
    return [
        "--db-path", str(test_dirs["db_path"]),
        "--alembic-dir", str(test_dirs["alembic_dir"]),
        "--log-dir", str(test_dirs["log_dir"]),
    ]


@pytest.fixture
def invoke_import(runner, test_dirs):
    """Invoke the import CLI with test configuration."""

    def _invoke(args, **kwargs):
        return runner.invoke(import_cli, _base_args(test_dirs) + args, obj={}, **kwargs)

    return _invoke


@pytest.fixture
def invoke_db(runner, test_dirs):
    """Invoke the database CLI with test configuration."""

    def _invoke(args, **kwargs):
        return runner.invoke(db_cli, _base_args(test_dirs) + args, obj={}, **kwargs)

    return _invoke


@pytest.fixture
def open_db(test_dirs):
    """Open the test database; closed after the test."""
    opened = []

    def _open():
        db = SenDB(test_dirs["db_path"], test_dirs["alembic_dir"])
        opened.append(db)
        return db

    yield _open

    for db in opened:
        db.close()


@pytest.fixture
def diagnostics():
    """Lines of CLI output reporting a problem in a given file."""

    def _lines(output: str, path: Path) -> list:
        return [line for line in output.splitlines() if line.startswith(f"{path}:")]

    return _lines
