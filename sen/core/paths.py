#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the SEN project.

All project paths are defined here as Path objects, relative to the
project root, so the CLIs and the database layer agree on where things
live. Every path can be overridden per invocation through CLI options.

The project structure:
    ROOT/
    ├── sen/           # Package code (migrations live in sen/migrations)
    ├── data/          # Imported database and source spreadsheets
    └── logs/          # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/sen/core/paths.py.

    Returns:
        Path object for project root

    Raises:
        RuntimeError: If the package directory cannot be found under ROOT
    """
    current_file = Path(__file__).resolve()

    # paths.py -> core/ -> sen/ -> ROOT/
    root = current_file.parent.parent.parent

    if not (root / "sen").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'sen'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "sen"
DATA_DIR = ROOT / "data"

# --- Database ---
ALEMBIC_DIR = PACKAGE_DIR / "migrations"
ALEMBIC_INI = ROOT / "alembic.ini"
DB_DIR = DATA_DIR / "db"
DB_PATH = DB_DIR / "sen.db"

# --- Reference data ---
LOOKUPS_FILE = PACKAGE_DIR / "database" / "configs" / "lookups.yaml"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
