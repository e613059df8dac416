#!/usr/bin/env python3
"""
Database configuration modules.

- lookups.yaml: default category rows; notaries are only seeded from a
  custom file
- load_lookup_seeds: parse the seed file into (kind, name, label,
  description) records
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import yaml

from sen.core.exceptions import ValidationError
from sen.database.managers.lookup_manager import LOOKUP_CONFIGS


@dataclass(frozen=True)
class LookupSeed:
    """One default lookup row."""

    kind: str
    name: str
    label: Optional[str] = None
    description: Optional[str] = None


def load_lookup_seeds(path: Union[str, Path]) -> List[LookupSeed]:
    """
    Read the lookup seed file.

    Args:
        path: YAML file mapping lookup kinds to lists of names or
            ``{name, label, description}`` mappings

    Returns:
        Seeds in file order

    Raises:
        ValidationError: If a kind is unknown or an entry has no name
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    seeds: List[LookupSeed] = []
    for kind, entries in data.items():
        if kind not in LOOKUP_CONFIGS:
            raise ValidationError(f"Unknown lookup kind '{kind}' in {path}")

        for entry in entries or []:
            if isinstance(entry, str):
                seeds.append(LookupSeed(kind, entry))
            elif isinstance(entry, dict) and entry.get("name"):
                seeds.append(
                    LookupSeed(
                        kind,
                        str(entry["name"]),
                        entry.get("label"),
                        entry.get("description"),
                    )
                )
            else:
                raise ValidationError(f"Invalid {kind} entry in {path}: {entry!r}")
    return seeds
