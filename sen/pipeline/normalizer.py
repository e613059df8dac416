#!/usr/bin/env python3
"""
normalizer.py
-------------
Cleans raw spreadsheet cells before anything else reads them.

Spreadsheets exported from different tools arrive with mojibake,
decomposed accents, byte-order marks and non-breaking spaces. Each cell is
repaired with ftfy, composed to NFC and trimmed. Curly quotes are kept as
transcribed.

Functions:
    normalize_field: Clean one cell
    normalize_row: Clean every cell of a row
    open_csv: Open a CSV file the way the importers read it
    read_records: Yield (row number, raw row) pairs from a CSV file
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Callable, Iterator, List, Optional, Sequence, Tuple, Union

from ftfy import fix_text


def normalize_field(value: Optional[str]) -> str:
    """
    Repair one cell to canonical Unicode and trim it.

    Never raises for malformed text; ``None`` becomes the empty string.

    Examples:
        >>> normalize_field("  JosÃ©\\u00a0")
        'José'
    """
    if not value:
        return ""
    return fix_text(value, uncurl_quotes=False, normalization="NFC").strip()


def normalize_row(row: Sequence[Optional[str]]) -> List[str]:
    """Return a list of the same length with every field normalized."""
    return [normalize_field(value) for value in row]


def open_csv(path: Union[str, Path]) -> IO[str]:
    """
    Open a CSV file for reading.

    A leading BOM is dropped and undecodable bytes become U+FFFD instead of
    aborting the import.
    """
    return open(path, "r", encoding="utf-8-sig", errors="replace", newline="")


def read_records(
    handle: IO[str],
    on_error: Optional[Callable[[int, csv.Error], None]] = None,
) -> Iterator[Tuple[int, List[str]]]:
    """
    Yield ``(row_number, row)`` for every CSV record in ``handle``.

    Row numbers are 1-based and count records, so the header is row 1.

    A record the csv module rejects (a cell over ``csv.field_size_limit``,
    a NUL byte) is handed to ``on_error`` with its row number and reading
    resumes at the next record. Without ``on_error`` the csv.Error is raised.
    """
    reader = csv.reader(handle)
    row_number = 0
    while True:
        row_number += 1
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            if on_error is None:
                raise
            on_error(row_number, e)
            continue
        yield row_number, row
