#!/usr/bin/env python3
"""
transaction.py
--------------
Caller-owned unit of work for one CSV row.

A RowTransaction commits everything a row staged, or discards all of it:
the session is rolled back, every object is expunged so nothing half-built
leaks into the next row, and the owner's caches are cleared.

Usage:
    transaction = RowTransaction(session, on_discard=resolver.clear_caches)
    with transaction.scope(path, row_number):
        service.process_row(row)
"""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from sqlalchemy.orm import Session

from sen.core.exceptions import RowImportError


class RowTransaction:
    """
    Commit-or-discard wrapper around a session, one row at a time.

    Attributes:
        session: Session the row's changes are staged in
        on_discard: Called after a rollback (typically a cache reset)
    """

    def __init__(
        self, session: Session, on_discard: Optional[Callable[[], None]] = None
    ):
        self.session = session
        self.on_discard = on_discard

    def commit(self) -> None:
        """Flush pending changes and commit them."""
        self.session.flush()
        self.session.commit()

    def discard(self) -> None:
        """Roll back, expunge every object and reset the owner's caches."""
        self.session.rollback()
        self.session.expunge_all()
        if self.on_discard is not None:
            self.on_discard()

    @contextmanager
    def scope(self, file: Union[str, Path], row: int) -> Iterator[Session]:
        """
        Run the body as one row: commit on success, discard on any error.

        Raises:
            RowImportError: Wrapping whatever the body (or the commit) raised
        """
        try:
            yield self.session
            self.commit()
        except Exception as e:
            self.discard()
            raise RowImportError(file, row, e, RowImportError.classify(e)) from e
