"""Abstract Row Store: the table-level storage contract.

Every repository is built on this narrow API: read a whole table, or
overwrite a whole table.  There is no row-level write, so any mutation is
read-all / modify-in-memory / write-all.  Such a sequence is isolated from
other threads only while the caller holds ``lock(table)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

Row = dict[str, str]


class RowStore(ABC):

    @abstractmethod
    def read_all(self, table: str) -> list[Row]:
        """Return every row of *table*; a table never written reads as []."""

    @abstractmethod
    def write_all(self, table: str, rows: list[Row]) -> None:
        """Replace the whole content of *table* with *rows*.

        Atomic per call; nothing spans two calls.
        """

    @abstractmethod
    def lock(self, table: str) -> AbstractContextManager:
        """Return the re-entrant lock guarding read-modify-write on *table*.

        Every store instance backed by the same table hands out the same
        lock, so callers built from separate instances still exclude each
        other within one process.
        """
