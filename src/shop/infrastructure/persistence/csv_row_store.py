"""CSV-file-backed implementation of RowStore.

One ``<table>.csv`` per table under a data directory: a header row, then
one row per record, every cell text.  Each write goes to its own temp file
in the same directory, which then replaces the table file, so a crash
mid-write never leaves a half-written table behind.

Table locks are process-wide and keyed by the table file's path: two
``CsvRowStore`` instances over the same directory share them.
"""

from __future__ import annotations

import csv
import logging
import os
import tempfile
import threading
from contextlib import AbstractContextManager
from pathlib import Path
from typing import TextIO

from shop.domain.repository.row_store import Row, RowStore

logger = logging.getLogger(__name__)

_table_locks: dict[Path, AbstractContextManager] = {}
_table_locks_guard = threading.Lock()


class CsvRowStore(RowStore):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._data_dir.mkdir(parents=True, exist_ok=True)

    # --- RowStore interface ---------------------------------------------------

    def read_all(self, table: str) -> list[Row]:
        path = self._path(table)
        if not path.exists():
            return []
        with path.open(newline="", encoding="utf-8") as fh:
            rows = [
                {key: value or "" for key, value in raw.items() if key is not None}
                for raw in csv.DictReader(fh)
            ]
        logger.debug("Read %d row(s) from %s", len(rows), path)
        return rows

    def write_all(self, table: str, rows: list[Row]) -> None:
        path = self._path(table)
        with self.lock(table):
            tmp_path: Path | None = None
            try:
                with tempfile.NamedTemporaryFile(
                    "w",
                    dir=self._data_dir,
                    prefix=f".{table}.",
                    suffix=".tmp",
                    delete=False,
                    newline="",
                    encoding="utf-8",
                ) as fh:
                    tmp_path = Path(fh.name)
                    _write_rows(fh, rows)
                os.replace(tmp_path, path)
            except Exception:
                if tmp_path is not None:
                    tmp_path.unlink(missing_ok=True)
                raise
        logger.debug("Wrote %d row(s) to %s", len(rows), path)

    def lock(self, table: str) -> AbstractContextManager:
        key = self._path(table).resolve()
        with _table_locks_guard:
            if key not in _table_locks:
                _table_locks[key] = threading.RLock()
            return _table_locks[key]

    # --- File helpers ---------------------------------------------------------

    def _path(self, table: str) -> Path:
        return self._data_dir / f"{table}.csv"


def _write_rows(fh: TextIO, rows: list[Row]) -> None:
    if not rows:
        return
    writer = csv.DictWriter(fh, fieldnames=_header(rows), restval="")
    writer.writeheader()
    for row in rows:
        writer.writerow({key: str(value) for key, value in row.items()})


def _header(rows: list[Row]) -> list[str]:
    """Union of the rows' keys in first-seen order."""
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)
