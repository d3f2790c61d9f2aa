"""Base repository class."""

from collections.abc import Iterator, Sequence
from typing import Any

import duckdb
import polars as pl
from loguru import logger

from app.repositories.db import get_db
from settings import PAGE_SIZE


def dedupe_by_key(rows: list[dict], key: Sequence[str]) -> list[dict]:
    """Keep the last row for each key, preserving first-seen order."""
    by_key: dict[tuple, dict] = {}
    for row in rows:
        by_key[tuple(row[k] for k in key)] = row
    return list(by_key.values())


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None, read_only: bool = False):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def paginate(self, query: str, params: list | None = None, page_size: int = PAGE_SIZE) -> Iterator[list]:
        """Yield pages of `query` (which must be ORDER BY-stable) until a short page."""
        offset = 0
        while True:
            page = self.fetchall(f"{query} LIMIT {page_size} OFFSET {offset}", params)
            if page:
                yield page
            if len(page) < page_size:
                return
            offset += page_size

    def _check_writable(self) -> None:
        if self._read_only:
            raise RuntimeError(f"{self.__class__.__name__} is read-only")

    def _write_frame(self, sql: str, table: str, rows: list[dict]) -> int:
        columns = list(rows[0].keys())
        df = pl.DataFrame(rows, infer_schema_length=None)
        view = f"{table}_df"
        cols = ", ".join(columns)
        self._db.register(view, df)
        try:
            self._db.execute(sql.format(cols=cols, view=view))
        finally:
            self._db.unregister(view)
        return len(rows)

    def upsert(self, table: str, rows: list[dict], key: Sequence[str], update: bool = True) -> int:
        """INSERT ... ON CONFLICT (key) DO UPDATE (or DO NOTHING) for a batch of rows."""
        self._check_writable()
        if not rows:
            return 0
        rows = dedupe_by_key(rows, key)
        to_update = [c for c in rows[0] if c not in key]
        if update and to_update:
            action = "DO UPDATE SET " + ", ".join(f"{c} = EXCLUDED.{c}" for c in to_update)
        else:
            action = "DO NOTHING"
        sql = (
            f"INSERT INTO {table} ({{cols}}) SELECT {{cols}} FROM {{view}} "
            f"ON CONFLICT ({', '.join(key)}) {action}"
        )
        return self._write_frame(sql, table, rows)

    def insert(self, table: str, rows: list[dict]) -> int:
        """Plain batch insert."""
        self._check_writable()
        if not rows:
            return 0
        return self._write_frame(f"INSERT INTO {table} ({{cols}}) SELECT {{cols}} FROM {{view}}", table, rows)

    def delete_in(self, table: str, column: str, values: Sequence[Any]) -> None:
        """DELETE FROM table WHERE column IN (values)."""
        self._check_writable()
        if not values:
            return
        placeholders = ", ".join("?" for _ in values)
        self.execute(f"DELETE FROM {table} WHERE {column} IN ({placeholders})", list(values))

    def count(self, table: str) -> int:
        return self.fetchone(f"SELECT COUNT(*) FROM {table}")[0]
