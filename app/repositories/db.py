"""DuckDB store - connections and schema."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create the sequence and every table (IF NOT EXISTS, so safe on every open)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("Store schema ready ({} statements)", len(ALL_DDL))


def connect(path: str | Path = DB_PATH, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open the store file; writable connections also create missing tables."""
    path = Path(path)
    if read_only and not path.exists():
        # a missing file cannot be opened read-only
        logger.warning("Store not found: {}. Creating empty store.", path)
        duckdb.connect(str(path)).close()
        read_only = False
    conn = duckdb.connect(str(path), read_only=read_only)
    if not read_only:
        init_tables(conn)
    logger.debug("Store opened: {} (read_only={})", path, read_only)
    return conn


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Per-thread connection used by repositories built without an explicit one."""
    conn = getattr(_local, "conn", None)
    if conn is None:
        conn = _local.conn = connect(DB_PATH, read_only=read_only)
    return conn


def close_db() -> None:
    conn = getattr(_local, "conn", None)
    if conn is not None:
        conn.close()
        _local.conn = None
        logger.debug("Store connection closed")


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """A fresh writable connection for one ETL run; close it (or use `with`) when done."""
    return connect(DB_PATH)
