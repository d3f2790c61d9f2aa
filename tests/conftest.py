"""Shared fixtures."""

import io
import json
import zipfile

import duckdb
import pytest

from app.repositories.db import init_tables


@pytest.fixture
def conn():
    """In-memory store with every table created."""
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


def make_zip(members: dict[str, object]) -> bytes:
    """ZIP archive whose members are JSON-encoded (bytes are written as-is)."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        for name, content in members.items():
            data = content if isinstance(content, bytes) else json.dumps(content).encode("utf-8")
            archive.writestr(name, data)
    return buf.getvalue()


@pytest.fixture
def zip_bytes():
    return make_zip
