"""DuckDB connection management."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

MEMORY = ":memory:"


def db_exists(path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return path == MEMORY or Path(path).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if the member table already exists."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'member'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def _ensure_db_exists(path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
        conn = duckdb.connect(path)
        init_tables(conn)
        conn.close()


def connect(path: str = DB_PATH, read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Open the shared connection. In-memory databases are always writable."""
    if path == MEMORY:
        conn = duckdb.connect(MEMORY)
        init_tables(conn)
    else:
        _ensure_db_exists(path)
        conn = duckdb.connect(path, read_only=read_only)
    logger.debug("DB connected: {} (read_only={})", path, read_only)
    return conn


def close(conn: duckdb.DuckDBPyConnection | None) -> None:
    """Close a connection opened by ``connect``."""
    if conn is not None:
        conn.close()
        logger.debug("DB connection closed")


@contextmanager
def open_db(path: str = DB_PATH, read_only: bool = True) -> Iterator[duckdb.DuckDBPyConnection]:
    """Scoped connection, always released on exit."""
    conn = connect(path, read_only)
    try:
        yield conn
    finally:
        close(conn)
