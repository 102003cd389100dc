"""Base repository class."""

from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager

import duckdb
from loguru import logger

from settings import MAX_WORKERS


class BaseRepository:
    """Base repository over an explicitly owned DuckDB connection.

    Every query runs on its own cursor of the shared connection, which is how
    DuckDB lets several threads use one database.
    """

    def __init__(self, db: duckdb.DuckDBPyConnection, max_workers: int = MAX_WORKERS):
        self._db = db
        self._max_workers = max_workers
        logger.debug("{} initialized", self.__class__.__name__)

    @contextmanager
    def cursor(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Short-lived cursor on the shared connection."""
        cur = self._db.cursor()
        try:
            yield cur
        finally:
            cur.close()

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        with self.cursor() as cur:
            result = cur.execute(query, params) if params else cur.execute(query)
            return result.fetchall()

    def fetchone(self, query: str, params: list | None = None) -> tuple | None:
        """Execute and fetch one row."""
        with self.cursor() as cur:
            result = cur.execute(query, params) if params else cur.execute(query)
            return result.fetchone()

    def fetch_settled(self, queries: dict[str, str]) -> dict[str, list]:
        """Run independent queries concurrently and wait until every one has settled.

        A failed query is logged and its rows are replaced with an empty list;
        the others are unaffected.
        """
        if not queries:
            return {}

        workers = max(1, min(self._max_workers, len(queries)))
        results: dict[str, list] = {}
        failed: list[str] = []
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {}
            for key, query in queries.items():
                futures[key] = pool.submit(self.fetchall, query)

            for key, future in futures.items():
                try:
                    results[key] = future.result()
                except Exception as e:
                    logger.error("Query {} failed: {}", key, e)
                    results[key] = []
                    failed.append(key)

        logger.debug("fetch_settled: {} queries, failed: {}", len(queries), failed or "none")
        return results
