"""Dependency Injection container - initialized at app startup."""

import duckdb
from loguru import logger

from app.repositories.db import close, connect
from app.repositories.member import MemberRepository
from app.repositories.stats import StatsRepository
from app.services.members import MemberService
from app.services.stats import StatsService
from settings import DB_PATH


class Container:
    """Application DI container - owns the shared connection and all singletons."""

    _instance = None
    _initialized = False
    db: duckdb.DuckDBPyConnection | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, db_path: str = DB_PATH, db: duckdb.DuckDBPyConnection | None = None) -> None:
        """Open the connection and wire dependencies. Call once at app startup.

        Pass ``db`` to use a connection owned elsewhere; it is then not closed here.
        """
        if self._initialized:
            return

        self._owns_db = db is None
        self.db = db if db is not None else connect(db_path, read_only=True)

        # Repositories (singletons)
        self._member_repo = MemberRepository(self.db)
        self._stats_repo = StatsRepository(self.db)

        # Services (with injected repos)
        self.members = MemberService(member_repo=self._member_repo)
        self.stats = StatsService(stats_repo=self._stats_repo)

        self._initialized = True
        logger.info("Container initialized")

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        if not self._initialized:
            return
        if self._owns_db:
            close(self.db)
        self.db = None
        self._initialized = False
        logger.info("Container closed")


# Global container instance
container = Container()
