"""Repositories package - data access layer for the member database."""

from app.repositories.base import BaseRepository
from app.repositories.db import (
    close,
    connect,
    init_tables,
    open_db,
)
from app.repositories.member import MemberRepository
from app.repositories.stats import StatsRepository

__all__ = [
    # DB
    "connect",
    "close",
    "open_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Member
    "MemberRepository",
    # Stats
    "StatsRepository",
]
