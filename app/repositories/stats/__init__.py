"""Statistics repositories."""

from app.repositories.stats.stats import STATS_QUERIES, StatsRepository

__all__ = [
    "STATS_QUERIES",
    "StatsRepository",
]
