"""Stats API."""

from web.api.stats.views import get_stats

__all__ = [
    "get_stats",
]
