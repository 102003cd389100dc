"""Statistics services."""

from app.services.stats.gender import infer_gender
from app.services.stats.service import StatsService

__all__ = [
    "StatsService",
    "infer_gender",
]
