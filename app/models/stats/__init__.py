"""Statistics domain models."""

from app.models.stats.buckets import (
    AGE_BUCKETS,
    CHAIR,
    LEADERSHIP_LABELS,
    NO_FACTION,
    ORDINARY,
    UNKNOWN,
    VICE_CHAIR,
    age_bucket,
)
from app.models.stats.entities import AgeBucket, AgeSummary, CountItem, StatsReport

__all__ = [
    "CountItem",
    "AgeBucket",
    "AgeSummary",
    "StatsReport",
    "AGE_BUCKETS",
    "LEADERSHIP_LABELS",
    "CHAIR",
    "VICE_CHAIR",
    "ORDINARY",
    "NO_FACTION",
    "UNKNOWN",
    "age_bucket",
]
