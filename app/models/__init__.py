"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.member import (
    MEMBER_DDL,
    MEMBER_INDEXES,
    Member,
    MemberSummary,
    Pagination,
    SearchFilters,
    SearchRequest,
    SearchResult,
)
from app.models.stats import AgeBucket, AgeSummary, CountItem, StatsReport

ALL_DDL = [
    MEMBER_DDL,
    *MEMBER_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Member
    "MEMBER_DDL",
    "MEMBER_INDEXES",
    "Member",
    "MemberSummary",
    "SearchFilters",
    "SearchRequest",
    "Pagination",
    "SearchResult",
    # Stats
    "CountItem",
    "AgeBucket",
    "AgeSummary",
    "StatsReport",
    # All DDL
    "ALL_DDL",
]
