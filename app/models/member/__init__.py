"""Member domain models - the legislator table and search value objects."""

from app.models.member.entities import Member, MemberSummary
from app.models.member.member import MEMBER_DDL, MEMBER_INDEXES
from app.models.member.query import Pagination, SearchFilters, SearchRequest, SearchResult

__all__ = [
    "MEMBER_DDL",
    "MEMBER_INDEXES",
    "Member",
    "MemberSummary",
    "SearchFilters",
    "SearchRequest",
    "Pagination",
    "SearchResult",
]
