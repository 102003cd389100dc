"""Member repositories."""

from app.repositories.member.filters import FilterClause, build_filter_clause
from app.repositories.member.member import MemberRepository
from app.repositories.member.sorting import MAX_BIGINT, SortSpec, resolve_sort, resolve_window

__all__ = [
    "MAX_BIGINT",
    "MemberRepository",
    "FilterClause",
    "build_filter_clause",
    "SortSpec",
    "resolve_sort",
    "resolve_window",
]
