"""Search request and result value objects."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity
from app.models.member.entities import Member
from settings import DEFAULT_PAGE, DEFAULT_PAGE_SIZE


def _text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass
class SearchFilters(BaseEntity):
    """Optional structured constraints narrowing a search.

    Blank text filters are treated as absent.
    """

    faction: str | None = None
    province: str | None = None
    position: str | None = None
    min_age: int | None = None
    max_age: int | None = None
    chair_only: bool = False
    vice_chair_only: bool = False

    def __post_init__(self):
        self.faction = _text(self.faction)
        self.province = _text(self.province)
        self.position = _text(self.position)


@dataclass
class SearchRequest(BaseEntity):
    """Normalized search request handed to the member service."""

    query: str = ""
    filters: SearchFilters = field(default_factory=SearchFilters)
    sort_by: str = "name"
    sort_order: str = "ASC"
    page: int = DEFAULT_PAGE
    page_size: int | None = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        self.query = (self.query or "").strip()


@dataclass
class Pagination(BaseEntity):
    """Pagination metadata derived from a count and the requested window."""

    current_page: int
    total_pages: int
    total_items: int
    page_size: int
    has_next: bool
    has_prev: bool


@dataclass
class SearchResult(BaseEntity):
    """A page of members plus its pagination metadata."""

    query: str
    items: list[Member]
    pagination: Pagination
