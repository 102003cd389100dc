"""Members API request and response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from settings import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from web.api.errors import coerce_positive_int


class FiltersPayload(BaseModel):
    """Structured filters of a search request."""

    faction: str | None = None
    province: str | None = None
    position: str | None = None
    min_age: int | None = None
    max_age: int | None = None
    chair_only: bool = False
    vice_chair_only: bool = False

    @field_validator("min_age", "max_age", mode="before")
    @classmethod
    def _blank_age(cls, v: Any) -> Any:
        # Form inputs send "" for an untouched age field
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SearchPayload(BaseModel):
    """Search request body."""

    query: str = ""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    sort_by: str = "name"
    sort_order: str = "ASC"
    filters: FiltersPayload = Field(default_factory=FiltersPayload)

    @field_validator("query", mode="before")
    @classmethod
    def _query(cls, v: Any) -> str:
        return str(v).strip() if v is not None else ""

    @field_validator("page", mode="before")
    @classmethod
    def _page(cls, v: Any) -> int:
        return coerce_positive_int(v, DEFAULT_PAGE)

    @field_validator("limit", mode="before")
    @classmethod
    def _limit(cls, v: Any) -> int:
        return coerce_positive_int(v, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)

    @field_validator("sort_by", "sort_order", mode="before")
    @classmethod
    def _sort(cls, v: Any) -> str:
        return str(v) if v is not None else ""


class MemberItem(BaseModel):
    """Member record."""

    id: int
    province_id: int | None
    name: str | None
    birthplace: str | None
    birth_date: str | None
    position: str | None
    faction: str | None
    address: str | None
    remarks: str | None
    age: int | None
    province: str | None
    is_chair: bool
    is_vice_chair: bool
    created_at: datetime | None


class PaginationInfo(BaseModel):
    """Pagination metadata."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next: bool
    has_prev: bool


class MembersResponse(BaseModel):
    """Member listing response."""

    items: list[MemberItem]
    pagination: PaginationInfo


class SearchResponse(BaseModel):
    """Search response."""

    query: str
    results: list[MemberItem]
    count: int
    total: int
    pagination: PaginationInfo


class MemberResponse(BaseModel):
    """Single member response."""

    item: MemberItem


class FilterOptionsResponse(BaseModel):
    """Distinct values per filterable field."""

    faction: list[str]
    province: list[str]
    position: list[str]
    birthplace: list[str]
