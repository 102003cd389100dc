"""Members API views - thin layer over services."""

from typing import Any

import pydantic

from app.container import container
from app.models.member import Member, Pagination, SearchFilters, SearchRequest
from settings import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from web.api.errors import NotFoundError, ValidationError, coerce_positive_int

from .schemas import (
    FilterOptionsResponse,
    MemberItem,
    MemberResponse,
    MembersResponse,
    PaginationInfo,
    SearchPayload,
    SearchResponse,
)


def _item(member: Member) -> MemberItem:
    return MemberItem(**member.to_dict())


def _pagination(p: Pagination) -> PaginationInfo:
    return PaginationInfo(
        current_page=p.current_page,
        total_pages=p.total_pages,
        total_items=p.total_items,
        items_per_page=p.page_size,
        has_next=p.has_next,
        has_prev=p.has_prev,
    )


def list_members(
    page: Any = DEFAULT_PAGE,
    limit: Any = DEFAULT_PAGE_SIZE,
    sort_by: str = "name",
    sort_order: str = "ASC",
) -> MembersResponse:
    """Get all members, one page at a time."""
    result = container.members.list_members(
        page=coerce_positive_int(page, DEFAULT_PAGE),
        page_size=coerce_positive_int(limit, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE),
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return MembersResponse(
        items=[_item(m) for m in result.items],
        pagination=_pagination(result.pagination),
    )


def parse_search(payload: dict[str, Any]) -> SearchRequest:
    """Validate a raw search body into a SearchRequest."""
    try:
        body = SearchPayload.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid search request: {e.error_count()} error(s)") from e

    return SearchRequest(
        query=body.query,
        filters=SearchFilters(**body.filters.model_dump()),
        sort_by=body.sort_by,
        sort_order=body.sort_order,
        page=body.page,
        page_size=body.limit,
    )


def search_members(payload: dict[str, Any]) -> SearchResponse:
    """Search members with free text, filters, sort and pagination."""
    result = container.members.search(parse_search(payload))

    return SearchResponse(
        query=result.query,
        results=[_item(m) for m in result.items],
        count=len(result.items),
        total=result.pagination.total_items,
        pagination=_pagination(result.pagination),
    )


def count_members(query: str = "", filters: dict[str, Any] | None = None) -> int:
    """Count members matching query and filters."""
    request = parse_search({"query": query, "filters": filters or {}})
    return container.members.count(request.query, request.filters)


def get_member(member_id: int) -> MemberResponse:
    """Get one member by id."""
    member = container.members.get_by_id(member_id)
    if member is None:
        raise NotFoundError(f"Member {member_id} not found")
    return MemberResponse(item=_item(member))


def get_filter_options() -> FilterOptionsResponse:
    """Get filter options for the search UI."""
    options = container.members.get_filter_options()
    return FilterOptionsResponse(**options)
