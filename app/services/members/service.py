"""Member directory service - search with pagination, lookup, options, export."""

from loguru import logger

from app.models.member import Member, SearchFilters, SearchRequest, SearchResult
from app.repositories.member import MAX_BIGINT, MemberRepository, resolve_sort, resolve_window
from app.services.members.pagination import paginate
from settings import DEFAULT_PAGE, DEFAULT_PAGE_SIZE


class MemberService:
    """Member directory business logic."""

    def __init__(self, member_repo: MemberRepository):
        self._members = member_repo
        logger.debug("MemberService initialized")

    def search(self, request: SearchRequest) -> SearchResult:
        """One page of matching members plus pagination.

        Rows and total come from two separate queries over the same predicate.
        They share no transaction, so the total may drift under concurrent writes.
        """
        sort = resolve_sort(request.sort_by, request.sort_order)
        limit, offset = resolve_window(request.page, request.page_size)

        if offset > MAX_BIGINT:
            logger.warning("search offset {} past the last row, returning an empty page", offset)
            items = []
        else:
            items = self._members.search(request.query, request.filters, sort, limit, offset)
        total = self._members.count(request.query, request.filters)

        page_size = request.page_size if request.page_size is not None else max(total, 1)
        pagination = paginate(total, request.page, page_size)
        logger.info(
            "search {!r}: {} of {} (page {}/{})",
            request.query,
            len(items),
            total,
            pagination.current_page,
            pagination.total_pages,
        )
        return SearchResult(query=request.query, items=items, pagination=pagination)

    def list_members(
        self,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort_by: str = "name",
        sort_order: str = "ASC",
    ) -> SearchResult:
        """Unfiltered listing."""
        return self.search(SearchRequest(page=page, page_size=page_size, sort_by=sort_by, sort_order=sort_order))

    def count(self, query: str, filters: SearchFilters | None = None) -> int:
        """Total members matching query and filters."""
        return self._members.count((query or "").strip(), filters)

    def get_by_id(self, member_id: int) -> Member | None:
        """Get a member, or None if absent."""
        member = self._members.get_by_id(member_id)
        if member is None:
            logger.info("Member {} not found", member_id)
        return member

    def get_filter_options(self) -> dict[str, list[str]]:
        """Distinct values per filterable field."""
        return self._members.get_filter_options()

    def export_all(self) -> list[Member]:
        """Every member ordered by id."""
        return self._members.export_all()
