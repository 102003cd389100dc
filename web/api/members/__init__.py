"""Members API."""

from web.api.members.views import (
    count_members,
    get_filter_options,
    get_member,
    list_members,
    parse_search,
    search_members,
)

__all__ = [
    "list_members",
    "search_members",
    "parse_search",
    "count_members",
    "get_member",
    "get_filter_options",
]
