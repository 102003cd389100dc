"""Pagination math."""

import math

from app.models.member import Pagination


def total_pages(total_items: int, page_size: int) -> int:
    """ceil(total_items / page_size)."""
    return math.ceil(total_items / page_size) if page_size else 0


def paginate(total_items: int, page: int, page_size: int) -> Pagination:
    """Derive pagination metadata from a fresh count and the requested window."""
    pages = total_pages(total_items, page_size)
    return Pagination(
        current_page=page,
        total_pages=pages,
        total_items=total_items,
        page_size=page_size,
        has_next=page < pages,
        has_prev=page > 1,
    )
