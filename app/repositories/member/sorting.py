"""Sort and pagination resolution for member searches."""

from dataclasses import dataclass

DEFAULT_SORT_FIELD = "name"

# LIMIT and OFFSET are BIGINT in DuckDB
MAX_BIGINT = 2**63 - 1

# Requested name -> column. ORDER BY cannot be parameter-bound, so only these reach SQL.
SORT_FIELDS = {
    "name": "name",
    "faction": "faction",
    "position": "position",
    "age": "age",
    "birthplace": "birthplace",
    "province": "province",
    "created_at": "created_at",
    "createdAt": "created_at",
}


@dataclass(frozen=True)
class SortSpec:
    """Whitelisted sort column and normalized direction."""

    field: str = DEFAULT_SORT_FIELD
    direction: str = "ASC"

    def order_sql(self) -> str:
        # id breaks ties so pages never overlap
        return f"ORDER BY {self.field} {self.direction}, id ASC"


def resolve_sort(sort_by: str | None, sort_order: str | None) -> SortSpec:
    """Unknown fields fall back to name; any casing of "desc" is descending."""
    field = SORT_FIELDS.get(sort_by or "", DEFAULT_SORT_FIELD)
    direction = "DESC" if (sort_order or "").strip().upper() == "DESC" else "ASC"
    return SortSpec(field=field, direction=direction)


def resolve_window(page: int, page_size: int | None) -> tuple[int | None, int]:
    """Convert a 1-based page and page size into (limit, offset).

    Inputs are expected to be coerced to positive integers already.
    ``page_size=None`` means no limit. The limit is capped at ``MAX_BIGINT``;
    the offset is not, so callers must check it before querying.
    """
    if page_size is None:
        return None, 0
    return min(page_size, MAX_BIGINT), (page - 1) * page_size
