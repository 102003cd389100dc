"""Member repository - search, lookup, filter options and export."""

from loguru import logger

from app.models.member import Member, SearchFilters
from app.repositories.base import BaseRepository
from app.repositories.member.filters import build_filter_clause
from app.repositories.member.sorting import SortSpec

MEMBER_COLUMNS = ", ".join(Member.columns())

BIRTHPLACE_OPTIONS_LIMIT = 100

FILTER_OPTION_QUERIES = {
    "faction": """
        SELECT DISTINCT faction FROM member
        WHERE faction IS NOT NULL AND faction != '' AND faction != '-'
        ORDER BY faction
    """,
    "province": """
        SELECT DISTINCT province FROM member
        WHERE province IS NOT NULL AND province != ''
        ORDER BY province
    """,
    "position": """
        SELECT DISTINCT position FROM member
        WHERE position IS NOT NULL AND position != ''
        ORDER BY position
    """,
    "birthplace": f"""
        SELECT DISTINCT birthplace FROM member
        WHERE birthplace IS NOT NULL AND birthplace != ''
        ORDER BY birthplace
        LIMIT {BIRTHPLACE_OPTIONS_LIMIT}
    """,
}


class MemberRepository(BaseRepository):
    """Repository for member data access."""

    option_queries = FILTER_OPTION_QUERIES

    def search(
        self,
        query: str,
        filters: SearchFilters | None = None,
        sort: SortSpec | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Member]:
        """Fetch one ordered window of members matching query and filters."""
        where = build_filter_clause(query, filters)
        sort = sort or SortSpec()

        sql = f"SELECT {MEMBER_COLUMNS} FROM member {where.where_sql()} {sort.order_sql()}"
        params = list(where.params)
        if limit is not None:
            sql += " LIMIT ? OFFSET ?"
            params += [limit, offset]

        rows = self.fetchall(sql, params)
        logger.debug("search({!r}): {} rows (limit={}, offset={})", query, len(rows), limit, offset)
        return [Member.from_row(r) for r in rows]

    def count(self, query: str, filters: SearchFilters | None = None) -> int:
        """Count members matching the same predicate as ``search``."""
        where = build_filter_clause(query, filters)
        row = self.fetchone(f"SELECT COUNT(*) FROM member {where.where_sql()}", where.params)
        return int(row[0])

    def get_by_id(self, member_id: int) -> Member | None:
        """Get one member, or None if the id is unknown."""
        row = self.fetchone(f"SELECT {MEMBER_COLUMNS} FROM member WHERE id = ?", [member_id])
        return Member.from_row(row) if row else None

    def get_filter_options(self) -> dict[str, list[str]]:
        """Distinct values offered for each filterable field; a failed field is empty."""
        results = self.fetch_settled(self.option_queries)
        options = {key: [r[0] for r in rows] for key, rows in results.items()}
        logger.debug("get_filter_options: {}", {k: len(v) for k, v in options.items()})
        return options

    def export_all(self) -> list[Member]:
        """Every member, ordered by id."""
        rows = self.fetchall(f"SELECT {MEMBER_COLUMNS} FROM member ORDER BY id")
        logger.info("export_all: {} members", len(rows))
        return [Member.from_row(r) for r in rows]
