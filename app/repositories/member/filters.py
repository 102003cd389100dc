"""Filter clause builder - free text plus structured filters to a WHERE clause.

Every user supplied value travels as a bound parameter. Only fixed column
names and operators ever reach the SQL text.
"""

from dataclasses import dataclass, field

from app.models.member import SearchFilters

# Columns covered by the free-text query, in placeholder order.
TEXT_SEARCH_FIELDS = ("name", "faction", "position", "birthplace", "province", "address")


def _contains(column: str) -> str:
    return f"LOWER({column}) LIKE LOWER(?)"


def _pattern(value: str) -> str:
    return f"%{value}%"


@dataclass
class FilterClause:
    """Conjunction of SQL clauses with their bound parameters, in placeholder order."""

    clauses: list[str] = field(default_factory=list)
    params: list = field(default_factory=list)

    def add(self, clause: str, *params) -> None:
        self.clauses.append(clause)
        self.params.extend(params)

    def where_sql(self) -> str:
        """Render as a WHERE clause (``WHERE 1=1`` when nothing applies)."""
        return " ".join(["WHERE 1=1", *(f"AND {c}" for c in self.clauses)])


def build_filter_clause(query: str, filters: SearchFilters | None = None) -> FilterClause:
    """Translate a trimmed query and a filter set into a FilterClause.

    Clause order is fixed: text search, faction, province, position,
    min age, max age, chair flag, vice-chair flag.
    """
    filters = filters or SearchFilters()
    clause = FilterClause()

    if query:
        disjunction = " OR ".join(_contains(col) for col in TEXT_SEARCH_FIELDS)
        pattern = _pattern(query)
        clause.add(f"({disjunction})", *[pattern] * len(TEXT_SEARCH_FIELDS))

    if filters.faction:
        clause.add(_contains("faction"), _pattern(filters.faction))
    if filters.province:
        clause.add(_contains("province"), _pattern(filters.province))
    if filters.position:
        clause.add(_contains("position"), _pattern(filters.position))
    if filters.min_age is not None:
        clause.add("age >= ?", filters.min_age)
    if filters.max_age is not None:
        clause.add("age <= ?", filters.max_age)
    if filters.chair_only:
        clause.add("is_chair = TRUE")
    if filters.vice_chair_only:
        clause.add("is_vice_chair = TRUE")

    return clause
