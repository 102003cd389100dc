"""Stats repository - aggregate queries over the member table."""

from loguru import logger

from app.models.stats import AGE_BUCKETS, CHAIR, NO_FACTION, ORDINARY, UNKNOWN, VICE_CHAIR
from app.repositories.base import BaseRepository

PROVINCE_LIMIT = 15
POSITION_LIMIT = 10
RECENT_LIMIT = 5


def _age_case() -> str:
    """CASE expression mapping age to its bucket label."""
    whens = [f"WHEN age IS NULL THEN '{UNKNOWN}'"]
    for label, low, high in AGE_BUCKETS:
        if low is None:
            cond = f"age <= {high}"
        elif high is None:
            cond = f"age >= {low}"
        else:
            cond = f"age BETWEEN {low} AND {high}"
        whens.append(f"WHEN {cond} THEN '{label}'")
    return "CASE " + " ".join(whens) + f" ELSE '{UNKNOWN}' END"


STATS_QUERIES = {
    "total": "SELECT COUNT(*) FROM member",
    "by_faction": f"""
        SELECT
            CASE
                WHEN faction IS NULL OR faction = '' OR faction = '-' THEN '{NO_FACTION}'
                ELSE faction
            END AS label,
            COUNT(*) AS cnt
        FROM member
        GROUP BY label
        ORDER BY cnt DESC, label
    """,
    "by_province": f"""
        SELECT province, COUNT(*) AS cnt
        FROM member
        WHERE province IS NOT NULL
        GROUP BY province
        ORDER BY cnt DESC, province
        LIMIT {PROVINCE_LIMIT}
    """,
    "by_position": f"""
        SELECT position, COUNT(*) AS cnt
        FROM member
        WHERE position IS NOT NULL AND position != ''
        GROUP BY position
        ORDER BY cnt DESC, position
        LIMIT {POSITION_LIMIT}
    """,
    "by_age": f"""
        SELECT {_age_case()} AS label, COUNT(*) AS cnt, AVG(age) AS avg_age
        FROM member
        GROUP BY label
        ORDER BY cnt DESC, label
    """,
    # Gender is inferred from names in Python
    "by_gender": "SELECT name FROM member",
    # Three independent counts; the flags are not exclusive by schema
    "leadership": f"""
        SELECT '{CHAIR}' AS label, COUNT(*) AS cnt FROM member WHERE is_chair = TRUE
        UNION ALL
        SELECT '{VICE_CHAIR}' AS label, COUNT(*) AS cnt FROM member WHERE is_vice_chair = TRUE
        UNION ALL
        SELECT '{ORDINARY}' AS label, COUNT(*) AS cnt FROM member
        WHERE is_chair = FALSE AND is_vice_chair = FALSE
    """,
    "age": "SELECT AVG(age), MIN(age), MAX(age) FROM member WHERE age IS NOT NULL",
    "recent": f"""
        SELECT name, faction, position, province
        FROM member
        ORDER BY id DESC
        LIMIT {RECENT_LIMIT}
    """,
}


class StatsRepository(BaseRepository):
    """Repository for member statistics."""

    queries = STATS_QUERIES

    def get_sections(self) -> dict[str, list]:
        """Raw rows per statistics section; a failed section is an empty list."""
        sections = self.fetch_settled(self.queries)
        logger.debug("get_sections: {}", {k: len(v) for k, v in sections.items()})
        return sections
