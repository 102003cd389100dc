"""Statistics service - composite report over the member table."""

from collections import Counter

from loguru import logger

from app.models.member import MemberSummary
from app.models.stats import LEADERSHIP_LABELS, AgeBucket, AgeSummary, CountItem, StatsReport
from app.repositories.stats import StatsRepository
from app.services.stats.gender import infer_gender


def _counts(rows: list) -> list[CountItem]:
    return [CountItem(label=r[0], count=int(r[1])) for r in rows]


def _gender_counts(rows: list) -> list[CountItem]:
    counter = Counter(infer_gender(r[0]) for r in rows)
    return [CountItem(label=g, count=n) for g, n in sorted(counter.items(), key=lambda x: (-x[1], x[0]))]


def _leadership(rows: list) -> list[CountItem]:
    # UNION ALL does not guarantee row order
    by_label = {r[0]: int(r[1]) for r in rows}
    return [CountItem(label=label, count=by_label[label]) for label in LEADERSHIP_LABELS if label in by_label]


class StatsService:
    """Statistics business logic."""

    def __init__(self, stats_repo: StatsRepository):
        self._stats = stats_repo
        logger.debug("StatsService initialized")

    def get_stats(self) -> StatsReport:
        """Build the report once every section query has settled."""
        sections = self._stats.get_sections()

        total = sections["total"]
        age = sections["age"]

        report = StatsReport(
            total=int(total[0][0]) if total else None,
            by_faction=_counts(sections["by_faction"]),
            by_province=_counts(sections["by_province"]),
            by_position=_counts(sections["by_position"]),
            by_age=[AgeBucket(label=r[0], count=int(r[1]), avg_age=r[2]) for r in sections["by_age"]],
            by_gender=_gender_counts(sections["by_gender"]),
            leadership=_leadership(sections["leadership"]),
            age=AgeSummary(avg_age=age[0][0], min_age=age[0][1], max_age=age[0][2]) if age else None,
            recent=[MemberSummary.from_row(r) for r in sections["recent"]],
        )
        logger.info("Stats computed: {} members, {} factions", report.total, len(report.by_faction))
        return report
