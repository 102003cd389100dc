"""Statistics domain entities - computed aggregates over the member table."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity
from app.models.member.entities import MemberSummary


@dataclass
class CountItem(BaseEntity):
    """Number of members in a named group."""

    label: str
    count: int


@dataclass
class AgeBucket(BaseEntity):
    """Age histogram bucket with the average age inside it."""

    label: str
    count: int
    avg_age: float | None


@dataclass
class AgeSummary(BaseEntity):
    """Global age figures over members with a known age."""

    avg_age: float | None
    min_age: int | None
    max_age: int | None


@dataclass
class StatsReport(BaseEntity):
    """Composite statistics report.

    A section whose query failed is empty (lists) or None (scalars).
    """

    total: int | None = None
    by_faction: list[CountItem] = field(default_factory=list)
    by_province: list[CountItem] = field(default_factory=list)
    by_position: list[CountItem] = field(default_factory=list)
    by_age: list[AgeBucket] = field(default_factory=list)
    by_gender: list[CountItem] = field(default_factory=list)
    leadership: list[CountItem] = field(default_factory=list)
    age: AgeSummary | None = None
    recent: list[MemberSummary] = field(default_factory=list)
