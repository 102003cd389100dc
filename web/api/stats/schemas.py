"""Stats API response schemas."""

from pydantic import BaseModel


class CountEntry(BaseModel):
    """Members in one group."""

    label: str
    count: int


class AgeBucketEntry(BaseModel):
    """Age histogram bucket."""

    label: str
    count: int
    avg_age: float | None


class AgeSummaryEntry(BaseModel):
    """Global age figures."""

    avg_age: float | None
    min_age: int | None
    max_age: int | None


class RecentMemberEntry(BaseModel):
    """Recently added member."""

    name: str | None
    faction: str | None
    position: str | None
    province: str | None


class StatsResponse(BaseModel):
    """Statistics report response."""

    total: int | None
    by_faction: list[CountEntry]
    by_province: list[CountEntry]
    by_position: list[CountEntry]
    by_age: list[AgeBucketEntry]
    by_gender: list[CountEntry]
    leadership: list[CountEntry]
    age: AgeSummaryEntry | None
    recent: list[RecentMemberEntry]
