"""Stats API views - thin layer over services."""

from app.container import container

from .schemas import StatsResponse


def _round(value: float | None) -> float | None:
    return round(value, 1) if value is not None else None


def get_stats() -> StatsResponse:
    """Get the composite statistics report."""
    report = container.stats.get_stats()
    data = report.to_dict()

    for bucket in data["by_age"]:
        bucket["avg_age"] = _round(bucket["avg_age"])
    if data["age"]:
        data["age"]["avg_age"] = _round(data["age"]["avg_age"])

    return StatsResponse.model_validate(data)
