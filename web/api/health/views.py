"""Health API views."""

from datetime import UTC, datetime

import duckdb
from loguru import logger

from app.container import container
from settings import ENVIRONMENT

from .schemas import HealthResponse


def get_health() -> HealthResponse:
    """Report whether the shared connection answers a trivial query."""
    try:
        with container.db.cursor() as cur:
            cur.execute("SELECT 1").fetchone()
        database = "connected"
    except (duckdb.Error, AttributeError) as e:
        logger.warning("Health check failed: {}", e)
        database = "disconnected"

    return HealthResponse(
        status="healthy" if database == "connected" else "degraded",
        timestamp=datetime.now(UTC),
        database=database,
        environment=ENVIRONMENT,
    )
