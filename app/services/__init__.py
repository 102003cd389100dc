"""Services package - service class exports."""

from app.services.members.service import MemberService
from app.services.stats.service import StatsService

__all__ = [
    "MemberService",
    "StatsService",
]
