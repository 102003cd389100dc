"""Member directory services."""

from app.services.members.pagination import paginate, total_pages
from app.services.members.service import MemberService

__all__ = [
    "MemberService",
    "paginate",
    "total_pages",
]
