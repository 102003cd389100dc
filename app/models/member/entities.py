"""Member domain entities."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity


@dataclass
class Member(BaseEntity):
    """One legislator row, column for column."""

    id: int
    province_id: int | None
    name: str | None
    birthplace: str | None
    birth_date: str | None
    position: str | None
    faction: str | None
    address: str | None
    remarks: str | None
    age: int | None
    province: str | None
    is_chair: bool
    is_vice_chair: bool
    created_at: datetime | None


@dataclass
class MemberSummary(BaseEntity):
    """Short projection used for the recent members list."""

    name: str | None
    faction: str | None
    position: str | None
    province: str | None
