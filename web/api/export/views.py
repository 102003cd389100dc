"""Export API views - CSV rendering of the full member table."""

from app.container import container
from app.models.member import Member
from settings import EXPORT_FILENAME

from .schemas import ExportResponse

# (header, attribute, quoted)
EXPORT_COLUMNS = [
    ("id", "id", False),
    ("province_id", "province_id", False),
    ("name", "name", True),
    ("birthplace", "birthplace", True),
    ("birth_date", "birth_date", True),
    ("position", "position", True),
    ("faction", "faction", True),
    ("address", "address", True),
    ("remarks", "remarks", True),
    ("age", "age", False),
    ("province", "province", True),
]


def quote(value: str | None) -> str:
    """Wrap text in double quotes, doubling any inner quote."""
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def _bare(value: int | None) -> str:
    return "" if value is None else str(value)


def render_row(member: Member) -> str:
    return ",".join(
        quote(getattr(member, attr)) if quoted else _bare(getattr(member, attr)) for _, attr, quoted in EXPORT_COLUMNS
    )


def render_csv(members: list[Member]) -> str:
    """Header line plus one line per member, newline separated."""
    header = ",".join(name for name, _, _ in EXPORT_COLUMNS)
    return "\n".join([header, *(render_row(m) for m in members)])


def export_csv() -> ExportResponse:
    """Export every member as CSV."""
    members = container.members.export_all()
    return ExportResponse(filename=EXPORT_FILENAME, rows=len(members), content=render_csv(members))
