"""Export API response schemas."""

from pydantic import BaseModel


class ExportResponse(BaseModel):
    """Rendered CSV file."""

    filename: str
    content_type: str = "text/csv"
    rows: int
    content: str
