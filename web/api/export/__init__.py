"""Export API."""

from web.api.export.views import export_csv, render_csv

__all__ = [
    "export_csv",
    "render_csv",
]
