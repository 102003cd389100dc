"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("DPR_DB_PATH", "dpr_data.duckdb")

# Environment
ENVIRONMENT = os.getenv("DPR_ENV", "development")

# Logging
LOG_DIR = Path(os.getenv("DPR_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("DPR_LOG_LEVEL", "INFO")

# Search
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = int(os.getenv("DPR_MAX_PAGE_SIZE", "1000"))

# Aggregation fan-out
MAX_WORKERS = int(os.getenv("DPR_MAX_WORKERS", "8"))

# Export
EXPORT_FILENAME = "dpr_data_export.csv"
