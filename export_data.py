#!/usr/bin/env python3
"""
Export the member table to CSV.

Usage:
    python export_data.py                    # Write dpr_data_export.csv
    python export_data.py out.csv            # Write to a custom path
    python export_data.py --db other.duckdb  # Read from another database
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from settings import DB_PATH, EXPORT_FILENAME  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api.export import export_csv  # noqa: E402

logger = setup_logging(level="INFO", to_file=False)


def main():
    args = sys.argv[1:]

    db_path = DB_PATH
    if "--db" in args:
        i = args.index("--db")
        if i + 1 >= len(args):
            print(__doc__)
            sys.exit(1)
        db_path = args[i + 1]
        args = args[:i] + args[i + 2 :]

    out = Path(args[0]) if args else Path(EXPORT_FILENAME)

    container.init(db_path=db_path)
    try:
        csv = export_csv()
    finally:
        container.close()

    out.write_text(csv.content, encoding="utf-8")
    logger.info("Exported {} members to {}", csv.rows, out)


if __name__ == "__main__":
    main()
