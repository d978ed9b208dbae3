"""One-off migration script: contact book JSON file -> SQL database."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the contacts package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contacts.core.logs import configure_logging  # noqa: E402
from contacts.db.session import create_schema  # noqa: E402
from contacts.storage import JsonContactStorage  # noqa: E402
from contacts.storage.sql_repository import SQLContactRepository  # noqa: E402


def migrate(path: str | None = None) -> int:
    storage = JsonContactStorage(path)
    persons = storage.load()
    if persons is None:
        raise SystemExit(f"File not found: {storage.path}")
    create_schema()
    SQLContactRepository().save(persons)
    return len(persons)


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Copy the JSON contact book into DATABASE_URL")
    ap.add_argument("--file", help="Path to the JSON file (default: CONTACTS_DATA_FILE)")
    args = ap.parse_args()
    configure_logging()
    count = migrate(args.file)
    print(f"{count} contacts migrated to the database successfully.")
