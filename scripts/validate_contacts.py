#!/usr/bin/env python3
"""
Check a contact book JSON file and report the first problem found.

Usage:
  python scripts/validate_contacts.py [--file data/contacts.json] [--identity full|name]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the contacts package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contacts.core.config import IDENTITY_POLICIES, get_settings  # noqa: E402
from contacts.core.logs import configure_logging  # noqa: E402
from contacts.services.contact_service import describe_error  # noqa: E402
from contacts.storage import DataLoadingError, JsonContactStorage, StorageIOError  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Validate a contact book file")
    ap.add_argument("--file", help="Path to the JSON file (default: CONTACTS_DATA_FILE)")
    ap.add_argument("--identity", choices=IDENTITY_POLICIES, help="Duplicate detection policy")
    args = ap.parse_args()

    configure_logging()
    path = Path(args.file or get_settings().data_file)
    storage = JsonContactStorage(path, identity_policy=args.identity)
    try:
        persons = storage.load()
    except DataLoadingError as exc:
        print(f"INVALID: {describe_error(exc.cause)}")
        return 1
    except StorageIOError as exc:
        print(f"ERROR: {exc}")
        return 1
    if persons is None:
        print(f"ERROR: file not found: {path}")
        return 1
    print(f"OK: {len(persons)} contacts in {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
