"""
JSON-file persistence for the contact book.

``load_collection``/``save_collection`` work on any open text stream; the
``JsonContactStorage`` wrapper owns a file path and opens it with ``with`` so
the handle is released even when conversion fails.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from contacts.core.config import get_settings
from contacts.domain.persons import Person

from .collection import JsonSerializableContactBook
from .errors import DataLoadingError, IllegalValueError, StorageIOError

logger = logging.getLogger(__name__)


def load_collection(source: TextIO, *, identity_policy: Optional[str] = None) -> List[Person]:
    """Read a serialized contact book from ``source`` and rebuild its persons."""
    try:
        data = json.load(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StorageIOError(f"Malformed JSON in contact book: {exc}") from exc
    except OSError as exc:
        raise StorageIOError(f"Could not read contact book: {exc}") from exc
    try:
        return JsonSerializableContactBook.from_dict(data).to_model(identity_policy)
    except IllegalValueError as exc:
        raise DataLoadingError(exc) from exc


def dumps_collection(persons: Iterable[Person]) -> str:
    payload = JsonSerializableContactBook.from_model(persons).to_dict()
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def save_collection(persons: Iterable[Person], destination: TextIO) -> None:
    """Write ``persons`` to ``destination`` as a serialized contact book."""
    text = dumps_collection(persons)
    try:
        destination.write(text)
    except OSError as exc:
        raise StorageIOError(f"Could not write contact book: {exc}") from exc


class JsonContactStorage:
    """Contact book stored in a single JSON file."""

    def __init__(self, path: str | Path | None = None, identity_policy: Optional[str] = None):
        self.path = Path(path or get_settings().data_file)
        self.identity_policy = identity_policy

    def load(self) -> Optional[List[Person]]:
        """Return the stored persons, or None when the file does not exist yet."""
        if not self.path.exists():
            logger.debug("No contact book found at %s", self.path)
            return None
        try:
            with self.path.open("r", encoding="utf-8") as f:
                persons = load_collection(f, identity_policy=self.identity_policy)
        except OSError as exc:
            raise StorageIOError(f"Could not open {self.path}: {exc}") from exc
        logger.debug("Loaded %d persons from %s", len(persons), self.path)
        return persons

    def save(self, persons: Iterable[Person]) -> None:
        # serialize before opening so a bad record never truncates the file
        text = dumps_collection(persons)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                f.write(text)
        except OSError as exc:
            raise StorageIOError(f"Could not write {self.path}: {exc}") from exc
        logger.debug("Saved contact book to %s", self.path)
