"""Start-up loading and saving of the contact book."""
from __future__ import annotations

import logging
from typing import Iterable, List

from contacts.domain.persons import Person
from contacts.domain.sample_data import get_sample_persons
from contacts.storage.errors import DataLoadingError, IllegalValueError, StorageIOError
from contacts.storage.json_storage import JsonContactStorage

logger = logging.getLogger(__name__)


def describe_error(error: IllegalValueError) -> str:
    """Render the user-facing line for a conversion failure: field and constraint."""
    field_name = getattr(error, "field_name", None)
    if field_name:
        return f"{field_name}: {error.message}"
    return error.message


class ContactService:
    """
    Loads the contact book at start-up and saves it back.

    ``storage`` is anything with ``load()`` and ``save(persons)``; the JSON file
    storage is used when none is given.
    """

    def __init__(self, storage=None) -> None:
        self.storage = storage or JsonContactStorage()

    def load_or_seed(self) -> List[Person]:
        """
        Missing data starts from the sample contacts; unreadable or invalid data
        starts from an empty book after logging the first problem found.
        """
        try:
            persons = self.storage.load()
        except DataLoadingError as exc:
            logger.warning(
                "Data file is not in the correct format (%s). Starting with an empty contact book.",
                describe_error(exc.cause),
            )
            return []
        except StorageIOError as exc:
            logger.warning("Problem while reading the data file (%s). Starting with an empty contact book.", exc)
            return []
        if persons is None:
            logger.info("Data file not found. Starting with sample contacts.")
            return get_sample_persons()
        return persons

    def save(self, persons: Iterable[Person]) -> None:
        self.storage.save(list(persons))
