"""Contact book persistence backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError

from contacts.db.models import PersonRow
from contacts.db.session import get_session
from contacts.domain.persons import Person

from .collection import JsonSerializableContactBook
from .errors import DataLoadingError, IllegalValueError, StorageIOError

logger = logging.getLogger(__name__)


class SQLContactRepository:
    """Stores each serialized person as a row, keeping the JSON record as payload."""

    def __init__(self, identity_policy: Optional[str] = None):
        self.identity_policy = identity_policy

    def count(self) -> int:
        try:
            with get_session() as session:
                return int(session.execute(select(func.count()).select_from(PersonRow)).scalar_one())
        except SQLAlchemyError as exc:
            raise StorageIOError(f"Could not count persons: {exc}") from exc

    def load(self) -> List[Person]:
        """Rebuild all stored persons in their saved order."""
        try:
            with get_session() as session:
                rows = session.execute(select(PersonRow).order_by(PersonRow.position)).scalars().all()
                records = [dict(row.payload or {}) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageIOError(f"Could not read persons: {exc}") from exc
        try:
            persons = JsonSerializableContactBook(records).to_model(self.identity_policy)
        except IllegalValueError as exc:
            raise DataLoadingError(exc) from exc
        logger.debug("Loaded %d persons from the database", len(persons))
        return persons

    def save(self, persons: Iterable[Person]) -> None:
        """Replace the stored contact book with ``persons`` in one transaction."""
        records = JsonSerializableContactBook.from_model(persons).persons
        try:
            with get_session() as session:
                session.execute(delete(PersonRow))
                session.add_all(
                    PersonRow(position=index, type=record["type"], name=record.get("name"), payload=record)
                    for index, record in enumerate(records)
                )
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageIOError(f"Could not write persons: {exc}") from exc
        logger.debug("Saved %d persons to the database", len(records))
