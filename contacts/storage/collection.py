"""
Serializable contact book: the whole collection as one JSON object.

Records are dispatched on their ``type`` discriminator and converted in order.
Conversion stops at the first invalid record; the identity policy decides
which records count as duplicates.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from contacts.core.config import IDENTITY_POLICIES, get_settings
from contacts.domain.persons import Person

from .adapted import ADAPTERS_BY_TYPE, TYPE_KEY, JsonAdaptedPerson, adapt_person
from .errors import DuplicateIdentityError, InvalidFormatError, UnknownTypeError

PERSONS_KEY = "persons"
MESSAGE_NOT_A_BOOK = "Contact book data should be an object holding a 'persons' list"
MESSAGE_NOT_A_RECORD = "Each person should be stored as an object"


def adapter_from_dict(data: Any) -> JsonAdaptedPerson:
    """Select the adapter for one serialized record by its discriminator."""
    if not isinstance(data, Mapping):
        raise InvalidFormatError(PERSONS_KEY, MESSAGE_NOT_A_RECORD)
    discriminator = data.get(TYPE_KEY)
    adapter = ADAPTERS_BY_TYPE.get(discriminator) if isinstance(discriminator, str) else None
    if adapter is None:
        raise UnknownTypeError(discriminator)
    return adapter.from_dict(data)


def identity_key(person: Person, policy: str) -> Any:
    if policy == "name":
        return person.name
    return person


@dataclass
class JsonSerializableContactBook:
    """Ordered list of serialized person records."""

    persons: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_model(cls, persons: Iterable[Person]) -> "JsonSerializableContactBook":
        return cls([adapt_person(person).to_dict() for person in persons])

    @classmethod
    def from_dict(cls, data: Any) -> "JsonSerializableContactBook":
        if not isinstance(data, Mapping):
            raise InvalidFormatError(PERSONS_KEY, MESSAGE_NOT_A_BOOK)
        records = data.get(PERSONS_KEY)
        if records is None:
            records = []
        if not isinstance(records, list):
            raise InvalidFormatError(PERSONS_KEY, MESSAGE_NOT_A_BOOK)
        return cls(list(records))

    def to_dict(self) -> Dict[str, Any]:
        return {PERSONS_KEY: list(self.persons)}

    def to_model(self, identity_policy: Optional[str] = None) -> List[Person]:
        """
        Convert every record, preserving order.

        Raises the first IllegalValueError met: a field violation inside a
        record, an unknown discriminator, or a duplicate under the policy.
        """
        policy = identity_policy or get_settings().identity_policy
        if policy not in IDENTITY_POLICIES:
            raise ValueError(f"Unknown identity policy: {policy!r}")

        result: List[Person] = []
        seen = set()
        for data in self.persons:
            person = adapter_from_dict(data).to_model()
            key = identity_key(person, policy)
            if key in seen:
                raise DuplicateIdentityError(person.name.value)
            seen.add(key)
            result.append(person)
        return result
