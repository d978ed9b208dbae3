"""
Value objects for person attributes.

Every type owns a pure ``is_valid`` predicate and a fixed ``MESSAGE_CONSTRAINTS``
string. Callers can pre-check raw strings with the predicate and only construct
once the value is known to be valid; constructing from an invalid value raises
``ValueError`` with the constraint message.

Rating, Specialisation, OfficeHour and GithubUsername are optional: an absent
value is held as ``None`` and reports ``present == False``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

_ALNUM = "A-Za-z0-9"
_DAYS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")


@dataclass(frozen=True)
class ValueObject:
    """Immutable, self-validating wrapper around one string."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[Optional[re.Pattern[str]]] = None

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        """Return True when ``raw`` is a string matching this type's format."""
        if not isinstance(raw, str) or cls.PATTERN is None:
            return False
        return bool(cls.PATTERN.fullmatch(raw))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionalValueObject(ValueObject):
    """Value object that may be intentionally left blank."""

    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.value is not None:
            super().__post_init__()

    @classmethod
    def absent(cls):
        return cls(None)

    @property
    def present(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        return self.value if self.value is not None else ""


@dataclass(frozen=True)
class Name(ValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(rf"[{_ALNUM}][{_ALNUM} ]*")


@dataclass(frozen=True)
class Phone(ValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{3,}")


@dataclass(frozen=True)
class Email(ValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        rf"[{_ALNUM}]+(?:[+_.\-][{_ALNUM}]+)*"
        rf"@(?:[{_ALNUM}]+(?:-[{_ALNUM}]+)*\.)*[{_ALNUM}]+(?:-[{_ALNUM}]+)*"
    )

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        if not super().is_valid(raw):
            return False
        last_label = raw.rsplit("@", 1)[1].rsplit(".", 1)[-1]
        return len(last_label) >= 2


@dataclass(frozen=True)
class Gender(ValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Gender should be either M or F"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[MF]")


@dataclass(frozen=True)
class Location(ValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Locations can take any values, and it should not be blank"
    # first character must not be whitespace, otherwise " " is a valid location
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\s].*")


@dataclass(frozen=True)
class ModuleCode(ValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Module codes should start with 2 or 3 uppercase letters, followed by 4 digits "
        "and an optional uppercase suffix letter, e.g. CS1231S"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Z]{2,3}[0-9]{4}[A-Z]?")


@dataclass(frozen=True)
class Rating(OptionalValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Ratings should be a whole number from 0 to 5"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-5]")


@dataclass(frozen=True)
class Specialisation(OptionalValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Specialisations should only contain letters, spaces, '&' and '-', and it should start with a letter"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z &\-]*")


@dataclass(frozen=True)
class OfficeHour(OptionalValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Office hours should be of the format DAY HH:MM-HH:MM, where DAY is one of "
        + ", ".join(_DAYS)
        + " and the start time is earlier than the end time, e.g. MON 14:00-16:00"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"(?P<day>[A-Z]{3}) (?P<start>(?:[01][0-9]|2[0-3]):[0-5][0-9])-(?P<end>(?:[01][0-9]|2[0-3]):[0-5][0-9])"
    )

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        if not isinstance(raw, str):
            return False
        match = cls.PATTERN.fullmatch(raw)
        if not match or match.group("day") not in _DAYS:
            return False
        # zero-padded HH:MM strings compare in time order
        return match.group("start") < match.group("end")


@dataclass(frozen=True)
class GithubUsername(OptionalValueObject):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "GitHub usernames may only contain alphanumeric characters or single hyphens, "
        "cannot begin or end with a hyphen, and are at most 39 characters long"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(rf"[{_ALNUM}](?:-?[{_ALNUM}])*")

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        return super().is_valid(raw) and len(raw) <= 39
