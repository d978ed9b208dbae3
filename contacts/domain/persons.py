"""
Person records held by the contact book.

A record composes already-validated value objects, so building one never needs
to re-check formats. Optional attributes default to their absent form.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from .tags import Tag
from .values import (
    Email,
    Gender,
    GithubUsername,
    Location,
    ModuleCode,
    Name,
    OfficeHour,
    Phone,
    Rating,
    Specialisation,
)


@dataclass(frozen=True)
class Person:
    """Attributes shared by every kind of person."""

    name: Name
    phone: Phone
    email: Email
    gender: Gender
    location: Location
    tags: FrozenSet[Tag] = frozenset()

    def __post_init__(self) -> None:
        # tags behave as a set no matter what iterable was passed in
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: Person | None) -> bool:
        """Weaker notion of equality: two persons sharing a name are the same person."""
        if other is self:
            return True
        return other is not None and other.name == self.name


@dataclass(frozen=True)
class Student(Person):
    pass


@dataclass(frozen=True, kw_only=True)
class Professor(Person):
    module_code: ModuleCode
    rating: Rating = field(default_factory=Rating.absent)
    specialisation: Specialisation = field(default_factory=Specialisation.absent)
    office_hour: OfficeHour = field(default_factory=OfficeHour.absent)
    username: GithubUsername = field(default_factory=GithubUsername.absent)


@dataclass(frozen=True, kw_only=True)
class TeachingAssistant(Person):
    module_code: ModuleCode
    rating: Rating = field(default_factory=Rating.absent)
    username: GithubUsername = field(default_factory=GithubUsername.absent)


def tag_set(*names: str) -> FrozenSet[Tag]:
    """Return a tag set containing the given tag names."""
    return frozenset(Tag(name) for name in names)
