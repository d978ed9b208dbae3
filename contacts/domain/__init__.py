"""Domain types: value objects, tags and person records."""

from .persons import Person, Professor, Student, TeachingAssistant, tag_set
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

__all__ = [
    "Person",
    "Student",
    "Professor",
    "TeachingAssistant",
    "Tag",
    "tag_set",
    "Name",
    "Phone",
    "Email",
    "Gender",
    "Location",
    "ModuleCode",
    "Rating",
    "Specialisation",
    "OfficeHour",
    "GithubUsername",
]
