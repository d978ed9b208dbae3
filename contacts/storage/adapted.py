"""
JSON-friendly adapters for person records.

Each adapter is a flat holder of raw strings mirroring one serialized record.
``from_model`` projects a validated person into that form without checks;
``to_model`` rebuilds the person, validating every field in a fixed order and
raising on the first violation.

Optional attributes are written as a per-field sentinel literal when absent so
that reloading yields the absent state again instead of a format error.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Type

from contacts.domain.persons import Person, Professor, Student, TeachingAssistant
from contacts.domain.tags import Tag
from contacts.domain.values import (
    Email,
    Gender,
    GithubUsername,
    Location,
    ModuleCode,
    Name,
    OfficeHour,
    OptionalValueObject,
    Phone,
    Rating,
    Specialisation,
    ValueObject,
)

from .errors import InvalidFormatError, MissingFieldError

TYPE_KEY = "type"
TAGS_KEY = "tagged"

TYPE_STUDENT = "student"
TYPE_PROFESSOR = "professor"
TYPE_TEACHING_ASSISTANT = "teachingAssistant"

EMPTY_RATING = "NO_RATING"
EMPTY_SPECIALISATION = "NO_SPECIALISATION"
EMPTY_OFFICE_HOUR = "NO_OFFICE_HOUR"
EMPTY_USERNAME = "NO_USERNAME"

MESSAGE_TAGS_NOT_LIST = "Tags should be stored as a list of tag names"


def parse_required(raw: Optional[str], value_type: Type[ValueObject], key: str) -> ValueObject:
    """Validate a mandatory raw value and wrap it."""
    if raw is None:
        raise MissingFieldError(key, value_type.__name__)
    if not value_type.is_valid(raw):
        raise InvalidFormatError(key, value_type.MESSAGE_CONSTRAINTS)
    return value_type(raw)


def parse_optional(
    raw: Optional[str], value_type: Type[OptionalValueObject], key: str, sentinel: str
) -> OptionalValueObject:
    """Validate an optional raw value; the sentinel maps to the absent form."""
    if raw is None:
        raise MissingFieldError(key, value_type.__name__)
    if raw == sentinel:
        return value_type.absent()
    if not value_type.is_valid(raw):
        raise InvalidFormatError(key, value_type.MESSAGE_CONSTRAINTS)
    return value_type(raw)


def dump_optional(value: OptionalValueObject, sentinel: str) -> str:
    return value.value if value.present else sentinel


@dataclass
class JsonAdaptedTag:
    """Serialized form of a Tag: just its name."""

    tag_name: Any

    @classmethod
    def from_model(cls, source: Tag) -> "JsonAdaptedTag":
        return cls(source.tag_name)

    def to_json(self) -> Any:
        return self.tag_name

    def to_model(self) -> Tag:
        if not Tag.is_valid(self.tag_name):
            raise InvalidFormatError(TAGS_KEY, Tag.MESSAGE_CONSTRAINTS)
        return Tag(self.tag_name)


@dataclass
class JsonAdaptedPerson:
    """Fields shared by every serialized person."""

    TYPE: ClassVar[str] = ""
    # attribute name -> serialized key, in output order
    KEYS: ClassVar[Dict[str, str]] = {
        "name": "name",
        "phone": "phone",
        "email": "email",
        "gender": "gender",
        "location": "location",
    }

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    location: Optional[str] = None
    tagged: List[JsonAdaptedTag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JsonAdaptedPerson":
        """Build an adapter from a serialized record; no field is validated yet."""
        raw_tags = data.get(TAGS_KEY)
        if raw_tags is None:
            raw_tags = []
        if not isinstance(raw_tags, list):
            raise InvalidFormatError(TAGS_KEY, MESSAGE_TAGS_NOT_LIST)
        kwargs = {attr: data.get(key) for attr, key in cls.KEYS.items()}
        return cls(tagged=[JsonAdaptedTag(tag) for tag in raw_tags], **kwargs)

    @classmethod
    def _common_from_model(cls, source: Person) -> Dict[str, Any]:
        return {
            "name": source.name.value,
            "phone": source.phone.value,
            "email": source.email.value,
            "gender": source.gender.value,
            "location": source.location.value,
            "tagged": [JsonAdaptedTag.from_model(tag) for tag in sorted(source.tags, key=lambda t: t.tag_name)],
        }

    @classmethod
    def from_model(cls, source: Person) -> "JsonAdaptedPerson":
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {TYPE_KEY: self.TYPE}
        for attr, key in self.KEYS.items():
            data[key] = getattr(self, attr)
        data[TAGS_KEY] = [tag.to_json() for tag in self.tagged]
        return data

    def to_model(self) -> Person:
        raise NotImplementedError

    def _model_tags(self) -> FrozenSet[Tag]:
        return frozenset(tag.to_model() for tag in self.tagged)

    def _model_contact_fields(self) -> tuple:
        """Validate name, phone, email and gender, in that order."""
        return (
            parse_required(self.name, Name, "name"),
            parse_required(self.phone, Phone, "phone"),
            parse_required(self.email, Email, "email"),
            parse_required(self.gender, Gender, "gender"),
        )


@dataclass
class JsonAdaptedStudent(JsonAdaptedPerson):
    TYPE: ClassVar[str] = TYPE_STUDENT

    @classmethod
    def from_model(cls, source: Student) -> "JsonAdaptedStudent":
        return cls(**cls._common_from_model(source))

    def to_model(self) -> Student:
        tags = self._model_tags()
        name, phone, email, gender = self._model_contact_fields()
        location = parse_required(self.location, Location, "location")
        return Student(name, phone, email, gender, location, tags)


@dataclass
class JsonAdaptedProfessor(JsonAdaptedPerson):
    TYPE: ClassVar[str] = TYPE_PROFESSOR
    KEYS: ClassVar[Dict[str, str]] = {
        "name": "name",
        "module_code": "moduleCode",
        "phone": "phone",
        "email": "email",
        "gender": "gender",
        "location": "location",
        "rating": "rating",
        "specialisation": "specialisation",
        "office_hour": "officeHour",
        "username": "username",
    }

    module_code: Optional[str] = None
    rating: Optional[str] = None
    specialisation: Optional[str] = None
    office_hour: Optional[str] = None
    username: Optional[str] = None

    @classmethod
    def from_model(cls, source: Professor) -> "JsonAdaptedProfessor":
        return cls(
            module_code=source.module_code.value,
            rating=dump_optional(source.rating, EMPTY_RATING),
            specialisation=dump_optional(source.specialisation, EMPTY_SPECIALISATION),
            office_hour=dump_optional(source.office_hour, EMPTY_OFFICE_HOUR),
            username=dump_optional(source.username, EMPTY_USERNAME),
            **cls._common_from_model(source),
        )

    def to_model(self) -> Professor:
        tags = self._model_tags()
        name, phone, email, gender = self._model_contact_fields()
        module_code = parse_required(self.module_code, ModuleCode, "moduleCode")
        location = parse_required(self.location, Location, "location")
        rating = parse_optional(self.rating, Rating, "rating", EMPTY_RATING)
        specialisation = parse_optional(self.specialisation, Specialisation, "specialisation", EMPTY_SPECIALISATION)
        office_hour = parse_optional(self.office_hour, OfficeHour, "officeHour", EMPTY_OFFICE_HOUR)
        username = parse_optional(self.username, GithubUsername, "username", EMPTY_USERNAME)
        return Professor(
            name,
            phone,
            email,
            gender,
            location,
            tags,
            module_code=module_code,
            rating=rating,
            specialisation=specialisation,
            office_hour=office_hour,
            username=username,
        )


@dataclass
class JsonAdaptedTeachingAssistant(JsonAdaptedPerson):
    TYPE: ClassVar[str] = TYPE_TEACHING_ASSISTANT
    KEYS: ClassVar[Dict[str, str]] = {
        "name": "name",
        "module_code": "moduleCode",
        "phone": "phone",
        "email": "email",
        "gender": "gender",
        "location": "location",
        "rating": "rating",
        "username": "username",
    }

    module_code: Optional[str] = None
    rating: Optional[str] = None
    username: Optional[str] = None

    @classmethod
    def from_model(cls, source: TeachingAssistant) -> "JsonAdaptedTeachingAssistant":
        return cls(
            module_code=source.module_code.value,
            rating=dump_optional(source.rating, EMPTY_RATING),
            username=dump_optional(source.username, EMPTY_USERNAME),
            **cls._common_from_model(source),
        )

    def to_model(self) -> TeachingAssistant:
        tags = self._model_tags()
        name, phone, email, gender = self._model_contact_fields()
        module_code = parse_required(self.module_code, ModuleCode, "moduleCode")
        location = parse_required(self.location, Location, "location")
        rating = parse_optional(self.rating, Rating, "rating", EMPTY_RATING)
        username = parse_optional(self.username, GithubUsername, "username", EMPTY_USERNAME)
        return TeachingAssistant(
            name,
            phone,
            email,
            gender,
            location,
            tags,
            module_code=module_code,
            rating=rating,
            username=username,
        )


ADAPTERS_BY_TYPE: Dict[str, Type[JsonAdaptedPerson]] = {
    TYPE_STUDENT: JsonAdaptedStudent,
    TYPE_PROFESSOR: JsonAdaptedProfessor,
    TYPE_TEACHING_ASSISTANT: JsonAdaptedTeachingAssistant,
}

ADAPTERS_BY_MODEL: Dict[type, Type[JsonAdaptedPerson]] = {
    Student: JsonAdaptedStudent,
    Professor: JsonAdaptedProfessor,
    TeachingAssistant: JsonAdaptedTeachingAssistant,
}


def adapt_person(source: Person) -> JsonAdaptedPerson:
    """Pick the adapter matching the record's variant and project it."""
    adapter = ADAPTERS_BY_MODEL.get(type(source))
    if adapter is None:
        raise TypeError(f"No serialized form for {type(source).__name__}")
    return adapter.from_model(source)
