"""Errors raised while converting or persisting contacts."""
from __future__ import annotations

MISSING_FIELD_MESSAGE_FORMAT = "{}'s field is missing!"
MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."


class IllegalValueError(Exception):
    """Base class for data that violates the model's constraints."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldError(IllegalValueError):
    """Raised when a mandatory serialized field is absent."""

    def __init__(self, field_name: str, type_name: str | None = None):
        super().__init__(MISSING_FIELD_MESSAGE_FORMAT.format(type_name or field_name))
        self.field_name = field_name


class InvalidFormatError(IllegalValueError):
    """Raised when a present value fails its format predicate."""

    def __init__(self, field_name: str, constraint_message: str):
        super().__init__(constraint_message)
        self.field_name = field_name
        self.constraint_message = constraint_message


class UnknownTypeError(IllegalValueError):
    """Raised when a record's ``type`` discriminator names no known variant."""

    def __init__(self, discriminator: object):
        super().__init__(f"Unknown person type: {discriminator!r}")
        self.discriminator = discriminator


class DuplicateIdentityError(IllegalValueError):
    """Raised when two records in one collection resolve to the same person."""

    def __init__(self, identity_key: str):
        super().__init__(MESSAGE_DUPLICATE_PERSON)
        self.identity_key = identity_key


class StorageError(Exception):
    """Base class for load/save failures surfaced to callers."""


class StorageIOError(StorageError):
    """The storage medium could not be read or written, or held malformed JSON."""


class DataLoadingError(StorageError):
    """Stored data was readable but violated the model's constraints."""

    def __init__(self, cause: IllegalValueError):
        super().__init__(f"Illegal values found in storage: {cause.message}")
        self.cause = cause
