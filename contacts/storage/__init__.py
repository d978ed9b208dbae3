"""
Persistence adapters.

These modules convert person records to and from their serialized form and
store them (JSON file today, SQL database optionally). Services should depend
on the storage classes here rather than touching the JSON file themselves.
"""

from .errors import (
    DataLoadingError,
    DuplicateIdentityError,
    IllegalValueError,
    InvalidFormatError,
    MissingFieldError,
    StorageError,
    StorageIOError,
    UnknownTypeError,
)
from .json_storage import JsonContactStorage, load_collection, save_collection

__all__ = [
    "DataLoadingError",
    "DuplicateIdentityError",
    "IllegalValueError",
    "InvalidFormatError",
    "MissingFieldError",
    "StorageError",
    "StorageIOError",
    "UnknownTypeError",
    "JsonContactStorage",
    "load_collection",
    "save_collection",
]
