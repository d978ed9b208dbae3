"""Free-form tags attached to a person."""
from __future__ import annotations

import re
from dataclasses import dataclass

TAG_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class Tag:
    """A tag in the contact book; names are alphanumeric and non-empty."""

    tag_name: str

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    def __post_init__(self) -> None:
        if not self.is_valid(self.tag_name):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(value: object) -> bool:
        return isinstance(value, str) and bool(TAG_PATTERN.fullmatch(value))

    def __str__(self) -> str:
        return f"[{self.tag_name}]"
