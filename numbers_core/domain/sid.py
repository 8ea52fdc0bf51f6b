"""
Resource Identifiers

Sids are 34-character identifiers: a two letter type prefix followed by
32 hexadecimal characters (e.g. ``PN`` + uuid4 hex).
"""

import re
import uuid
from dataclasses import dataclass
from enum import Enum


SID_PATTERN = re.compile(r"^[A-Z]{2}[0-9a-fA-F]{32}$")


class SidType(str, Enum):
    """Known sid prefixes."""

    ACCOUNT = "AC"
    ORGANIZATION = "OR"
    APPLICATION = "AP"
    PHONE_NUMBER = "PN"


class InvalidSidError(ValueError):
    """Raised when a string is not a well-formed sid."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid sid: {value!r}")


@dataclass(frozen=True)
class Sid:
    """Immutable resource identifier."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not SID_PATTERN.match(self.value):
            raise InvalidSidError(self.value)

    @classmethod
    def generate(cls, sid_type: SidType) -> "Sid":
        """Create a new random sid of the given type."""
        return cls(f"{sid_type.value}{uuid.uuid4().hex}")

    @classmethod
    def parse(cls, value: str) -> "Sid":
        return cls(value.strip())

    @property
    def prefix(self) -> str:
        return self.value[:2]

    def __str__(self) -> str:
        return self.value
