"""Building a Person from "name,age" text, leniently or strictly."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer with no whitespace or underscores allowed."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class PersonErrorKind(enum.Enum):
    """Why text could not be parsed into a Person."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Raised by Person.parse; ``kind`` tells what went wrong."""

    def __init__(self, kind: PersonErrorKind, detail: str | None = None):
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> "Person":
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> "Person":
        """Build from "name,age", falling back to the default on any problem.

        Fields after the age are ignored.
        """
        if not text:
            return cls.default()
        fields = text.split(",")
        name = fields[0]
        if not name or len(fields) < 2:
            return cls.default()
        try:
            age = _parse_usize(fields[1])
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> "Person":
        """Build from exactly "name,age"; raise ParsePersonError otherwise."""
        if not text:
            raise ParsePersonError(PersonErrorKind.EMPTY)
        fields = text.split(",")
        if len(fields) != 2:
            raise ParsePersonError(PersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(PersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise ParsePersonError(PersonErrorKind.PARSE_INT, str(exc)) from exc
        return cls(name=name, age=age)