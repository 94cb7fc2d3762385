"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32 = 32
_I64 = 64


def _parse_signed(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width; no whitespace is allowed."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name-tag text; ValueError if ``name`` is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def parse_int(text: str) -> int:
    """Parse a 64-bit signed integer; ValueError describes what is wrong."""
    return _parse_signed(text, _I64)


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a processing fee of one token."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_signed(item_quantity, _I32)
    cost = quantity * cost_per_item + processing_fee
    if not -(2 ** (_I32 - 1)) <= cost <= 2 ** (_I32 - 1) - 1:
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


class CreationError(ValueError):
    """Raised when a PositiveNonzeroInteger cannot be made; ``kind`` says why."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: "CreationError.Kind"):
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised by parse_pos_nonzero; ``kind`` says which step failed."""

    class Kind(enum.Enum):
        CREATION = "creation"
        PARSE_INT = "parse_int"

    def __init__(self, kind: "ParsePosNonzeroError.Kind", cause: Exception):
        super().__init__(str(cause))
        self.kind = kind
        self.cause = cause

    @property
    def creation(self) -> CreationError | None:
        """The creation error, if that is what went wrong."""
        return self.cause if isinstance(self.cause, CreationError) else None


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; ParsePosNonzeroError on failure."""
    try:
        value = parse_int(text)
    except ValueError as exc:
        raise ParsePosNonzeroError(ParsePosNonzeroError.Kind.PARSE_INT, exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(ParsePosNonzeroError.Kind.CREATION, exc) from exc