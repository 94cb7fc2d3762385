"""Worked answers to the string-machine and report-card quizzes."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class CommandKind(enum.Enum):
    """What to do to a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A command; ``times`` is how often "bar" is appended."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def transformer(pairs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in pairs:
        if command.kind is CommandKind.UPPERCASE:
            output.append(text.upper())
        elif command.kind is CommandKind.TRIM:
            output.append(text.strip())
        else:
            output.append(text + "bar" * command.times)
    return output


def _format_grade(grade: object) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A student's report card; the grade may be numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError("student_age must be between 0 and 255")

    def print(self) -> str:
        """Return the card's one-line summary."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )