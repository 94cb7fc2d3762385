"""Strings, traits and options: trimming, appending "Bar", licences and ice cream."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Add " world!" to the end."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


@singledispatch
def append_bar(value):
    """Append "Bar": to a string as text, to a list of strings as a new element."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that can describe its licence."""

    def licensing_info(self) -> str:
        """The licensing information shared by all software."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at an hour of the day: 5 before 22, 0 until 23, None past that."""
    if time_of_day < 0:
        raise ValueError("time_of_day must not be negative")
    if time_of_day < 22:
        return 5
    if time_of_day <= 23:
        return 0
    return None