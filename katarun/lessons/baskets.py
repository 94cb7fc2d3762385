"""Collections: filling a fruit basket, tallying match scores and doubling lists."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Fruit(enum.Enum):
    """The kinds of fruit a basket may hold."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every fruit kind missing from ``basket``; present kinds are left alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def _parse_goals(text: str) -> int:
    """Parse a goal count that fits in an unsigned byte."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match."""
        new_scored = self.goals_scored + scored
        new_conceded = self.goals_conceded + conceded
        if new_scored > _U8_MAX or new_conceded > _U8_MAX:
            raise OverflowError("goal count does not fit in a byte")
        self.goals_scored = new_scored
        self.goals_conceded = new_conceded


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        scores.setdefault(team_1_name, Team()).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team()).record(team_2_score, team_1_score)
    return scores


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double each number, with an explicit loop."""
    doubled = []
    for value in values:
        doubled.append(value * 2)
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Double each number."""
    return [value * 2 for value in values]