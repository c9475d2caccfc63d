"""Fruit baskets and a football scores table built with dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_U8_MAX = 255


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 2
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind not yet present, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goals scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    if not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _add(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError(f"goal totals for {team.name} exceed {_U8_MAX}")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines ``team1,team2,goals1,goals2``."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected four comma separated fields: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = _goals(fields[2]), _goals(fields[3])
        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        _add(team_1, team_1_score, team_2_score)
        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        _add(team_2, team_2_score, team_1_score)
    return scores