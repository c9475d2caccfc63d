"""Optional values: ice cream left in the fridge and optional points."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 65535
_LAST_HOUR = 23
_EATEN_AT = 22


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at the given hour: 5 before 22, 0 after, None past 23."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"time_of_day must be between 0 and {_U16_MAX}, got {time_of_day}")
    if time_of_day > _LAST_HOUR:
        return None
    return 5 if time_of_day < _EATEN_AT else 0


@dataclass(frozen=True)
class Point:
    """A point with integer co-ordinates."""

    x: int
    y: int


def describe_point(point: Point | None) -> str:
    """Print and return a description of the point, or ``no match`` for None."""
    match point:
        case Point(x, y):
            text = f"Co-ordinates are {x},{y} "
        case _:
            text = "no match"
    print(text)
    return text