"""Booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_BIG_ARRAY = 100


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Print and return the greetings that apply."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    for line in lines:
        print(line)
    return lines


def classify_char(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence[Any]) -> str:
    """Comment on the size of an array."""
    if len(values) >= _BIG_ARRAY:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[Any]) -> list[Any]:
    """The elements at positions 1 to 3; raise IndexError if there are too few."""
    if len(values) < 4:
        raise IndexError(f"need at least 4 elements, got {len(values)}")
    return list(values[1:4])


def _format_number(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a ``(name, age)`` tuple."""
    name, age = cat
    return f"{name} is {_format_number(age)} years old."


def second(numbers: tuple[Any, ...]) -> Any:
    """The second element of a tuple."""
    return numbers[1]