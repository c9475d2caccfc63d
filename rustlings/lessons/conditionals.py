"""Choosing between values with conditions."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """The larger of the two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map ``fizz`` to ``foo``, ``fuzz`` to ``bar`` and anything else to ``baz``."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"