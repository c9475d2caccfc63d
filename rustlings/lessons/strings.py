"""Building, checking and transforming strings."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append `` world!`` to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every ``cars`` with ``balloons``."""
    return text.replace("cars", "balloons")