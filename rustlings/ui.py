"""Coloured status lines shared by the command-line tools."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

console = Console(highlight=False)


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _announce(symbol: str, fallback: str, message: str, style: str) -> str:
    mark = fallback if no_emoji() else symbol
    line = f"{mark} {message}"
    console.print(Text(line, style=style), soft_wrap=True)
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _announce("⚠️ ", "!", message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _announce("✅", "✓", message, "green")