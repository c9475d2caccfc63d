"""Apple pricing, a small string transformer and printable report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

_U8_MAX = 255
_BULK_THRESHOLD = 40


def calculate_price_of_apples(quantity: int) -> int:
    """Price of an order: 2 each, or 1 each when buying more than 40."""
    if not 0 <= quantity <= _U8_MAX:
        raise ValueError(f"quantity must be between 0 and {_U8_MAX}, got {quantity}")
    price_each = 2 if quantity <= _BULK_THRESHOLD else 1
    return quantity * price_each


class CommandKind(Enum):
    """What a transformer command does to its string."""

    UPPERCASE = auto()
    TRIM = auto()
    APPEND = auto()


@dataclass(frozen=True)
class Command:
    """A transformer command; ``times`` is used by APPEND only."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError(f"times must not be negative, got {self.times}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command.kind:
            case CommandKind.UPPERCASE:
                output.append(text.upper())
            case CommandKind.TRIM:
                output.append(text.strip())
            case CommandKind.APPEND:
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

    def print(self) -> str:
        """Return the one-line summary of the card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )