"""Name tags, token costs and positive non-zero integers, with errors raised."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_I32_BITS = 32
_I64_BITS = 64
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width; raise ValueError on bad input."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, _I32_BITS)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2 ** (_I32_BITS - 1)) <= cost <= 2 ** (_I32_BITS - 1) - 1:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    remaining = tokens - cost
    print(f"You now have {remaining} tokens.")
    return remaining


class CreationErrorKind(Enum):
    """Why a PositiveNonzeroInteger could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value was negative or zero; ``kind`` says which."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Parsing a positive non-zero integer failed.

    Exactly one of ``creation`` and ``parse_int`` is set.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.creation = cause if isinstance(cause, CreationError) else None
        self.parse_int = None if isinstance(cause, CreationError) else cause


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap the value; raise CreationError if it is negative or zero."""
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(s, _I64_BITS)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error