"""Small functions: ringing, sale prices, parity and squares."""

from __future__ import annotations


def call_me(num: int) -> list[str]:
    """Print and return one ring line per call, numbered from 1."""
    if num < 0:
        raise ValueError(f"num must not be negative, got {num}")
    lines = [f"Ring! Call number {i}" for i in range(1, num + 1)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    """True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num