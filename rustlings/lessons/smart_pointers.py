"""Shared data across threads, cons lists and clone-on-write sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every ``workers``-th number in parallel, one thread per offset.

    The numbers are shared between the threads, not copied. The result
    holds the sum for each offset in order.
    """
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")

    def sum_offset(offset: int) -> int:
        total = sum(n for n in numbers if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cons list cell; ``rest`` is None at the end of the list."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding 1 and 2."""
    return Cons(1, Cons(2, None))


@dataclass
class Cow:
    """A sequence that is borrowed until it has to be changed.

    A borrowed sequence is never modified; ``to_mut`` copies it into an
    owned list first.
    """

    data: Sequence[int]
    owned: bool = False

    def __post_init__(self) -> None:
        if self.owned and not isinstance(self.data, list):
            self.data = list(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def to_mut(self) -> list[int]:
        """Return the owned list, copying borrowed data on first use."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data  # type: ignore[return-value]


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying only if a change is needed."""
    for index, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow