"""Shared behaviour: appending "Bar", licence information and combined abilities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar": to a string's text, or as a new last item of a list."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both pieces of software carry the same licence information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides ``some_function``."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Provides ``other_function``."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both abilities."""


class OtherStruct(SomeTrait, OtherTrait):
    """Also has both abilities."""


def some_func(item: SomeTrait) -> bool:
    """True when the item reports true from both of its abilities."""
    return item.some_function() and item.other_function()  # type: ignore[attr-defined]