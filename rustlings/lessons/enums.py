"""Messages of several shapes and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class MessageKind(Enum):
    """The kinds of message there are."""

    QUIT = "Quit"
    ECHO = "Echo"
    MOVE = "Move"
    CHANGE_COLOR = "ChangeColor"


def _check_u8(*values: int) -> None:
    for value in values:
        if not 0 <= value <= 255:
            raise ValueError(f"value must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the current colour."""

    kind: ClassVar[MessageKind] = MessageKind.CHANGE_COLOR
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Echo:
    """Print a line of text."""

    kind: ClassVar[MessageKind] = MessageKind.ECHO
    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    kind: ClassVar[MessageKind] = MessageKind.MOVE
    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop processing."""

    kind: ClassVar[MessageKind] = MessageKind.QUIT


Message = Union[ChangeColor, Echo, Move, Quit]


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def describe(message: Message | MessageKind) -> str:
    """Return a debug-style description of a message or message kind."""
    match message:
        case MessageKind():
            return message.value
        case ChangeColor(red, green, blue):
            return f"ChangeColor({red}, {green}, {blue})"
        case Echo(text):
            return f"Echo({_quote(text)})"
        case Move(Point(x, y)):
            return f"Move {{ x: {x}, y: {y} }}"
        case Quit():
            return "Quit"
    raise TypeError(f"not a message: {message!r}")


@dataclass
class State:
    """Colour, position and whether a quit has been received."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Message) -> None:
        """Dispatch a message to the matching state change."""
        match message:
            case ChangeColor(red, green, blue):
                self.change_color((red, green, blue))
            case Echo(text):
                self.echo(text)
            case Move(point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"not a message: {message!r}")