import pytest

from rustlings.lessons.enums import (
    ChangeColor,
    Echo,
    MessageKind,
    Move,
    Point,
    Quit,
    State,
    describe,
)


def test_match_message_call(capsys):
    state = State(has_quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.has_quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_process_rejects_non_messages():
    with pytest.raises(TypeError):
        State().process("Quit")


@pytest.mark.parametrize(
    ("kind", "text"),
    [
        (MessageKind.QUIT, "Quit"),
        (MessageKind.ECHO, "Echo"),
        (MessageKind.MOVE, "Move"),
        (MessageKind.CHANGE_COLOR, "ChangeColor"),
    ],
)
def test_describe_kinds(kind, text):
    assert describe(kind) == text


@pytest.mark.parametrize(
    ("message", "text"),
    [
        (Move(Point(10, 30)), "Move { x: 10, y: 30 }"),
        (Echo("hello world"), 'Echo("hello world")'),
        (ChangeColor(200, 255, 255), "ChangeColor(200, 255, 255)"),
        (Quit(), "Quit"),
    ],
)
def test_describe_messages(message, text):
    assert describe(message) == text


def test_message_kind_of_each_variant():
    assert [m.kind for m in (Quit(), Echo("x"), Move(Point(1, 2)), ChangeColor(1, 2, 3))] == [
        MessageKind.QUIT,
        MessageKind.ECHO,
        MessageKind.MOVE,
        MessageKind.CHANGE_COLOR,
    ]


def test_out_of_range_colour_rejected():
    with pytest.raises(ValueError):
        ChangeColor(256, 0, 0)


def test_out_of_range_point_rejected():
    with pytest.raises(ValueError):
        Point(-1, 0)