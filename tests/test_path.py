import logging

import pytest

from common import Rect
from exceptions import (
    ArityMismatchError,
    EmptyTokenError,
    InvalidCommandError,
    NumericParseError,
    PathDecodeError,
    UnsupportedCommandError,
)
from path import Command, CommandKind, CommandSequence, cubic_bezier, tokenize


def test_parse_square_end_to_end(surface):
    commands = CommandSequence.parse("M0,0 L10,0 L10,10 Z")
    assert len(commands) == 4
    assert [c.kind for c in commands] == [
        CommandKind.MOVE_TO,
        CommandKind.LINE_TO,
        CommandKind.LINE_TO,
        CommandKind.CLOSE_PATH,
    ]
    assert commands.bounds() == Rect((0, 0), (10, 10))

    normalized = commands.normalize()
    assert [c.args for c in normalized] == [((-5, -5),), ((5, -5),), ((5, 5),), ()]

    normalized.emit(surface)
    assert surface.calls == [
        ("new_path",),
        ("move_to", -5, -5),
        ("line_to", 5, -5),
        ("line_to", 5, 5),
        ("close_path",),
    ]


def test_horizontal_and_vertical_use_pen_position():
    assert Command.parse("H 50", (10, 20)) == Command(CommandKind.LINE_TO, [(50, 20)])
    assert Command.parse("V 99", (10, 20)) == Command(CommandKind.LINE_TO, [(10, 99)])


def test_horizontal_and_vertical_in_sequence():
    commands = CommandSequence.parse("M10,20 H50 v99")
    assert commands[1].args == ((50, 20),)
    assert commands[2].args == ((50, 99),)
    assert commands[2].code == "v"


def test_invalid_command_code():
    with pytest.raises(InvalidCommandError):
        Command.parse("X 1 2")


def test_cubic_arity():
    with pytest.raises(ArityMismatchError):
        Command.parse("C 1,2 3,4")
    command = Command.parse("C 1,2 3,4 5,6")
    assert command.args == ((1, 2), (3, 4), (5, 6))


@pytest.mark.parametrize("token", ["C 1,2 3", "M", "M 1,2 3,4", "Z 1", "H", "V 1 2", "L 1,2,3"])
def test_arity_mismatch(token):
    with pytest.raises(ArityMismatchError):
        Command.parse(token)


@pytest.mark.parametrize("token", ["M 1,abc", "L 1..2 3", "M 1 2x", "C 1,2 3,4 5,-"])
def test_numeric_parse_failure(token):
    with pytest.raises(NumericParseError):
        Command.parse(token)


@pytest.mark.parametrize("token", ["", "   ", " , "])
def test_empty_token(token):
    with pytest.raises(EmptyTokenError):
        Command.parse(token)


def test_decode_errors_share_a_base_class():
    with pytest.raises(PathDecodeError) as info:
        Command.parse("C 1,2 3,4")
    assert isinstance(info.value, ValueError)
    assert info.value.token == "C 1,2 3,4"


def test_separators_are_flexible():
    assert Command.parse("M , 1 ,, 2 ,").args == ((1, 2),)
    assert Command.parse("L\t-1.5\n+2.25").args == ((-1.5, 2.25),)
    assert Command.parse("M1e2,.5").args == ((100, 0.5),)
    assert Command.parse("Z").args == ()


def test_relative_codes_are_not_resolved():
    command = Command.parse("m 1 2")
    assert command.kind == CommandKind.MOVE_TO
    assert command.args == ((1, 2),)
    assert command.code == "m"


def test_tokenize():
    assert tokenize("M0,0L10,0 Z") == ["M0,0", "L10,0 ", "Z"]
    assert tokenize("  \n ") == []
    assert tokenize("12 M1,2") == ["12 ", "M1,2"]


def test_sequence_parse_stops_at_first_error():
    with pytest.raises(InvalidCommandError) as info:
        CommandSequence.parse("12 M1,2")
    assert info.value.index == 0

    with pytest.raises(NumericParseError) as info:
        CommandSequence.parse("M0,0 L1,1 L2,x Z")
    assert info.value.index == 2


def test_unsupported_commands_parse_but_draw_nothing(surface, caplog):
    commands = CommandSequence.parse("M1,1 Q1,2 3,4 L5,5")
    assert commands[1].kind == CommandKind.QUADRATIC_CURVE_TO
    assert not commands[1].kind.is_supported

    with caplog.at_level(logging.WARNING):
        commands.emit(surface, new_path=False)
    assert surface.calls == [("move_to", 1, 1), ("line_to", 5, 5)]
    assert "Q" in caplog.text
    assert commands.instructions()[1] == "# unsupported command: Q"


def test_strict_mode_rejects_unsupported_commands():
    with pytest.raises(UnsupportedCommandError):
        CommandSequence.parse("M1,1 s1,2 3,4", strict=True)


def test_pen_resets_after_close_and_unsupported():
    assert CommandSequence.parse("M5,5 L6,6 Z H3")[3].args == ((3, 0),)
    assert CommandSequence.parse("M5,5 T1,2 V7")[2].args == ((0, 7),)


def test_instructions_round_trip():
    command = Command.parse("C 1.5,2.25 -3,4 5.1234567,6")
    assert command.to_instruction() == (
        "ctx.curve_to(1.500000, 2.250000, -3.000000, 4.000000, 5.123457, 6.000000)"
    )
    assert CommandSequence.parse("M19.42,22.989 L287.26,-140.41371 Z").instructions() == [
        "ctx.move_to(19.420000, 22.989000)",
        "ctx.line_to(287.260000, -140.413710)",
        "ctx.close_path()",
    ]


def test_programmatic_horizontal_and_vertical_commands(surface):
    commands = CommandSequence(
        [
            Command(CommandKind.MOVE_TO, [(10, 20)]),
            Command(CommandKind.HORIZONTAL_LINE_TO, [(50, 0)]),
            Command(CommandKind.VERTICAL_LINE_TO, [(0, 99)]),
        ]
    )
    assert commands.bounds() == Rect((10, 20), (50, 99))
    assert commands.instructions()[1:] == [
        "ctx.line_to(50.000000, 20.000000)",
        "ctx.line_to(50.000000, 99.000000)",
    ]
    commands.emit(surface, new_path=False)
    assert surface.calls[1:] == [("line_to", 50, 20), ("line_to", 50, 99)]


def test_command_constructor_checks_arity():
    with pytest.raises(ArityMismatchError):
        Command(CommandKind.CUBIC_CURVE_TO, [(1, 2)])


def test_bounds_enclose_every_argument_tightly():
    commands = CommandSequence.parse("M1,3 C4,9 -2,7 8,5 L6,-1 Z")
    bounds = commands.bounds()
    assert bounds == Rect((-2, -1), (8, 9))
    points = [p for c in commands for p in c.args]
    assert all(bounds.contains(p) for p in points)
    assert min(x for x, _ in points) == bounds.top_left[0]
    assert max(y for _, y in points) == bounds.bottom_right[1]


def test_normalize_centers_and_is_idempotent():
    commands = CommandSequence.parse("M1,3 C4,9 -2,7 8,5 L6,-1 Z")
    once = commands.normalize()
    twice = once.normalize()
    assert once.bounds().top_left == pytest.approx((-5, -5))
    assert once.bounds().bottom_right == pytest.approx((5, 5))
    assert twice.bounds().top_left == pytest.approx(once.bounds().top_left)
    assert twice.bounds().bottom_right == pytest.approx(once.bounds().bottom_right)
    # source sequence is untouched
    assert commands.bounds() == Rect((-2, -1), (8, 9))


def test_empty_sequence():
    commands = CommandSequence.parse("")
    assert len(commands) == 0
    assert commands.bounds() is None
    assert len(commands.normalize()) == 0
    assert commands.instructions() == []


def test_cubic_bezier_endpoints():
    points = cubic_bezier((0, 0), (0, 10), (10, 10), (10, 0), 5)
    assert len(points) == 5
    assert points[0] == (0, 0)
    assert points[-1] == (10, 0)
    assert points[2] == pytest.approx((5, 7.5))


@pytest.mark.parametrize("token", ["Q", "S", "T", "A", "q  "])
def test_unsupported_commands_need_arguments(token):
    with pytest.raises(ArityMismatchError):
        Command.parse(token)


def test_missing_arguments_fail_the_sequence():
    with pytest.raises(ArityMismatchError) as info:
        CommandSequence.parse("M0,0 Q L1,1")
    assert info.value.index == 1


def test_invalid_command_error_carries_whole_token():
    with pytest.raises(InvalidCommandError) as info:
        Command.parse("X 1 2")
    assert info.value.token == "X 1 2"


def test_bounds_resolve_horizontal_and_vertical_against_pen():
    commands = CommandSequence(
        [
            Command(CommandKind.MOVE_TO, [(-4, 3)]),
            Command(CommandKind.HORIZONTAL_LINE_TO, [(6, 100)]),
            Command(CommandKind.VERTICAL_LINE_TO, [(-100, -2)]),
        ]
    )
    assert commands.bounds() == Rect((-4, -2), (6, 3))
