import logging
import re
from enum import Enum
from functools import partial
from typing import Iterable, Protocol, Union

from common import Point, Rect
from exceptions import (
    ArityMismatchError,
    EmptyTokenError,
    InvalidCommandError,
    NumericParseError,
    PathDecodeError,
    UnsupportedCommandError,
)

logger = logging.getLogger(__name__)

COMMAND_CODES = "MmLlHhVvCcSsQqTtAaZz"
SEPARATORS = " \t\n\r,"
ORIGIN: Point = (0.0, 0.0)

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
SEPARATOR_PATTERN = re.compile(r"[\s,]+")
TOKEN_SPLIT_PATTERN = re.compile(rf"(?=[{COMMAND_CODES}])")


def interpolate(interpolation_callable, resolution: int):
    return [interpolation_callable(t) for t in [i / (resolution - 1) for i in range(resolution)]]


def cubic_bezier_interpolation(
    point_0: Point, control_point_0: Point, control_point_1: Point, point_1: Point, t: float
):
    x = (
        (1 - t) ** 3 * point_0[0]
        + 3 * (1 - t) ** 2 * t * control_point_0[0]
        + 3 * (1 - t) * t**2 * control_point_1[0]
        + t**3 * point_1[0]
    )
    y = (
        (1 - t) ** 3 * point_0[1]
        + 3 * (1 - t) ** 2 * t * control_point_0[1]
        + 3 * (1 - t) * t**2 * control_point_1[1]
        + t**3 * point_1[1]
    )
    return (x, y)


def cubic_bezier(point_0: Point, control_point_0: Point, control_point_1: Point, point_1: Point, n: int):
    """
    Calculate n points along a cubic Bézier curve.

    Args:
        point_0 (Point): Start point (x0, y0).
        control_point_0 (Point): First control point (cx0, cy0).
        control_point_1 (Point): Second control point (cx1, cy1).
        point_1 (Point): End point (x1, y1).
        n (int): Number of points to calculate, endpoints included.

    Returns:
        list[Point]: List of points along the curve.
    """
    return interpolate(partial(cubic_bezier_interpolation, point_0, control_point_0, control_point_1, point_1), n)


class DrawingSurface(Protocol):
    """Anything that can consume emitted path instructions (a cairo-like context)."""

    def new_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None: ...

    def close_path(self) -> None: ...


class CommandKind(Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    HORIZONTAL_LINE_TO = "H"
    VERTICAL_LINE_TO = "V"
    CUBIC_CURVE_TO = "C"
    SMOOTH_CURVE_TO = "S"
    QUADRATIC_CURVE_TO = "Q"
    SMOOTH_QUADRATIC_CURVE_TO = "T"
    ARC = "A"
    CLOSE_PATH = "Z"

    @staticmethod
    def from_code(code: str) -> "CommandKind":
        if len(code) != 1:
            raise InvalidCommandError(f"Invalid command {code!r}; must be 1 letter", code)
        if code not in COMMAND_CODES:
            raise InvalidCommandError(f"Invalid command {code!r}; not one of {COMMAND_CODES}", code)
        return CommandKind(code.upper())

    @property
    def arity(self) -> int | None:
        """Number of coordinate pairs the command takes, or None if any number of pairs is accepted."""
        return {
            CommandKind.MOVE_TO: 1,
            CommandKind.LINE_TO: 1,
            CommandKind.HORIZONTAL_LINE_TO: 1,
            CommandKind.VERTICAL_LINE_TO: 1,
            CommandKind.CUBIC_CURVE_TO: 3,
            CommandKind.CLOSE_PATH: 0,
        }.get(self)

    @property
    def is_supported(self) -> bool:
        return self not in {
            CommandKind.SMOOTH_CURVE_TO,
            CommandKind.QUADRATIC_CURVE_TO,
            CommandKind.SMOOTH_QUADRATIC_CURVE_TO,
            CommandKind.ARC,
        }


def parse_numbers(text: str, token: str | None = None) -> list[float]:
    """Split a run of comma/whitespace separated numbers and convert them to floats.

    Raises:
        NumericParseError: if any of the fields is not a number
    """
    values = []
    for field in SEPARATOR_PATTERN.split(text.strip(SEPARATORS)):
        if not field:
            continue
        if not NUMBER_PATTERN.fullmatch(field):
            raise NumericParseError(f"Invalid number {field!r} in command {token!r}", token)
        values.append(float(field))
    return values


class Command:
    """A single drawing instruction with its coordinate arguments.

    Horizontal/vertical line commands keep one coordinate pair whose off-axis value is a
    placeholder; the pen position supplies that axis when the command is drawn.
    """

    def __init__(self, kind: CommandKind, args: Iterable[Point] = (), code: str | None = None):
        self.kind = kind
        self.args: tuple[Point, ...] = tuple((float(x), float(y)) for x, y in args)
        self.code = code or kind.value
        if kind.arity is not None and len(self.args) != kind.arity:
            raise ArityMismatchError(
                f'Wrong number of coordinate pairs ({len(self.args)}) for command "{self.code}"; '
                f"expected {kind.arity}",
                self.code,
            )

    @staticmethod
    def parse(token: str, pen: Point = ORIGIN, strict: bool = False) -> "Command":
        """Parse one command token, e.g. "C 1,2 3,4 5,6".

        Horizontal and vertical lines are resolved against `pen` and become plain LINE_TO
        commands, so a parsed sequence never holds H/V commands.

        Args:
            token (str): command letter followed by its numeric arguments
            pen (Point, optional): pen position before this command. Defaults to the origin.
            strict (bool, optional): reject commands that cannot be drawn (S, Q, T, A).

        Raises:
            PathDecodeError: if the token is malformed

        Returns:
            Command: the parsed command
        """
        token = token.lstrip(SEPARATORS)
        if not token:
            raise EmptyTokenError("Empty command token", token)

        code = token[0]
        try:
            kind = CommandKind.from_code(code)
        except InvalidCommandError as e:
            raise InvalidCommandError(str(e), token) from e
        if strict and not kind.is_supported:
            raise UnsupportedCommandError(f'Unsupported command "{code}"', token)
        values = parse_numbers(token[1:], token)

        match kind:
            case CommandKind.CLOSE_PATH:
                if values:
                    raise ArityMismatchError(f'Command "{code}" takes no arguments, got {len(values)}', token)
                return Command(kind, code=code)
            case CommandKind.HORIZONTAL_LINE_TO | CommandKind.VERTICAL_LINE_TO:
                if len(values) != 1:
                    raise ArityMismatchError(f'Command "{code}" takes 1 argument, got {len(values)}', token)
                if kind == CommandKind.HORIZONTAL_LINE_TO:
                    point = (values[0], pen[1])
                else:
                    point = (pen[0], values[0])
                return Command(CommandKind.LINE_TO, [point], code=code)

        if len(values) % 2 != 0:
            raise ArityMismatchError(f'Odd number of arguments ({len(values)}) for command "{code}"', token)
        if not values:
            raise ArityMismatchError(f'Command "{code}" needs arguments', token)
        points = list(zip(values[0::2], values[1::2]))
        try:
            return Command(kind, points, code=code)
        except ArityMismatchError as e:
            raise ArityMismatchError(str(e), token) from e

    def translate(self, dx: float, dy: float) -> "Command":
        return Command(self.kind, [(x + dx, y + dy) for x, y in self.args], code=self.code)

    def target(self, pen: Point) -> Point:
        """Return the pen position after this command is drawn from `pen`."""
        match self.kind:
            case CommandKind.MOVE_TO | CommandKind.LINE_TO | CommandKind.CUBIC_CURVE_TO:
                return self.args[-1]
            case CommandKind.HORIZONTAL_LINE_TO:
                return (self.args[0][0], pen[1])
            case CommandKind.VERTICAL_LINE_TO:
                return (pen[0], self.args[0][1])
            case _:
                return ORIGIN

    def coordinates(self, pen: Point) -> list[Point]:
        """Return the points this command positions, with H/V placeholder axes taken from `pen`."""
        if self.kind in (CommandKind.HORIZONTAL_LINE_TO, CommandKind.VERTICAL_LINE_TO):
            return [self.target(pen)]
        return list(self.args)

    def to_instruction(self, pen: Point = ORIGIN) -> str:
        """Serialize the command as a drawing call, with six decimal places per number."""

        def call(name: str, *points: Point) -> str:
            return f"ctx.{name}({', '.join(f'{x:.6f}, {y:.6f}' for x, y in points)})"

        match self.kind:
            case CommandKind.MOVE_TO:
                return call("move_to", self.args[0])
            case CommandKind.LINE_TO | CommandKind.HORIZONTAL_LINE_TO | CommandKind.VERTICAL_LINE_TO:
                return call("line_to", self.target(pen))
            case CommandKind.CUBIC_CURVE_TO:
                return call("curve_to", *self.args)
            case CommandKind.CLOSE_PATH:
                return "ctx.close_path()"
            case _:
                return f"# unsupported command: {self.code}"

    def draw(self, surface: DrawingSurface, pen: Point = ORIGIN) -> Point:
        """Hand this command to a drawing surface and return the new pen position."""
        match self.kind:
            case CommandKind.MOVE_TO:
                surface.move_to(*self.args[0])
            case CommandKind.LINE_TO | CommandKind.HORIZONTAL_LINE_TO | CommandKind.VERTICAL_LINE_TO:
                surface.line_to(*self.target(pen))
            case CommandKind.CUBIC_CURVE_TO:
                (x1, y1), (x2, y2), (x3, y3) = self.args
                surface.curve_to(x1, y1, x2, y2, x3, y3)
            case CommandKind.CLOSE_PATH:
                surface.close_path()
            case _:
                logger.warning('Skipping unsupported command "%s"', self.code)
        return self.target(pen)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self.kind == other.kind and self.args == other.args

    def __repr__(self) -> str:
        return f"Command({self.kind.name}, {list(self.args)})"


def tokenize(path_data: str) -> list[str]:
    """Split path data into one token per command letter, keeping each letter with its arguments.

    Separator-only fragments are dropped; any other text before the first command letter
    is kept as a token of its own so that parsing it fails.
    """
    return [token for token in TOKEN_SPLIT_PATTERN.split(path_data) if token.strip(SEPARATORS)]


class CommandSequence:
    """An ordered, immutable list of commands; order is drawing order."""

    def __init__(self, commands: Iterable[Command] = ()):
        self.commands: tuple[Command, ...] = tuple(commands)

    @staticmethod
    def parse(path_data: str, strict: bool = False) -> "CommandSequence":
        """Parse path data such as "M0,0 L10,0 L10,10 Z" into a command sequence.

        Parsing stops at the first malformed command; the raised error carries the
        index of the offending token in `index`.

        Args:
            path_data (str): path mini-language text
            strict (bool, optional): reject commands that cannot be drawn (S, Q, T, A).

        Raises:
            PathDecodeError: if any command is malformed

        Returns:
            CommandSequence: the parsed commands, in order
        """
        commands = []
        pen = ORIGIN
        for index, token in enumerate(tokenize(path_data)):
            try:
                command = Command.parse(token, pen, strict=strict)
            except PathDecodeError as e:
                e.index = index
                raise
            commands.append(command)
            pen = command.target(pen)
        logger.debug("Parsed %d path commands", len(commands))
        return CommandSequence(commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __getitem__(self, index):
        return self.commands[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CommandSequence):
            return NotImplemented
        return self.commands == other.commands

    def __repr__(self) -> str:
        return f"CommandSequence({list(self.commands)})"

    def bounds(self) -> Union[Rect, None]:
        """Return the tightest rectangle enclosing every coordinate argument.

        Returns:
            Rect | None: bounding rectangle, or None when there are no coordinates to enclose
        """
        points: list[Point] = []
        pen = ORIGIN
        for command in self.commands:
            points.extend(command.coordinates(pen))
            pen = command.target(pen)
        return Rect.from_points(points)

    def translate(self, dx: float, dy: float) -> "CommandSequence":
        return CommandSequence(command.translate(dx, dy) for command in self.commands)

    def normalize(self) -> "CommandSequence":
        """Return a copy translated so that its bounds are centred on the origin."""
        bounds = self.bounds()
        if bounds is None:
            return CommandSequence(self.commands)
        tx = -bounds.top_left[0] - bounds.width / 2
        ty = -bounds.top_left[1] - bounds.height / 2
        return self.translate(tx, ty)

    def emit(self, surface: DrawingSurface, new_path: bool = True) -> None:
        """Draw every command onto `surface` in order, threading the pen position through."""
        if new_path:
            surface.new_path()
        pen = ORIGIN
        for command in self.commands:
            pen = command.draw(surface, pen)

    def instructions(self) -> list[str]:
        """Return one drawing-call line per command."""
        lines = []
        pen = ORIGIN
        for command in self.commands:
            lines.append(command.to_instruction(pen))
            pen = command.target(pen)
        return lines
