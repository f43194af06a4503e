from __future__ import annotations
import logging
from typing import Callable

from cursor import Cursor
from errors import PathSyntaxError
from shapes import (
    Arc, ArcSegment, CubicBezier, CubicSegment, HorizontalLineTo, LineTo, MoveTo,
    PathCommand, QuadraticBezier, QuadraticSegment, SmoothCubicBezier,
    SmoothCubicSegment, SmoothQuadraticBezier, SubPath, VerticalLineTo,
)

logger = logging.getLogger(__name__)


def _parse_arc_segment(cursor: Cursor) -> ArcSegment:
    rx = cursor.parse_number()
    cursor.skip_spaces_and_commas()
    ry = cursor.parse_number()
    cursor.skip_spaces_and_commas()
    x_rotation = cursor.parse_number()
    cursor.skip_spaces_and_commas()
    large_arc = cursor.parse_flag()
    cursor.skip_spaces_and_commas()
    sweep = cursor.parse_flag()
    cursor.skip_spaces_and_commas()
    end = cursor.parse_point()
    return ArcSegment(rx, ry, x_rotation, large_arc, sweep, end)


def _parse_cubic_segment(cursor: Cursor) -> CubicSegment:
    c1 = cursor.parse_point()
    cursor.skip_spaces_and_commas()
    c2 = cursor.parse_point()
    cursor.skip_spaces_and_commas()
    return CubicSegment(c1, c2, cursor.parse_point())


def _parse_smooth_cubic_segment(cursor: Cursor) -> SmoothCubicSegment:
    c2 = cursor.parse_point()
    cursor.skip_spaces_and_commas()
    return SmoothCubicSegment(c2, cursor.parse_point())


def _parse_quadratic_segment(cursor: Cursor) -> QuadraticSegment:
    c = cursor.parse_point()
    cursor.skip_spaces_and_commas()
    return QuadraticSegment(c, cursor.parse_point())


# command letter -> (command type, parser of one argument group)
_COMMANDS: dict[str, tuple[type, Callable[[Cursor], object]]] = {
    'm': (MoveTo, Cursor.parse_point),
    'l': (LineTo, Cursor.parse_point),
    'h': (HorizontalLineTo, Cursor.parse_number),
    'v': (VerticalLineTo, Cursor.parse_number),
    'c': (CubicBezier, _parse_cubic_segment),
    's': (SmoothCubicBezier, _parse_smooth_cubic_segment),
    'q': (QuadraticBezier, _parse_quadratic_segment),
    't': (SmoothQuadraticBezier, Cursor.parse_point),
    'a': (Arc, _parse_arc_segment),
}


def _parse_repetitions(cursor: Cursor, letter: str, parse_group: Callable[[Cursor], object]) -> tuple:
    groups = []
    cursor.skip_spaces()
    while cursor.at_number():
        groups.append(parse_group(cursor))
        cursor.skip_spaces_and_commas()

    if not groups:
        if cursor.has_next():
            ch = cursor.current()
            message = (f"Expected arguments after '{letter}' but found '{ch}' "
                       f"(U+{ord(ch):04X}) at index {cursor.index}")
        else:
            message = f"Expected arguments after '{letter}' but reached the end of path data"
        raise PathSyntaxError(message, letter, cursor.index)

    return tuple(groups)


def parse_command(cursor: Cursor) -> PathCommand:
    letter = cursor.current()
    command_type, parse_group = _COMMANDS[letter.lower()]
    cursor.move()
    groups = _parse_repetitions(cursor, letter, parse_group)
    return command_type(letter.islower(), groups)


def parse_subpath(cursor: Cursor) -> SubPath:
    # the cursor points to a non-whitespace character
    first = cursor.current()
    if first not in 'mM':
        raise PathSyntaxError(
            f"Invalid subpath data: must start with 'm' or 'M' but was '{first}' (U+{ord(first):04X})",
            first, cursor.index)

    commands = []
    closed = False
    while cursor.has_next():
        ch = cursor.current()
        if ch in 'zZ':
            cursor.move()
            closed = True
            break
        if ch.lower() not in _COMMANDS:
            raise PathSyntaxError(
                f"Unexpected character in path '{ch}' (U+{ord(ch):04X}) at index {cursor.index}",
                ch, cursor.index)
        commands.append(parse_command(cursor))

    return SubPath(tuple(commands), closed)


def parse_path_data(data: str) -> list[SubPath]:
    cursor = Cursor(data)
    subpaths = []

    while True:
        cursor.skip_spaces()
        if not cursor.has_next():
            break
        subpaths.append(parse_subpath(cursor))

    logger.debug("Parsed %d subpath(s) from %d characters of path data", len(subpaths), len(data))
    return subpaths
