from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Union

from config import CURVE_SEGMENTS
from geometry import (
    ORIGIN, Point, arc_points, elevate_quadratic, sample_cubic, sample_quadratic,
)
from shapes import (
    Arc, CubicBezier, HorizontalLineTo, LineTo, MoveTo, Path, PathCommand,
    QuadraticBezier, SmoothCubicBezier, SmoothQuadraticBezier, SubPath, VerticalLineTo,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point


@dataclass(frozen=True)
class CurveSegment:
    start: Point
    c1: Point
    c2: Point
    end: Point

    def sample(self, segments: int = CURVE_SEGMENTS) -> list[Point]:
        return sample_cubic(self.start, self.c1, self.c2, self.end, segments)


Segment = Union[LineSegment, CurveSegment]


@dataclass(frozen=True)
class ResolvedSubPath:
    initial: Point
    current: Point
    vertices: tuple[Point, ...]
    segments: tuple[Segment, ...]
    closed: bool = False

    def closing_segment(self) -> LineSegment:
        return LineSegment(self.current, self.initial)

    @property
    def next_start(self) -> Point:
        # where the following subpath's relative moveto is measured from
        return self.initial if self.closed else self.current


class PositionResolver:
    def __init__(self, start: Point = ORIGIN, segments: int = CURVE_SEGMENTS):
        self.current = start
        self.initial = start
        self.segments = segments
        self.vertices: list[Point] = []
        self.strokes: list[Segment] = []
        self._moved = False
        self._last_cubic: Point | None = None
        self._last_quadratic: Point | None = None

    def _resolve(self, relative: bool, point: Point) -> Point:
        if relative:
            return self.current + point
        return point

    def _line_to(self, target: Point):
        self.strokes.append(LineSegment(self.current, target))
        self.vertices.append(target)
        self.current = target

    def _cubic_to(self, c1: Point, c2: Point, end: Point):
        self.strokes.append(CurveSegment(self.current, c1, c2, end))
        self.vertices.extend(sample_cubic(self.current, c1, c2, end, self.segments))
        self.current = end
        self._last_cubic = c2

    def _quadratic_to(self, c: Point, end: Point):
        c1, c2 = elevate_quadratic(self.current, c, end)
        self.strokes.append(CurveSegment(self.current, c1, c2, end))
        self.vertices.extend(sample_quadratic(self.current, c, end, self.segments))
        self.current = end
        self._last_quadratic = c

    def _smooth_control(self, last: Point | None) -> Point:
        if last is None:
            return self.current
        return last.reflect(self.current)

    def _move_to(self, command: MoveTo):
        for i, point in enumerate(command.points):
            target = self._resolve(command.relative, point)
            if i > 0:
                self._line_to(target)
                continue

            if not self._moved:
                self.initial = target
                self._moved = True
            self.vertices.append(target)
            self.current = target

    def _arc_to(self, command: Arc):
        for segment in command.segments:
            end = self._resolve(command.relative, segment.end)
            samples = arc_points(self.current, segment.rx, segment.ry, segment.x_rotation,
                                 segment.large_arc, segment.sweep, end, self.segments)
            for sample in samples:
                self._line_to(sample)

    def apply(self, command: PathCommand):
        if isinstance(command, MoveTo):
            self._move_to(command)
        elif isinstance(command, LineTo):
            for point in command.points:
                self._line_to(self._resolve(command.relative, point))
        elif isinstance(command, HorizontalLineTo):
            for x in command.xs:
                target_x = self.current.x + x if command.relative else x
                self._line_to(Point(target_x, self.current.y))
        elif isinstance(command, VerticalLineTo):
            for y in command.ys:
                target_y = self.current.y + y if command.relative else y
                self._line_to(Point(self.current.x, target_y))
        elif isinstance(command, CubicBezier):
            for segment in command.segments:
                c1 = self._resolve(command.relative, segment.c1)
                c2 = self._resolve(command.relative, segment.c2)
                self._cubic_to(c1, c2, self._resolve(command.relative, segment.end))
        elif isinstance(command, SmoothCubicBezier):
            for segment in command.segments:
                c1 = self._smooth_control(self._last_cubic)
                c2 = self._resolve(command.relative, segment.c2)
                self._cubic_to(c1, c2, self._resolve(command.relative, segment.end))
        elif isinstance(command, QuadraticBezier):
            for segment in command.segments:
                c = self._resolve(command.relative, segment.c)
                self._quadratic_to(c, self._resolve(command.relative, segment.end))
        elif isinstance(command, SmoothQuadraticBezier):
            for point in command.points:
                c = self._smooth_control(self._last_quadratic)
                self._quadratic_to(c, self._resolve(command.relative, point))
        elif isinstance(command, Arc):
            self._arc_to(command)
        else:
            raise TypeError(f"Unsupported path command: {command!r}")

        if not isinstance(command, (CubicBezier, SmoothCubicBezier)):
            self._last_cubic = None
        if not isinstance(command, (QuadraticBezier, SmoothQuadraticBezier)):
            self._last_quadratic = None

    def result(self, closed: bool = False) -> ResolvedSubPath:
        return ResolvedSubPath(self.initial, self.current, tuple(self.vertices),
                               tuple(self.strokes), closed)


def resolve_subpath(subpath: SubPath, start: Point = ORIGIN,
                    segments: int = CURVE_SEGMENTS) -> ResolvedSubPath:
    resolver = PositionResolver(start, segments)
    for command in subpath.commands:
        resolver.apply(command)
    return resolver.result(subpath.closed)


def resolve_path(path: Path, segments: int = CURVE_SEGMENTS) -> list[ResolvedSubPath]:
    resolved = []
    start = ORIGIN
    for subpath in path.subpaths:
        result = resolve_subpath(subpath, start, segments)
        resolved.append(result)
        start = result.next_start

    logger.debug("Resolved %d subpath(s) into %d vertices", len(resolved),
                 sum(len(r.vertices) for r in resolved))
    return resolved
