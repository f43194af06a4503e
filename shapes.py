from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

from colors import Color, Palette, TRANSPARENT
from errors import ValidationError
from geometry import Point


@dataclass(frozen=True)
class CubicSegment:
    c1: Point
    c2: Point
    end: Point


@dataclass(frozen=True)
class SmoothCubicSegment:
    c2: Point
    end: Point


@dataclass(frozen=True)
class QuadraticSegment:
    c: Point
    end: Point


@dataclass(frozen=True)
class ArcSegment:
    rx: float
    ry: float
    x_rotation: float
    large_arc: bool
    sweep: bool
    end: Point


@dataclass(frozen=True)
class PathCommand:
    relative: bool

    letter = '?'

    @property
    def payload(self) -> tuple:
        raise NotImplementedError

    def __post_init__(self):
        if len(self.payload) == 0:
            raise ValidationError(f"Empty argument list for '{self.letter}' command", self.letter)


@dataclass(frozen=True)
class MoveTo(PathCommand):
    points: tuple[Point, ...]

    letter = 'M'

    @property
    def payload(self) -> tuple:
        return self.points


@dataclass(frozen=True)
class LineTo(PathCommand):
    points: tuple[Point, ...]

    letter = 'L'

    @property
    def payload(self) -> tuple:
        return self.points


@dataclass(frozen=True)
class HorizontalLineTo(PathCommand):
    xs: tuple[float, ...]

    letter = 'H'

    @property
    def payload(self) -> tuple:
        return self.xs


@dataclass(frozen=True)
class VerticalLineTo(PathCommand):
    ys: tuple[float, ...]

    letter = 'V'

    @property
    def payload(self) -> tuple:
        return self.ys


@dataclass(frozen=True)
class CubicBezier(PathCommand):
    segments: tuple[CubicSegment, ...]

    letter = 'C'

    @property
    def payload(self) -> tuple:
        return self.segments


@dataclass(frozen=True)
class SmoothCubicBezier(PathCommand):
    segments: tuple[SmoothCubicSegment, ...]

    letter = 'S'

    @property
    def payload(self) -> tuple:
        return self.segments


@dataclass(frozen=True)
class QuadraticBezier(PathCommand):
    segments: tuple[QuadraticSegment, ...]

    letter = 'Q'

    @property
    def payload(self) -> tuple:
        return self.segments


@dataclass(frozen=True)
class SmoothQuadraticBezier(PathCommand):
    points: tuple[Point, ...]

    letter = 'T'

    @property
    def payload(self) -> tuple:
        return self.points


@dataclass(frozen=True)
class Arc(PathCommand):
    segments: tuple[ArcSegment, ...]

    letter = 'A'

    @property
    def payload(self) -> tuple:
        return self.segments


@dataclass(frozen=True)
class SubPath:
    commands: tuple[PathCommand, ...]
    closed: bool = False

    def __post_init__(self):
        if len(self.commands) == 0:
            raise ValidationError("Empty list of path commands")
        first = self.commands[0]
        if not isinstance(first, MoveTo):
            raise ValidationError(
                f"Expected first subpath command to be a 'moveto' but was '{first.letter}'", first.letter)


@dataclass(frozen=True)
class Path:
    subpaths: tuple[SubPath, ...]
    fill: Color = TRANSPARENT
    stroke: Color = TRANSPARENT
    stroke_width: float = 1.0

    def __post_init__(self):
        if len(self.subpaths) == 0:
            raise ValidationError("Empty list of subpaths")
        _check_stroke_width(self.stroke_width)


@dataclass(frozen=True)
class ViewBox:
    min_x: float
    min_y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValidationError(f"Invalid view box size: {self.width} x {self.height}")


@dataclass(frozen=True)
class Style:
    fill: Color = TRANSPARENT
    stroke: Color = TRANSPARENT
    stroke_width: float | None = None
    visible: bool = True

    def __post_init__(self):
        if self.stroke_width is not None:
            _check_stroke_width(self.stroke_width)


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float
    fill: Color = TRANSPARENT
    stroke: Color = TRANSPARENT
    stroke_width: float = 1.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValidationError(f"Invalid width and height: {self.width} x {self.height}")
        _check_stroke_width(self.stroke_width)


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    fill: Color = TRANSPARENT
    stroke: Color = TRANSPARENT
    stroke_width: float = 1.0

    def __post_init__(self):
        if len(self.points) == 0:
            raise ValidationError("Empty list of polyline points")
        _check_stroke_width(self.stroke_width)


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: Color = TRANSPARENT
    stroke: Color = TRANSPARENT
    stroke_width: float = 1.0

    def __post_init__(self):
        if self.r < 0:
            raise ValidationError(f"Invalid radius: {self.r}", str(self.r))
        _check_stroke_width(self.stroke_width)


@dataclass(frozen=True)
class Group:
    style: Style
    elements: tuple['Element', ...]

    def __post_init__(self):
        if len(self.elements) == 0:
            raise ValidationError("Useless group with no elements inside")


Element = Union[Rectangle, Path, Polyline, Circle, Group]


@dataclass(frozen=True)
class Image:
    view_box: ViewBox
    width: float
    height: float
    elements: tuple[Element, ...]
    palette: Palette = field(default_factory=lambda: Palette({}), compare=False, repr=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValidationError(f"Invalid width and height: {self.width} x {self.height}")
        if len(self.elements) == 0:
            raise ValidationError("Image with no elements inside")


def _check_stroke_width(stroke_width: float):
    if stroke_width <= 0:
        raise ValidationError(f"Invalid stroke-width: {stroke_width}", str(stroke_width))
