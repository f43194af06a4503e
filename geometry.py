from __future__ import annotations
import math
import re
from dataclasses import dataclass

from errors import SizeError

# Absolute unit conversion, see
# https://oreillymedia.github.io/Using_SVG/guide/units.html#units-absolute-reference
INCHES_TO_PX = 96.0
CM_TO_PX = 37.795
MM_TO_PX = 3.7795
PT_TO_PX = 1.3333
PC_TO_PX = 16.0

UNIT_TO_PX = {
    'in': INCHES_TO_PX,
    'cm': CM_TO_PX,
    'mm': MM_TO_PX,
    'pt': PT_TO_PX,
    'pc': PC_TO_PX,
    'px': 1.0,
}

number_pattern = re.compile(r'^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$')


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def add(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __add__(self, other: 'Point') -> 'Point':
        return self.add(other)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> 'Point':
        return Point(self.x * factor, self.y * factor)

    def reflect(self, center: 'Point') -> 'Point':
        return Point(2 * center.x - self.x, 2 * center.y - self.y)


ORIGIN = Point(0.0, 0.0)


def parse_number(value: str) -> float:
    if value is None or not number_pattern.match(value.strip()):
        raise SizeError(f"Invalid number: '{value}'", value)
    return float(value.strip())


def parse_size(value: str) -> float:
    if value is None:
        raise SizeError("Missing size value", value)

    literal = value.strip()
    if len(literal) < 2:
        return parse_number(literal)

    factor = UNIT_TO_PX.get(literal[-2:])
    if factor is None:
        return parse_number(literal)

    try:
        return parse_number(literal[:-2]) * factor
    except SizeError:
        raise SizeError(f"Invalid size: '{value}'", value) from None


def parse_positive_size(value: str, name: str) -> float:
    size = parse_size(value)
    if size <= 0:
        raise SizeError(f"Invalid {name}: '{value}' must be greater than zero", value)
    return size


def cubic_point(p0: Point, c1: Point, c2: Point, p3: Point, t: float) -> Point:
    u = 1.0 - t
    b0 = u * u * u
    b1 = 3 * u * u * t
    b2 = 3 * u * t * t
    b3 = t * t * t
    return Point(b0 * p0.x + b1 * c1.x + b2 * c2.x + b3 * p3.x,
                 b0 * p0.y + b1 * c1.y + b2 * c2.y + b3 * p3.y)


def quadratic_point(p0: Point, c: Point, p2: Point, t: float) -> Point:
    u = 1.0 - t
    b0 = u * u
    b1 = 2 * u * t
    b2 = t * t
    return Point(b0 * p0.x + b1 * c.x + b2 * p2.x,
                 b0 * p0.y + b1 * c.y + b2 * p2.y)


def sample_cubic(p0: Point, c1: Point, c2: Point, p3: Point, segments: int) -> list[Point]:
    # t = k/segments for k = 1..segments; the start point is not repeated
    return [cubic_point(p0, c1, c2, p3, k / segments) for k in range(1, segments + 1)]


def sample_quadratic(p0: Point, c: Point, p2: Point, segments: int) -> list[Point]:
    return [quadratic_point(p0, c, p2, k / segments) for k in range(1, segments + 1)]


def elevate_quadratic(p0: Point, c: Point, p2: Point) -> tuple[Point, Point]:
    c1 = p0 + (c - p0).scale(2.0 / 3.0)
    c2 = p2 + (c - p2).scale(2.0 / 3.0)
    return (c1, c2)


def arc_points(start: Point, rx: float, ry: float, rotation: float,
               large_arc: bool, sweep: bool, end: Point, segments: int) -> list[Point]:
    if start == end:
        return []
    if rx == 0 or ry == 0:
        return [end]

    cos_phi = math.cos(math.radians(rotation))
    sin_phi = math.sin(math.radians(rotation))

    dx = (start.x - end.x) / 2
    dy = (start.y - end.y) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    rx = abs(rx)
    ry = abs(ry)

    lambda_val = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lambda_val > 1:
        rx *= math.sqrt(lambda_val)
        ry *= math.sqrt(lambda_val)

    denominator = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    factor = math.sqrt(max(0.0, (rx * rx * ry * ry - denominator) / denominator))
    if large_arc == sweep:
        factor = -factor

    cxp = factor * rx * y1p / ry
    cyp = -factor * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (start.x + end.x) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (start.y + end.y) / 2

    theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
    dtheta = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx) - theta1

    if sweep and dtheta < 0:
        dtheta += 2 * math.pi
    elif not sweep and dtheta > 0:
        dtheta -= 2 * math.pi

    points = []
    for i in range(1, segments):
        theta = theta1 + dtheta * i / segments
        x = cx + rx * math.cos(theta) * cos_phi - ry * math.sin(theta) * sin_phi
        y = cy + rx * math.cos(theta) * sin_phi + ry * math.sin(theta) * cos_phi
        points.append(Point(x, y))
    points.append(end)
    return points


def circle_points(cx: float, cy: float, r: float, segments: int) -> list[Point]:
    step = 2 * math.pi / segments
    return [Point(cx + r * math.cos(i * step), cy + r * math.sin(i * step)) for i in range(segments)]


def clamp(x, minx, maxx):
    return max(min(x, maxx), minx)
