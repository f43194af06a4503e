from __future__ import annotations

from colors import Color, TRANSPARENT
from geometry import Point
from shapes import Style

class TransformMatrix:
    def __init__(self, a: float = 1.0, b: float = 0.0, c: float = 0.0,
                 d: float = 1.0, e: float = 0.0, f: float = 0.0):
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.e = e
        self.f = f

    @staticmethod
    def identity() -> 'TransformMatrix':
        return TransformMatrix(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @staticmethod
    def translate(tx: float, ty: float) -> 'TransformMatrix':
        return TransformMatrix(1.0, 0.0, 0.0, 1.0, tx, ty)

    @staticmethod
    def scale(sx: float, sy: float = None) -> 'TransformMatrix':
        if sy is None:
            sy = sx
        return TransformMatrix(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @staticmethod
    def flip_y(height: float) -> 'TransformMatrix':
        # y' = height - y
        return TransformMatrix(1.0, 0.0, 0.0, -1.0, 0.0, height)

    def multiply(self, other: 'TransformMatrix') -> 'TransformMatrix':
        # self applied after other
        return TransformMatrix(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f
        )

    def transform_point(self, x: float, y: float) -> tuple[float, float]:
        new_x = self.a * x + self.c * y + self.e
        new_y = self.b * x + self.d * y + self.f
        return (new_x, new_y)

    def apply(self, point: Point) -> Point:
        return Point(*self.transform_point(point.x, point.y))

    def copy(self) -> 'TransformMatrix':
        return TransformMatrix(self.a, self.b, self.c, self.d, self.e, self.f)

    def __repr__(self) -> str:
        return f"TransformMatrix({self.a}, {self.b}, {self.c}, {self.d}, {self.e}, {self.f})"

class DrawingContext:
    def __init__(self, transform: TransformMatrix = None):
        self.transform = transform if transform is not None else TransformMatrix.identity()
        self.fill_color = TRANSPARENT
        self.stroke_color = TRANSPARENT
        self.stroke_width = 1.0
        self.visible = True

    def push(self) -> 'DrawingContext':
        new_ctx = DrawingContext(self.transform.copy())
        new_ctx.fill_color = self.fill_color
        new_ctx.stroke_color = self.stroke_color
        new_ctx.stroke_width = self.stroke_width
        new_ctx.visible = self.visible
        return new_ctx

    def apply_style(self, style: Style):
        self.fill_color = self.resolve_fill(style.fill)
        self.stroke_color = self.resolve_stroke(style.stroke)
        if style.stroke_width is not None:
            self.stroke_width = style.stroke_width
        self.visible = self.visible and style.visible

    def resolve_fill(self, color: Color) -> Color:
        # an all-zero color means "not set here"
        return self.fill_color if color == TRANSPARENT else color

    def resolve_stroke(self, color: Color) -> Color:
        return self.stroke_color if color == TRANSPARENT else color
