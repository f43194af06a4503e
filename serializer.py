from __future__ import annotations

from colors import Color, Palette, byte_to_float
from config import RenderConfig
from renderer import Renderer
from shapes import Image
from sinks import DrawingSink

INDENT = '    '


def java_float(value: float) -> str:
    return f"{float(value)}f"


def color_literal(color: Color) -> str:
    return (f"new Color({java_float(byte_to_float(color.r))}, {java_float(byte_to_float(color.g))}, "
            f"{java_float(byte_to_float(color.b))}, {java_float(byte_to_float(color.a))})")


class CodeSink(DrawingSink):
    def __init__(self, palette: Palette):
        self.palette = palette
        self.statements: list[str] = []

    def _emit(self, statement: str):
        self.statements.append(statement)

    def _x(self, value: float) -> str:
        return f"x + {java_float(value)}"

    def _y(self, value: float) -> str:
        return f"y + {java_float(value)}"

    def begin_batch(self):
        self._emit("sr.setAutoShapeType(true);")
        self._emit("sr.begin();")

    def end_batch(self):
        self._emit("sr.end();")

    def set_color(self, r, g, b, a):
        color = Color(*(int(round(v * 255)) for v in (r, g, b, a)))
        if color in self.palette:
            self._emit(f"sr.setColor({self.palette.name_of(color)});")
        else:
            self._emit(f"sr.setColor({color_literal(color)});")

    def set_draw_mode(self, mode):
        self._emit(f"sr.set(ShapeRenderer.ShapeType.{mode.value});")

    def line(self, x0, y0, x1, y1):
        self._emit(f"sr.line({self._x(x0)}, {self._y(y0)}, {self._x(x1)}, {self._y(y1)});")

    def rect(self, x, y, width, height):
        self._emit(f"sr.rect({self._x(x)}, {self._y(y)}, {java_float(width)}, {java_float(height)});")

    def curve(self, x0, y0, c1x, c1y, c2x, c2y, x1, y1, segments):
        self._emit(f"sr.curve({self._x(x0)}, {self._y(y0)}, {self._x(c1x)}, {self._y(c1y)}, "
                   f"{self._x(c2x)}, {self._y(c2y)}, {self._x(x1)}, {self._y(y1)}, {segments});")

    def triangle(self, x0, y0, x1, y1, x2, y2):
        self._emit(f"sr.triangle({self._x(x0)}, {self._y(y0)}, {self._x(x1)}, {self._y(y1)}, "
                   f"{self._x(x2)}, {self._y(y2)});")


def serialize(image: Image, config: RenderConfig = None) -> str:
    sink = CodeSink(image.palette)
    Renderer(image, sink, config).render()

    lines = [
        "private void draw(final float x, final float y) {",
        f"final float width = {java_float(image.width)};",
        f"final float height = {java_float(image.height)};",
        "final ShapeRenderer sr = @Place here your ShapeRenderer@;",
    ]
    for name, color in image.palette.items():
        if color.is_transparent:
            continue
        lines.append(f"final Color {name} = {color_literal(color)}; // {color}")
    lines.extend(sink.statements)

    body = '\n'.join(INDENT + line for line in lines[1:])
    return f"{lines[0]}\n{body}\n}}\n"
