"""Tests for libGDX ShapeRenderer code generation."""

from colors import Color, PaletteBuilder
from config import RenderConfig
from serializer import CodeSink, color_literal, java_float, serialize
from sinks import DrawMode


def test_java_float():
    assert java_float(1) == "1.0f"
    assert java_float(0.5) == "0.5f"


def test_color_literal():
    assert color_literal(Color(255, 0, 0, 255)) == "new Color(1.0f, 0.0f, 0.0f, 1.0f)"


def test_triangle_code(triangle_image):
    code = serialize(triangle_image)
    lines = code.splitlines()

    assert lines[0] == "private void draw(final float x, final float y) {"
    assert lines[-1] == "}"
    assert code.endswith("}\n")
    assert "    final ShapeRenderer sr = @Place here your ShapeRenderer@;" in lines
    assert not any(line.strip().startswith("final Color c0 ") for line in lines)
    assert "    final Color c1 = new Color(0.0f, 0.0f, 1.0f, 1.0f); // #0000FFFF" in lines
    assert "    final Color c2 = new Color(1.0f, 0.0f, 0.0f, 1.0f); // #FF0000FF" in lines

    body = [line.strip() for line in lines]
    begin = body.index("sr.begin();")
    assert body[begin - 1] == "sr.setAutoShapeType(true);"
    assert body[begin + 1:begin + 4] == [
        "sr.set(ShapeRenderer.ShapeType.Line);",
        "sr.setColor(c1);",
        "sr.rect(x + 1.0f, y + 1.0f, 398.0f, 398.0f);",
    ]
    assert "sr.set(ShapeRenderer.ShapeType.Filled);" in body
    assert "sr.setColor(c2);" in body
    assert "sr.triangle(x + 100.0f, y + 100.0f, x + 300.0f, y + 100.0f, x + 200.0f, y + 300.0f);" in body
    assert "sr.line(x + 200.0f, y + 300.0f, x + 100.0f, y + 100.0f);" in body
    assert body[-2] == "sr.end();"


def test_flipped_code(triangle_image):
    code = serialize(triangle_image, RenderConfig(flip_y=True))
    assert "sr.triangle(x + 100.0f, y + 300.0f, x + 300.0f, y + 300.0f, x + 200.0f, y + 100.0f);" in code


def test_curve_code(cubic_image):
    code = serialize(cubic_image)
    assert "sr.curve(x + 0.0f, y + 0.0f, x + 0.0f, y + 10.0f, x + 10.0f, y + 10.0f, x + 10.0f, y + 0.0f, 50);" in code


def test_color_outside_palette_is_literal():
    builder = PaletteBuilder()
    builder.add(Color(255, 0, 0, 255))
    sink = CodeSink(builder.build())
    sink.set_draw_mode(DrawMode.FILLED)
    sink.set_color(1.0, 0.0, 0.0, 1.0)
    sink.set_color(0.0, 1.0, 0.0, 1.0)
    assert sink.statements == [
        "sr.set(ShapeRenderer.ShapeType.Filled);",
        "sr.setColor(c0);",
        "sr.setColor(new Color(0.0f, 1.0f, 0.0f, 1.0f));",
    ]


def test_transparent_colors_get_no_constant(triangle_image):
    assert triangle_image.palette.name_of(Color(0, 0, 0, 0)) == "c0"
    code = serialize(triangle_image)
    assert "0.0f, 0.0f, 0.0f, 0.0f" not in code
    assert "c0" not in code
