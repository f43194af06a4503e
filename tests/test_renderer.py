"""Tests for the rendering adapter, using a recording sink."""

import pytest

from colors import Color
from config import RenderConfig
from document import load_image_string
from drawing_context import DrawingContext
from errors import TriangulationError, ValidationError
from renderer import render_image
from shapes import Style
from sinks import DrawMode, RecordingSink

BLUE = (0.0, 0.0, 1.0, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)


def svg(body: str) -> str:
    return f'<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">{body}</svg>'


def test_triangle_calls(triangle_image):
    sink = render_image(triangle_image, RecordingSink())
    assert sink.calls == [
        ('begin_batch',),
        ('set_draw_mode', DrawMode.LINE),
        ('set_color', *BLUE),
        ('rect', 1.0, 1.0, 398.0, 398.0),
        ('set_draw_mode', DrawMode.FILLED),
        ('set_color', *RED),
        ('triangle', 100.0, 100.0, 300.0, 100.0, 200.0, 300.0),
        ('set_draw_mode', DrawMode.LINE),
        ('set_color', *BLUE),
        ('line', 100.0, 100.0, 300.0, 100.0),
        ('line', 300.0, 100.0, 200.0, 300.0),
        ('line', 200.0, 300.0, 100.0, 100.0),
        ('end_batch',),
    ]


def test_flip_y(triangle_image):
    sink = render_image(triangle_image, RecordingSink(), RenderConfig(flip_y=True))
    assert sink.of('rect') == [('rect', 1.0, 1.0, 398.0, 398.0)]
    assert sink.of('triangle') == [('triangle', 100.0, 300.0, 300.0, 300.0, 200.0, 100.0)]


def test_fit_view_box(triangle_image):
    sink = render_image(triangle_image, RecordingSink(), RenderConfig(fit_viewbox=True))
    [(_, x, y, width, height)] = sink.of('rect')
    scale = triangle_image.width / 400.0
    assert (x, y, width, height) == pytest.approx((scale, scale, 398.0 * scale, 398.0 * scale))


def test_curve_stroke(cubic_image):
    sink = render_image(cubic_image, RecordingSink())
    assert sink.of('curve') == [('curve', 0.0, 0.0, 0.0, 10.0, 10.0, 10.0, 10.0, 0.0, 50)]
    assert sink.of('line') == [('line', 10.0, 0.0, 0.0, 0.0)]
    assert sink.of('triangle') == []


def test_curve_stroke_without_native_curves(cubic_image):
    sink = render_image(cubic_image, RecordingSink(supports_curves=False))
    assert sink.of('curve') == []
    lines = sink.of('line')
    assert len(lines) == 51
    assert lines[0][1:3] == (0.0, 0.0)
    assert lines[49][3:] == (10.0, 0.0)


def test_curve_segments_from_config(cubic_image):
    sink = render_image(cubic_image, RecordingSink(), RenderConfig(curve_segments=8))
    assert sink.of('curve')[0][-1] == 8


def test_group_inherits_fill(group_image):
    sink = render_image(group_image, RecordingSink())
    assert ('set_color', 0.0, 1.0, 0.0, 1.0) in sink.calls
    assert sink.of('triangle') == [('triangle', 0.0, 0.0, 10.0, 0.0, 10.0, 10.0)]
    # the hidden group's red rect is never drawn
    assert sink.of('rect') == []
    assert ('set_color', *RED) not in sink.calls


def test_transparent_fill_is_not_triangulated():
    image = load_image_string(svg('<path d="M0 0 L 10 10" stroke="red"/>'))
    sink = render_image(image, RecordingSink())
    assert sink.of('triangle') == []
    assert len(sink.of('line')) == 2


def test_fill_needs_three_vertices():
    image = load_image_string(svg('<path d="M0 0 L 10 10" fill="red"/>'))
    with pytest.raises(TriangulationError):
        render_image(image, RecordingSink())


def test_every_subpath_is_filled_and_closed():
    image = load_image_string(svg('<path d="M0 0 L 10 0 L 10 10 z M 20 20 L 30 20 L 30 30 L 20 30" fill="red" stroke="blue"/>'))
    sink = render_image(image, RecordingSink())
    assert len(sink.of('triangle')) == 1 + 2
    assert sink.of('line')[-1] == ('line', 20.0, 30.0, 20.0, 20.0)


def test_polyline_is_not_closed(shapes_image):
    sink = render_image(shapes_image, RecordingSink())
    lines = sink.of('line')
    assert lines[:2] == [('line', 0.0, 0.0, 10.0, 10.0), ('line', 10.0, 10.0, 20.0, 0.0)]


def test_circle(shapes_image):
    sink = render_image(shapes_image, RecordingSink())
    assert len(sink.of('triangle')) == 48
    # 2 polyline edges plus a closed 50-point outline
    assert len(sink.of('line')) == 2 + 50


def test_zero_radius_circle_draws_nothing():
    image = load_image_string(svg('<circle cx="5" cy="5" fill="red" stroke="blue"/>'))
    sink = render_image(image, RecordingSink())
    assert sink.names() == ['begin_batch', 'end_batch']


def test_invalid_config():
    with pytest.raises(ValidationError):
        RenderConfig(curve_segments=0)


def test_nested_group_keeps_stroke_width():
    ctx = DrawingContext()
    ctx.apply_style(Style(stroke_width=3.0))
    nested = ctx.push()
    nested.apply_style(Style(stroke=Color(255, 0, 0, 255)))
    assert nested.stroke_width == 3.0
    assert nested.stroke_color == Color(255, 0, 0, 255)

    nested.apply_style(Style(stroke_width=0.5))
    assert nested.stroke_width == 0.5
    assert ctx.stroke_width == 3.0
