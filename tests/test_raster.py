"""Tests for the numpy raster sink."""

import numpy as np
from PIL import Image

from config import RenderConfig
from renderer import render_image
from sinks import DrawMode, RasterSink

WHITE = [255, 255, 255]
RED = [255, 0, 0]


def red_sink(mode: DrawMode) -> RasterSink:
    sink = RasterSink(10, 10)
    sink.set_draw_mode(mode)
    sink.set_color(1.0, 0.0, 0.0, 1.0)
    return sink


def test_background():
    sink = RasterSink(4, 3, background=(10, 20, 30))
    rgb = sink.get_rgb_buffer()
    assert rgb.shape == (3, 4, 3)
    assert (rgb == [10, 20, 30]).all()
    assert (sink.get_rgba_buffer()[:, :, 3] == 255).all()


def test_filled_rect():
    sink = red_sink(DrawMode.FILLED)
    sink.rect(2.0, 2.0, 4.0, 4.0)
    rgb = sink.get_rgb_buffer()
    assert rgb[3, 3].tolist() == RED
    assert rgb[0, 0].tolist() == WHITE
    assert rgb[7, 7].tolist() == WHITE


def test_outlined_rect_leaves_inside():
    sink = red_sink(DrawMode.LINE)
    sink.rect(1.0, 1.0, 6.0, 6.0)
    rgb = sink.get_rgb_buffer()
    assert rgb[1, 1].tolist() == RED
    assert rgb[4, 4].tolist() == WHITE


def test_filled_triangle():
    sink = red_sink(DrawMode.FILLED)
    sink.triangle(0.0, 0.0, 9.0, 0.0, 0.0, 9.0)
    rgb = sink.get_rgb_buffer()
    assert rgb[1, 1].tolist() == RED
    assert rgb[8, 8].tolist() == WHITE


def test_triangle_winding_does_not_matter():
    sink = red_sink(DrawMode.FILLED)
    sink.triangle(0.0, 0.0, 0.0, 9.0, 9.0, 0.0)
    assert sink.get_rgb_buffer()[1, 1].tolist() == RED


def test_horizontal_line():
    sink = red_sink(DrawMode.LINE)
    sink.line(0.0, 5.0, 9.0, 5.0)
    rgb = sink.get_rgb_buffer()
    assert (rgb[5, :] == RED).all()
    assert rgb[4, 0].tolist() == WHITE


def test_half_transparent_blend():
    sink = RasterSink(2, 2)
    sink.set_draw_mode(DrawMode.FILLED)
    sink.set_color(1.0, 0.0, 0.0, 0.5)
    sink.rect(0.0, 0.0, 2.0, 2.0)
    r, g, b, a = sink.get_rgba_buffer()[0, 0].tolist()
    assert r == 255
    assert 120 <= g <= 135
    assert 120 <= b <= 135
    assert a == 255


def test_save_png(tmp_path):
    sink = red_sink(DrawMode.FILLED)
    sink.rect(0.0, 0.0, 10.0, 10.0)
    output = tmp_path / "out.png"
    sink.save(str(output))
    with Image.open(output) as png:
        assert png.size == (10, 10)
        assert np.asarray(png.convert("RGB"))[5, 5].tolist() == RED


def test_render_triangle(triangle_image):
    sink = RasterSink(151, 151)
    render_image(triangle_image, sink, RenderConfig(fit_viewbox=True))
    rgb = sink.get_rgb_buffer()
    # centroid of the triangle, scaled from the 400x400 view box
    assert rgb[62, 75].tolist() == RED
    assert rgb[140, 20].tolist() == WHITE
