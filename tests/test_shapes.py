"""Tests for model invariants."""

import pytest

from colors import Color
from errors import ValidationError
from geometry import Point
from shapes import (
    Circle, Group, Image, LineTo, MoveTo, Path, Polyline, Rectangle, Style, SubPath, ViewBox,
)

MOVE = MoveTo(False, (Point(0.0, 0.0),))


def test_subpath_must_start_with_moveto():
    with pytest.raises(ValidationError, match="moveto"):
        SubPath((LineTo(False, (Point(1.0, 1.0),)), MOVE))


def test_subpath_must_not_be_empty():
    with pytest.raises(ValidationError):
        SubPath(())


def test_command_needs_arguments():
    with pytest.raises(ValidationError):
        LineTo(False, ())


def test_path_needs_subpaths():
    with pytest.raises(ValidationError):
        Path(())


@pytest.mark.parametrize("width, height", [(0.0, 1.0), (1.0, 0.0), (-1.0, 1.0)])
def test_rectangle_size(width, height):
    with pytest.raises(ValidationError):
        Rectangle(0.0, 0.0, width, height)


@pytest.mark.parametrize("stroke_width", [0.0, -2.0])
def test_stroke_width(stroke_width):
    with pytest.raises(ValidationError):
        Rectangle(0.0, 0.0, 1.0, 1.0, stroke_width=stroke_width)
    with pytest.raises(ValidationError):
        Style(stroke_width=stroke_width)


def test_view_box_rejects_negative_size():
    assert ViewBox(-5.0, -5.0, 0.0, 0.0).width == 0.0
    with pytest.raises(ValidationError):
        ViewBox(0.0, 0.0, -1.0, 10.0)


def test_circle_and_polyline():
    assert Circle(0.0, 0.0, 0.0).r == 0.0
    with pytest.raises(ValidationError):
        Circle(0.0, 0.0, -1.0)
    with pytest.raises(ValidationError):
        Polyline(())


def test_group_needs_elements():
    with pytest.raises(ValidationError):
        Group(Style(), ())


def test_image_invariants():
    rect = Rectangle(0.0, 0.0, 1.0, 1.0)
    view_box = ViewBox(0.0, 0.0, 10.0, 10.0)
    assert Image(view_box, 10.0, 10.0, (rect,)).elements == (rect,)
    with pytest.raises(ValidationError):
        Image(view_box, 0.0, 10.0, (rect,))
    with pytest.raises(ValidationError):
        Image(view_box, 10.0, 10.0, ())


def test_structural_equality():
    a = Path((SubPath((MOVE,)),), Color(1, 2, 3, 4))
    b = Path((SubPath((MoveTo(False, (Point(0.0, 0.0),)),)),), Color(1, 2, 3, 4))
    assert a == b
    assert hash(a) == hash(b)
