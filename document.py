from __future__ import annotations
import logging
import re

from attributes import check_attributes, get_attribute_with_default, parse_style
from colors import Color, PaletteBuilder, apply_opacity, parse_color
from cursor import parse_points
from errors import SizeError, UnknownElementError, ValidationError, ViewBoxError
from geometry import number_pattern, parse_positive_size, parse_size
from parser import Node, parse_svg_file, parse_svg_string
from path_parser import parse_path_data
from shapes import Circle, Group, Image, Path, Polyline, Rectangle, Style, ViewBox

logger = logging.getLogger(__name__)

ROOT_ATTRIBUTES = {'width', 'height', 'viewBox'}
PAINT_ATTRIBUTES = {'fill', 'stroke', 'stroke-width'}
RECT_ATTRIBUTES = {'x', 'y', 'width', 'height'} | PAINT_ATTRIBUTES
PATH_ATTRIBUTES = {'d'} | PAINT_ATTRIBUTES
POLYLINE_ATTRIBUTES = {'points'} | PAINT_ATTRIBUTES
CIRCLE_ATTRIBUTES = {'cx', 'cy', 'r'} | PAINT_ATTRIBUTES
GROUP_ATTRIBUTES = {'style', 'display'} | PAINT_ATTRIBUTES

IGNORED_ELEMENTS = {'defs', 'metadata', 'title', 'desc', 'style', 'text'}


def parse_view_box(value: str) -> ViewBox:
    parts = re.split(r'[\s,]+', value.strip())
    if len(parts) != 4:
        raise ViewBoxError(f"Expected 4 arguments in viewBox attribute but were {len(parts)}", value)

    numbers = []
    for name, part in zip(('min-x', 'min-y', 'width', 'height'), parts):
        if not number_pattern.match(part):
            raise ViewBoxError(f"Invalid {name} value '{part}' in viewBox", value)
        number = float(part)
        if number < 0.0:
            raise ViewBoxError(f"Negative {name} value in viewBox", value)
        numbers.append(number)

    return ViewBox(*numbers)


class DocumentAssembler:
    def __init__(self):
        self.palette = PaletteBuilder()

    def assemble(self, root: Node) -> Image:
        if root.tag != 'svg':
            raise UnknownElementError(f"Invalid root element: expected 'svg' but was '{root.tag}'", root.tag)
        check_attributes(root, ROOT_ATTRIBUTES)

        attrs = root.attributes
        width = parse_positive_size(attrs['width'], 'width') if 'width' in attrs else None
        height = parse_positive_size(attrs['height'], 'height') if 'height' in attrs else None
        view_box = parse_view_box(attrs['viewBox']) if 'viewBox' in attrs else None

        if view_box is not None:
            if width is None:
                width = view_box.width
            if height is None:
                height = view_box.height

        if width is None or height is None:
            raise SizeError("Missing width/height and viewBox on <svg>")

        if view_box is None:
            view_box = ViewBox(0.0, 0.0, width, height)

        elements = self._parse_children(root)
        image = Image(view_box, width, height, tuple(elements), self.palette.build())
        logger.info("Parsed SVG: %d element(s), %.0f×%.0f, %d color(s)",
                    len(image.elements), width, height, len(image.palette))
        return image

    def _parse_children(self, node: Node) -> list:
        elements = []
        for child in node.children:
            if child.tag == 'rect':
                elements.append(self._parse_rect(child))
            elif child.tag == 'path':
                elements.append(self._parse_path(child))
            elif child.tag == 'polyline':
                elements.append(self._parse_polyline(child))
            elif child.tag == 'circle':
                elements.append(self._parse_circle(child))
            elif child.tag == 'g':
                elements.append(self._parse_group(child))
            elif child.tag in IGNORED_ELEMENTS:
                logger.debug("Ignoring <%s>", child.tag)
            else:
                raise UnknownElementError(f"Unknown element with name '{child.tag}'", child.tag)
        return elements

    def _color(self, value: str) -> Color:
        color = parse_color(value)
        self.palette.add(color)
        return color

    def _paint(self, node: Node) -> tuple[Color, Color, float]:
        fill = self._color(get_attribute_with_default(node, 'fill'))
        stroke = self._color(get_attribute_with_default(node, 'stroke'))
        stroke_width = parse_positive_size(get_attribute_with_default(node, 'stroke-width'), 'stroke-width')
        return (fill, stroke, stroke_width)

    def _check_leaf(self, node: Node, allowed: set[str]):
        if node.children:
            raise ValidationError(f"Weird '{node.tag}' element with {len(node.children)} child nodes", node.tag)
        check_attributes(node, allowed)

    def _required(self, node: Node, attr_name: str) -> str:
        value = node.get_attribute(attr_name)
        if value is None:
            raise ValidationError(f"Expected a '{attr_name}' attribute for '{node.tag}' element", node.tag)
        return value

    def _parse_rect(self, node: Node) -> Rectangle:
        self._check_leaf(node, RECT_ATTRIBUTES)
        x = parse_size(get_attribute_with_default(node, 'x'))
        y = parse_size(get_attribute_with_default(node, 'y'))
        width = parse_positive_size(self._required(node, 'width'), 'width')
        height = parse_positive_size(self._required(node, 'height'), 'height')
        fill, stroke, stroke_width = self._paint(node)
        return Rectangle(x, y, width, height, fill, stroke, stroke_width)

    def _parse_path(self, node: Node) -> Path:
        self._check_leaf(node, PATH_ATTRIBUTES)
        subpaths = parse_path_data(self._required(node, 'd'))
        if not subpaths:
            raise ValidationError("Empty path data in 'd' attribute", node.get_attribute('d'))
        fill, stroke, stroke_width = self._paint(node)
        return Path(tuple(subpaths), fill, stroke, stroke_width)

    def _parse_polyline(self, node: Node) -> Polyline:
        self._check_leaf(node, POLYLINE_ATTRIBUTES)
        points = parse_points(self._required(node, 'points'))
        fill, stroke, stroke_width = self._paint(node)
        return Polyline(tuple(points), fill, stroke, stroke_width)

    def _parse_circle(self, node: Node) -> Circle:
        self._check_leaf(node, CIRCLE_ATTRIBUTES)
        cx = parse_size(get_attribute_with_default(node, 'cx'))
        cy = parse_size(get_attribute_with_default(node, 'cy'))
        r = parse_size(get_attribute_with_default(node, 'r'))
        fill, stroke, stroke_width = self._paint(node)
        return Circle(cx, cy, r, fill, stroke, stroke_width)

    def _parse_group(self, node: Node) -> Group:
        check_attributes(node, GROUP_ATTRIBUTES)
        style_values = parse_style(node.get_attribute('style', ''))

        fill_value = style_values.get('fill', get_attribute_with_default(node, 'fill'))
        fill = parse_color(fill_value)
        if 'fill-opacity' in style_values and not fill.is_transparent:
            fill = apply_opacity(fill, style_values['fill-opacity'])
        self.palette.add(fill)

        stroke = self._color(style_values.get('stroke', get_attribute_with_default(node, 'stroke')))
        stroke_width = None
        if 'stroke-width' in node.attributes:
            stroke_width = parse_positive_size(node.attributes['stroke-width'], 'stroke-width')
        visible = style_values.get('display', get_attribute_with_default(node, 'display')) != 'none'

        style = Style(fill, stroke, stroke_width, visible)
        return Group(style, tuple(self._parse_children(node)))


def build_image(root: Node) -> Image:
    return DocumentAssembler().assemble(root)


def load_image(path: str) -> Image:
    return build_image(parse_svg_file(path))


def load_image_string(data: str) -> Image:
    return build_image(parse_svg_string(data))
