from __future__ import annotations
import logging

from colors import Color
from config import RenderConfig
from drawing_context import DrawingContext, TransformMatrix
from flattener import CurveSegment, LineSegment, Segment, resolve_path
from geometry import Point, circle_points
from shapes import Circle, Element, Group, Image, Path, Polyline, Rectangle
from sinks import DrawingSink, DrawMode
from triangulator import triangulate_fan

logger = logging.getLogger(__name__)

class Renderer:
    def __init__(self, image: Image, sink: DrawingSink, config: RenderConfig = None):
        self.image = image
        self.sink = sink
        self.config = config if config is not None else RenderConfig()
        self.context_stack = [DrawingContext(self._base_transform())]

    def _base_transform(self) -> TransformMatrix:
        view_box = self.image.view_box
        transform = TransformMatrix.identity()
        height = view_box.height

        if self.config.fit_viewbox:
            sx = self.image.width / view_box.width if view_box.width else 1.0
            sy = self.image.height / view_box.height if view_box.height else 1.0
            transform = TransformMatrix.scale(sx, sy).multiply(
                TransformMatrix.translate(-view_box.min_x, -view_box.min_y))
            height = self.image.height

        if self.config.flip_y:
            transform = TransformMatrix.flip_y(height).multiply(transform)

        return transform

    def _get_current_context(self) -> DrawingContext:
        return self.context_stack[-1]

    def _push_context(self):
        new_ctx = self._get_current_context().push()
        self.context_stack.append(new_ctx)

    def _pop_context(self):
        if len(self.context_stack) > 1:
            self.context_stack.pop()

    def _to_sink(self, point: Point) -> tuple[float, float]:
        return self._get_current_context().transform.transform_point(point.x, point.y)

    def _use_color(self, mode: DrawMode, color: Color) -> bool:
        if color.is_transparent:
            return False
        self.sink.set_draw_mode(mode)
        self.sink.set_color(*color.to_floats())
        return True

    def render(self):
        logger.debug("Rendering %d element(s) with %r", len(self.image.elements), self.config)
        self.sink.begin_batch()
        for element in self.image.elements:
            self._render_element(element)
        self.sink.end_batch()

    def _render_element(self, element: Element):
        if isinstance(element, Rectangle):
            self._render_rect(element)
        elif isinstance(element, Path):
            self._render_path(element)
        elif isinstance(element, Polyline):
            self._render_polyline(element)
        elif isinstance(element, Circle):
            self._render_circle(element)
        elif isinstance(element, Group):
            self._render_group(element)
        else:
            raise TypeError(f"Unsupported element: {element!r}")

    def _render_group(self, group: Group):
        self._push_context()
        ctx = self._get_current_context()
        ctx.apply_style(group.style)

        if ctx.visible:
            for element in group.elements:
                self._render_element(element)
        else:
            logger.debug("Skipping hidden group with %d element(s)", len(group.elements))

        self._pop_context()

    def _render_rect(self, rect: Rectangle):
        ctx = self._get_current_context()

        x0, y0 = self._to_sink(Point(rect.x, rect.y))
        x1, y1 = self._to_sink(Point(rect.x + rect.width, rect.y + rect.height))
        x, y = min(x0, x1), min(y0, y1)
        width, height = abs(x1 - x0), abs(y1 - y0)

        if self._use_color(DrawMode.FILLED, ctx.resolve_fill(rect.fill)):
            self.sink.rect(x, y, width, height)

        if self._use_color(DrawMode.LINE, ctx.resolve_stroke(rect.stroke)):
            self.sink.rect(x, y, width, height)

    def _fill_fan(self, vertices: list[Point]):
        transform = self._get_current_context().transform
        for a, b, c in triangulate_fan([transform.apply(v) for v in vertices]):
            self.sink.triangle(a.x, a.y, b.x, b.y, c.x, c.y)

    def _stroke_polyline(self, points: list[Point]):
        transformed = [self._to_sink(p) for p in points]
        for (x0, y0), (x1, y1) in zip(transformed, transformed[1:]):
            self.sink.line(x0, y0, x1, y1)

    def _stroke_segment(self, segment: Segment):
        if isinstance(segment, LineSegment):
            x0, y0 = self._to_sink(segment.start)
            x1, y1 = self._to_sink(segment.end)
            self.sink.line(x0, y0, x1, y1)
        elif isinstance(segment, CurveSegment):
            segments = self.config.curve_segments
            if self.sink.supports_curves:
                x0, y0 = self._to_sink(segment.start)
                c1x, c1y = self._to_sink(segment.c1)
                c2x, c2y = self._to_sink(segment.c2)
                x1, y1 = self._to_sink(segment.end)
                self.sink.curve(x0, y0, c1x, c1y, c2x, c2y, x1, y1, segments)
            else:
                self._stroke_polyline([segment.start] + segment.sample(segments))

    def _render_path(self, path: Path):
        ctx = self._get_current_context()
        resolved = resolve_path(path, self.config.curve_segments)

        if self._use_color(DrawMode.FILLED, ctx.resolve_fill(path.fill)):
            for subpath in resolved:
                self._fill_fan(list(subpath.vertices))

        if self._use_color(DrawMode.LINE, ctx.resolve_stroke(path.stroke)):
            for subpath in resolved:
                for segment in subpath.segments:
                    self._stroke_segment(segment)
                self._stroke_segment(subpath.closing_segment())

    def _render_polyline(self, polyline: Polyline):
        ctx = self._get_current_context()
        points = list(polyline.points)

        if self._use_color(DrawMode.FILLED, ctx.resolve_fill(polyline.fill)):
            self._fill_fan(points)

        if self._use_color(DrawMode.LINE, ctx.resolve_stroke(polyline.stroke)):
            self._stroke_polyline(points)

    def _render_circle(self, circle: Circle):
        if circle.r == 0:
            return

        ctx = self._get_current_context()
        points = circle_points(circle.cx, circle.cy, circle.r, max(self.config.curve_segments, 3))

        if self._use_color(DrawMode.FILLED, ctx.resolve_fill(circle.fill)):
            self._fill_fan(points)

        if self._use_color(DrawMode.LINE, ctx.resolve_stroke(circle.stroke)):
            self._stroke_polyline(points + [points[0]])


def render_image(image: Image, sink: DrawingSink, config: RenderConfig = None) -> DrawingSink:
    Renderer(image, sink, config).render()
    return sink
