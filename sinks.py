from __future__ import annotations
import logging
import math
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np
from PIL import Image

from colors import blend_colors
from config import CURVE_SEGMENTS
from geometry import Point, clamp, sample_cubic

logger = logging.getLogger(__name__)


class DrawMode(Enum):
    FILLED = 'Filled'
    LINE = 'Line'


class DrawingSink(ABC):
    # when False the renderer strokes curves as lines through their samples
    supports_curves = True

    @abstractmethod
    def begin_batch(self):
        ...

    @abstractmethod
    def end_batch(self):
        ...

    @abstractmethod
    def set_color(self, r: float, g: float, b: float, a: float):
        ...

    @abstractmethod
    def set_draw_mode(self, mode: DrawMode):
        ...

    @abstractmethod
    def line(self, x0: float, y0: float, x1: float, y1: float):
        ...

    @abstractmethod
    def rect(self, x: float, y: float, width: float, height: float):
        ...

    @abstractmethod
    def curve(self, x0: float, y0: float, c1x: float, c1y: float,
              c2x: float, c2y: float, x1: float, y1: float, segments: int):
        ...

    @abstractmethod
    def triangle(self, x0: float, y0: float, x1: float, y1: float, x2: float, y2: float):
        ...


class RecordingSink(DrawingSink):
    def __init__(self, supports_curves: bool = True):
        self.supports_curves = supports_curves
        self.calls: list[tuple] = []

    def begin_batch(self):
        self.calls.append(('begin_batch',))

    def end_batch(self):
        self.calls.append(('end_batch',))

    def set_color(self, r, g, b, a):
        self.calls.append(('set_color', r, g, b, a))

    def set_draw_mode(self, mode):
        self.calls.append(('set_draw_mode', mode))

    def line(self, x0, y0, x1, y1):
        self.calls.append(('line', x0, y0, x1, y1))

    def rect(self, x, y, width, height):
        self.calls.append(('rect', x, y, width, height))

    def curve(self, x0, y0, c1x, c1y, c2x, c2y, x1, y1, segments):
        self.calls.append(('curve', x0, y0, c1x, c1y, c2x, c2y, x1, y1, segments))

    def triangle(self, x0, y0, x1, y1, x2, y2):
        self.calls.append(('triangle', x0, y0, x1, y1, x2, y2))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def of(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


class RasterSink(DrawingSink):
    def __init__(self, width: int, height: int, background: tuple[int, int, int] = (255, 255, 255)):
        self.width = width
        self.height = height

        self.buffer = np.zeros((height, width, 4), dtype=np.uint8)
        self.buffer[:, :, 0] = background[0]
        self.buffer[:, :, 1] = background[1]
        self.buffer[:, :, 2] = background[2]
        self.buffer[:, :, 3] = 255

        self.color = (0, 0, 0, 255)
        self.mode = DrawMode.LINE
        self.batches = 0

    def begin_batch(self):
        self.batches += 1

    def end_batch(self):
        logger.debug("Finished raster batch %d", self.batches)

    def set_color(self, r, g, b, a):
        self.color = tuple(int(round(clamp(v, 0.0, 1.0) * 255)) for v in (r, g, b, a))

    def set_draw_mode(self, mode):
        self.mode = mode

    def _set_pixel(self, x: int, y: int):
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return

        current = tuple(int(v) for v in self.buffer[y, x, :])
        self.buffer[y, x, :] = blend_colors(self.color, current)

    def _blend_mask(self, x0: int, y0: int, mask: np.ndarray):
        if not mask.any():
            return

        h, w = mask.shape
        region = self.buffer[y0:y0 + h, x0:x0 + w].astype(np.float64)

        fg = np.array(self.color[:3], dtype=np.float64)
        fg_alpha = self.color[3] / 255.0
        bg_alpha = region[:, :, 3] / 255.0

        out_alpha = fg_alpha + bg_alpha * (1 - fg_alpha)
        safe_alpha = np.where(out_alpha == 0, 1.0, out_alpha)
        out_rgb = (fg * fg_alpha + region[:, :, :3] * (bg_alpha * (1 - fg_alpha))[:, :, None]) / safe_alpha[:, :, None]

        blended = np.empty_like(region)
        blended[:, :, :3] = out_rgb
        blended[:, :, 3] = out_alpha * 255
        region = np.where(mask[:, :, None], blended, region)

        self.buffer[y0:y0 + h, x0:x0 + w] = np.clip(np.rint(region), 0, 255).astype(np.uint8)

    def _pixel_grid(self, min_x: float, min_y: float, max_x: float, max_y: float):
        x0 = max(0, int(math.floor(min_x)))
        y0 = max(0, int(math.floor(min_y)))
        x1 = min(self.width, int(math.ceil(max_x)) + 1)
        y1 = min(self.height, int(math.ceil(max_y)) + 1)
        if x0 >= x1 or y0 >= y1:
            return None

        # sample at pixel centers
        ys, xs = np.mgrid[y0:y1, x0:x1]
        return x0, y0, xs + 0.5, ys + 0.5

    def line(self, x0, y0, x1, y1):
        dx = x1 - x0
        dy = y1 - y0
        steps = int(max(abs(dx), abs(dy)))
        if steps == 0:
            self._set_pixel(int(math.floor(x0)), int(math.floor(y0)))
            return

        x_inc = dx / steps
        y_inc = dy / steps
        x, y = x0, y0
        for _ in range(steps + 1):
            self._set_pixel(int(math.floor(x)), int(math.floor(y)))
            x += x_inc
            y += y_inc

    def rect(self, x, y, width, height):
        if self.mode == DrawMode.LINE:
            self.line(x, y, x + width, y)
            self.line(x + width, y, x + width, y + height)
            self.line(x + width, y + height, x, y + height)
            self.line(x, y + height, x, y)
            return

        grid = self._pixel_grid(x, y, x + width, y + height)
        if grid is None:
            return
        gx, gy, xs, ys = grid
        mask = (xs >= x) & (xs < x + width) & (ys >= y) & (ys < y + height)
        self._blend_mask(gx, gy, mask)

    def curve(self, x0, y0, c1x, c1y, c2x, c2y, x1, y1, segments=CURVE_SEGMENTS):
        previous = Point(x0, y0)
        for sample in sample_cubic(previous, Point(c1x, c1y), Point(c2x, c2y), Point(x1, y1), segments):
            self.line(previous.x, previous.y, sample.x, sample.y)
            previous = sample

    def triangle(self, x0, y0, x1, y1, x2, y2):
        if self.mode == DrawMode.LINE:
            self.line(x0, y0, x1, y1)
            self.line(x1, y1, x2, y2)
            self.line(x2, y2, x0, y0)
            return

        area = (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)
        if area == 0:
            return

        grid = self._pixel_grid(min(x0, x1, x2), min(y0, y1, y2), max(x0, x1, x2), max(y0, y1, y2))
        if grid is None:
            return
        gx, gy, xs, ys = grid

        w0 = (x2 - x1) * (ys - y1) - (y2 - y1) * (xs - x1)
        w1 = (x0 - x2) * (ys - y2) - (y0 - y2) * (xs - x2)
        w2 = (x1 - x0) * (ys - y0) - (y1 - y0) * (xs - x0)
        if area > 0:
            mask = (w0 >= 0) & (w1 >= 0) & (w2 >= 0)
        else:
            mask = (w0 <= 0) & (w1 <= 0) & (w2 <= 0)
        self._blend_mask(gx, gy, mask)

    def get_rgb_buffer(self) -> np.ndarray:
        return self.buffer[:, :, 0:3].copy()

    def get_rgba_buffer(self) -> np.ndarray:
        return self.buffer.copy()

    def save(self, path: str):
        Image.fromarray(self.get_rgb_buffer()).save(path)
