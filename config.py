from __future__ import annotations

from dataclasses import dataclass

from errors import ValidationError

# Sample count for every Bézier and arc segment
CURVE_SEGMENTS = 50


@dataclass(frozen=True)
class RenderConfig:
    curve_segments: int = CURVE_SEGMENTS

    # Apply height - y to every emitted coordinate (y-up targets)
    flip_y: bool = False

    # Map the view box onto the image width x height
    fit_viewbox: bool = False

    def __post_init__(self):
        if self.curve_segments < 1:
            raise ValidationError(f"Invalid curve segment count: {self.curve_segments}",
                                  str(self.curve_segments))
