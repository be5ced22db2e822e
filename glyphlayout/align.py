"""Horizontal and vertical alignment preferences for positioning and bounds."""

from __future__ import annotations

import enum
import math


class HorizontalAlign(enum.Enum):
    """Horizontal alignment relative to the render position."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    def x_bounds(self, screen_x: float, bound_w: float) -> tuple[float, float]:
        """Return the (min, max) x extent, floored and ceiled to whole pixels."""
        if self is HorizontalAlign.LEFT:
            low, high = screen_x, screen_x + bound_w
        elif self is HorizontalAlign.CENTER:
            low, high = screen_x - bound_w / 2.0, screen_x + bound_w / 2.0
        else:
            low, high = screen_x - bound_w, screen_x
        return _floor(low), _ceil(high)


class VerticalAlign(enum.Enum):
    """Vertical alignment relative to the render position."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"

    def y_bounds(self, screen_y: float, bound_h: float) -> tuple[float, float]:
        """Return the (min, max) y extent, floored and ceiled to whole pixels."""
        if self is VerticalAlign.TOP:
            low, high = screen_y, screen_y + bound_h
        elif self is VerticalAlign.CENTER:
            low, high = screen_y - bound_h / 2.0, screen_y + bound_h / 2.0
        else:
            low, high = screen_y - bound_h, screen_y
        return _floor(low), _ceil(high)


def _floor(value: float) -> float:
    return value if math.isinf(value) or math.isnan(value) else float(math.floor(value))


def _ceil(value: float) -> float:
    return value if math.isinf(value) or math.isnan(value) else float(math.ceil(value))