"""Grouping of words into lines limited by a width bound."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from glyphlayout.align import HorizontalAlign, VerticalAlign
from glyphlayout.font import Point
from glyphlayout.section import SectionGlyph
from glyphlayout.words import VMetrics, Word

_F32_EPSILON = 1.1920929e-07


def _relative_eq(a: float, b: float) -> bool:
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    diff = abs(a - b)
    if diff <= _F32_EPSILON:
        return True
    return diff <= max(abs(a), abs(b)) * _F32_EPSILON


def _shifted(sg: SectionGlyph, dx: float, dy: float) -> SectionGlyph:
    glyph = replace(sg.glyph, position=sg.glyph.position + Point(dx, dy))
    return replace(sg, glyph=glyph)


@dataclass
class Line:
    """Glyphs of one line, positioned relative to its top-left corner."""

    glyphs: list[SectionGlyph] = field(default_factory=list)
    max_v_metrics: VMetrics = field(default_factory=VMetrics)
    rightmost: float = 0.0

    def line_height(self) -> float:
        return self.max_v_metrics.height()

    def aligned_on_screen(
        self,
        screen_position: tuple[float, float],
        h_align: HorizontalAlign,
        v_align: VerticalAlign,
    ) -> list[SectionGlyph]:
        """Return the glyphs moved to the screen position and aligned."""
        if not self.glyphs:
            return []

        screen_x, screen_y = screen_position
        if h_align is HorizontalAlign.LEFT:
            x = screen_x
        else:
            shift_left = self.rightmost
            if h_align is HorizontalAlign.CENTER:
                shift_left /= 2.0
            x = screen_x - shift_left

        if v_align is VerticalAlign.TOP:
            y = screen_y
        elif v_align is VerticalAlign.CENTER:
            y = screen_y - self.line_height() / 2.0
        else:
            y = screen_y - self.line_height()

        return [_shifted(sg, x, y) for sg in self.glyphs]


def lines(words: Iterable[Word], width_bound: float) -> Iterator[Line]:
    """Yield lines of words; each line holds at least one word even if too wide."""
    it = iter(words)
    pending = next(it, None)

    while pending is not None:
        caret_x = 0.0
        caret_y = 0.0
        line = Line()
        progressed = False

        while pending is not None:
            word = pending
            # trailing spaces are dropped when wrapping, but kept before a hard break
            wrap_width = word.layout_width if word.hard_break else word.layout_width_no_trail
            word_right = caret_x + wrap_width
            in_bounds = word_right < width_bound or _relative_eq(word_right, width_bound)

            if not in_bounds and progressed:
                break

            pending = next(it, None)
            progressed = True
            line.rightmost = word_right

            if (not line.glyphs or word.glyphs) and (
                word.max_v_metrics.height() > line.max_v_metrics.height()
            ):
                diff_y = word.max_v_metrics.ascent - caret_y
                caret_y += diff_y
                line.glyphs = [_shifted(sg, 0.0, diff_y) for sg in line.glyphs]
                line.max_v_metrics = word.max_v_metrics

            line.glyphs.extend(_shifted(sg, caret_x, caret_y) for sg in word.glyphs)
            caret_x += word.layout_width

            if word.hard_break:
                break

        yield line