"""Built-in single-line and wrapping glyph layouts."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from glyphlayout.align import HorizontalAlign, VerticalAlign
from glyphlayout.characters import characters
from glyphlayout.font import Font, Point, Rect
from glyphlayout.linebreak import BuiltInLineBreaker
from glyphlayout.lines import lines
from glyphlayout.positioner import GlyphChange, GlyphPositioner
from glyphlayout.section import SectionGeometry, SectionGlyph, SectionText
from glyphlayout.words import words


class LayoutKind(enum.Enum):
    """How text is broken into lines."""

    SINGLE_LINE = "single_line"
    WRAP = "wrap"


def _moved(sg: SectionGlyph, dx: float, dy: float) -> SectionGlyph:
    glyph = replace(sg.glyph, position=sg.glyph.position + Point(dx, dy))
    return replace(sg, glyph=glyph)


@dataclass(frozen=True)
class Layout(GlyphPositioner):
    """A glyph positioner with a line breaking style and alignment.

    ``SINGLE_LINE`` lays out one line, ended by a hard break or the width
    bound. ``WRAP`` starts a new line on hard breaks and when a word would
    cross the width bound. The default is a left/top aligned wrap.
    """

    kind: LayoutKind = LayoutKind.WRAP
    line_breaker: object = BuiltInLineBreaker.UNICODE
    h_align: HorizontalAlign = HorizontalAlign.LEFT
    v_align: VerticalAlign = VerticalAlign.TOP

    @classmethod
    def default_single_line(cls) -> "Layout":
        return cls(kind=LayoutKind.SINGLE_LINE)

    @classmethod
    def default_wrap(cls) -> "Layout":
        return cls(kind=LayoutKind.WRAP)

    def with_h_align(self, h_align: HorizontalAlign) -> "Layout":
        return replace(self, h_align=h_align)

    def with_v_align(self, v_align: VerticalAlign) -> "Layout":
        return replace(self, v_align=v_align)

    def with_line_breaker(self, line_breaker) -> "Layout":
        return replace(self, line_breaker=line_breaker)

    def _lines(self, fonts, sections, bound_w):
        return lines(words(characters(fonts, sections, self.line_breaker)), bound_w)

    def calculate_glyphs(
        self,
        fonts: Sequence[Font],
        geometry: SectionGeometry,
        sections: Sequence[SectionText],
    ) -> list[SectionGlyph]:
        screen_position = geometry.screen_position
        bound_w, bound_h = geometry.bounds

        if self.kind is LayoutKind.SINGLE_LINE:
            first = next(self._lines(fonts, sections, bound_w), None)
            if first is None:
                return []
            return first.aligned_on_screen(screen_position, self.h_align, self.v_align)

        out: list[SectionGlyph] = []
        screen_x, screen_y = screen_position
        caret_y = screen_y
        v_align_top = self.v_align is VerticalAlign.TOP

        for line in self._lines(fonts, sections, bound_w):
            # top alignment can bound check and stop early
            if v_align_top and caret_y >= screen_y + bound_h:
                break
            line_height = line.line_height()
            out.extend(
                line.aligned_on_screen((screen_x, caret_y), self.h_align, VerticalAlign.TOP)
            )
            caret_y += line_height

        if not out or v_align_top:
            return out

        total = caret_y - screen_y
        shift_up = total / 2.0 if self.v_align is VerticalAlign.CENTER else total
        min_x, max_x = self.h_align.x_bounds(screen_x, bound_w)
        min_y, max_y = self.v_align.y_bounds(screen_y, bound_h)

        kept: list[SectionGlyph] = []
        for sg in out:
            sg = _moved(sg, 0.0, -shift_up)
            sfont = fonts[sg.font_id].as_scaled(sg.glyph.scale)
            h_advance = sfont.h_advance(sg.glyph.id)
            h_side_bearing = sfont.h_side_bearing(sg.glyph.id)
            height = sfont.height()
            pos = sg.glyph.position
            if (
                pos.x - h_side_bearing <= max_x
                and pos.x + h_advance >= min_x
                and pos.y - height <= max_y
                and pos.y + height >= min_y
            ):
                kept.append(sg)
        return kept

    def bounds_rect(self, geometry: SectionGeometry) -> Rect:
        screen_x, screen_y = geometry.screen_position
        bound_w, bound_h = geometry.bounds
        x_min, x_max = self.h_align.x_bounds(screen_x, bound_w)
        y_min, y_max = self.v_align.y_bounds(screen_y, bound_h)
        return Rect(Point(x_min, y_min), Point(x_max, y_max))

    def recalculate_glyphs(
        self,
        previous: Iterable[SectionGlyph],
        change: GlyphChange,
        fonts: Sequence[Font],
        geometry: SectionGeometry,
        sections: Sequence[SectionText],
    ) -> list[SectionGlyph]:
        old = change.geometry
        if old is not None and old.bounds == geometry.bounds:
            dx = geometry.screen_position[0] - old.screen_position[0]
            dy = geometry.screen_position[1] - old.screen_position[1]
            return [_moved(sg, dx, dy) for sg in previous]
        return self.calculate_glyphs(fonts, geometry, sections)