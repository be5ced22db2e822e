"""Grouping of characters into words ending at line break opportunities."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from glyphlayout.characters import Character
from glyphlayout.font import Point, ScaledFont
from glyphlayout.section import SectionGlyph


@dataclass(frozen=True)
class VMetrics:
    """Vertical metrics in pixels."""

    ascent: float = 0.0
    descent: float = 0.0
    line_gap: float = 0.0

    def height(self) -> float:
        return self.ascent - self.descent + self.line_gap

    def max(self, other: "VMetrics") -> "VMetrics":
        """The metrics with the greater height, preferring ``self`` on ties."""
        return other if other.height() > self.height() else self

    @classmethod
    def from_scaled_font(cls, scaled_font: ScaledFont) -> "VMetrics":
        return cls(scaled_font.ascent(), scaled_font.descent(), scaled_font.line_gap())


@dataclass
class Word:
    """Glyphs up to and including a line break, positioned from (0, 0)."""

    glyphs: list[SectionGlyph] = field(default_factory=list)
    layout_width: float = 0.0
    layout_width_no_trail: float = 0.0
    max_v_metrics: VMetrics = field(default_factory=VMetrics)
    hard_break: bool = False


def words(characters: Iterable[Character]) -> Iterator[Word]:
    """Group characters into words; the last word always ends in a hard break."""
    chars = iter(characters)
    pending = next(chars, None)

    while pending is not None:
        glyphs: list[SectionGlyph] = []
        caret = 0.0
        caret_no_trail = 0.0
        last_glyph_id: int | None = None
        max_v_metrics = VMetrics()
        hard_break = False

        while pending is not None:
            ch = pending
            pending = next(chars, None)

            max_v_metrics = max_v_metrics.max(VMetrics.from_scaled_font(ch.scaled_font))

            if last_glyph_id is not None:
                caret += ch.scaled_font.kern(last_glyph_id, ch.glyph.id)
            last_glyph_id = ch.glyph.id

            if not ch.control:
                advance = ch.scaled_font.h_advance(ch.glyph.id)
                glyph = replace(ch.glyph, position=Point(caret, 0.0))
                glyphs.append(
                    SectionGlyph(
                        section_index=ch.section_index,
                        byte_index=ch.byte_index,
                        glyph=glyph,
                        font_id=ch.font_id,
                    )
                )
                caret += advance
                if not ch.whitespace:
                    caret_no_trail = caret

            if ch.line_break is not None:
                # the end of all sections acts as a hard break
                if ch.line_break.hard or pending is None:
                    hard_break = True
                break

        yield Word(
            glyphs=glyphs,
            layout_width=caret,
            layout_width_no_trail=caret_no_trail,
            max_v_metrics=max_v_metrics,
            hard_break=hard_break,
        )