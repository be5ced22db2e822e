"""The glyph positioner interface."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Iterable, Sequence

from glyphlayout.font import Font, Rect
from glyphlayout.section import SectionGeometry, SectionGlyph, SectionText


@dataclass(frozen=True)
class GlyphChange:
    """What changed since a previous layout; ``geometry`` holds the old one
    when only the geometry changed, otherwise the change is unknown."""

    geometry: SectionGeometry | None = None


class GlyphPositioner(abc.ABC):
    """Computes positioned glyphs for sections of text."""

    @abc.abstractmethod
    def calculate_glyphs(
        self,
        fonts: Sequence[Font],
        geometry: SectionGeometry,
        sections: Sequence[SectionText],
    ) -> list[SectionGlyph]:
        """Lay out glyphs; equal inputs must give equal results."""

    @abc.abstractmethod
    def bounds_rect(self, geometry: SectionGeometry) -> Rect:
        """Screen rectangle for the layout of ``geometry``."""

    def recalculate_glyphs(
        self,
        previous: Iterable[SectionGlyph],
        change: GlyphChange,
        fonts: Sequence[Font],
        geometry: SectionGeometry,
        sections: Sequence[SectionText],
    ) -> list[SectionGlyph]:
        """Recompute after a change; by default a full calculation."""
        return self.calculate_glyphs(fonts, geometry, sections)