"""Section inputs and positioned glyph outputs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from glyphlayout.font import Glyph, PxScale


@dataclass(frozen=True)
class SectionGeometry:
    """Screen position and (width, height) bounds; unbounded by default."""

    screen_position: tuple[float, float] = (0.0, 0.0)
    bounds: tuple[float, float] = (math.inf, math.inf)


@dataclass(frozen=True)
class SectionText:
    """Text laid out with one font and scale."""

    text: str = ""
    scale: PxScale = field(default_factory=lambda: PxScale(16.0))
    font_id: int = 0


@dataclass
class SectionGlyph:
    """A positioned glyph and where it came from."""

    section_index: int
    byte_index: int
    glyph: Glyph
    font_id: int = 0