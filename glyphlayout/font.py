"""Geometry primitives and a simple metric-table font model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class Point:
    """A 2D point in pixels."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    min: Point
    max: Point

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y


@dataclass(frozen=True)
class PxScale:
    """Pixel scale; ``PxScale(20)`` scales uniformly in both axes."""

    x: float
    y: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        y = self.x if self.y is None else float(self.y)
        object.__setattr__(self, "y", y)


@dataclass
class Glyph:
    """A glyph id with a scale and a position."""

    id: int
    scale: PxScale
    position: Point = field(default_factory=Point)


class Font:
    """A font described by metric tables in font units.

    Without an explicit ``glyph_ids`` table, a character's glyph id is its
    code point. Missing glyphs map to id 0.
    """

    def __init__(
        self,
        *,
        units_per_em: float = 1000.0,
        ascent: float = 800.0,
        descent: float = -200.0,
        line_gap: float = 0.0,
        glyph_ids: Mapping[str, int] | None = None,
        advances: Mapping[int, float] | None = None,
        side_bearings: Mapping[int, float] | None = None,
        kerning: Mapping[tuple[int, int], float] | None = None,
        default_advance: float = 500.0,
    ) -> None:
        if ascent - descent <= 0:
            raise ValueError("ascent - descent must be positive")
        self._units_per_em = float(units_per_em)
        self._ascent = float(ascent)
        self._descent = float(descent)
        self._line_gap = float(line_gap)
        self._glyph_ids = dict(glyph_ids) if glyph_ids is not None else None
        self._advances = dict(advances or {})
        self._side_bearings = dict(side_bearings or {})
        self._kerning = dict(kerning or {})
        self._default_advance = float(default_advance)

    def glyph_id(self, char: str) -> int:
        if self._glyph_ids is None:
            return ord(char)
        return self._glyph_ids.get(char, 0)

    def units_per_em(self) -> float:
        return self._units_per_em

    def ascent_unscaled(self) -> float:
        return self._ascent

    def descent_unscaled(self) -> float:
        return self._descent

    def line_gap_unscaled(self) -> float:
        return self._line_gap

    def h_advance_unscaled(self, glyph_id: int) -> float:
        return self._advances.get(glyph_id, self._default_advance)

    def h_side_bearing_unscaled(self, glyph_id: int) -> float:
        return self._side_bearings.get(glyph_id, 0.0)

    def kern_unscaled(self, first: int, second: int) -> float:
        return self._kerning.get((first, second), 0.0)

    def as_scaled(self, scale: PxScale | float) -> "ScaledFont":
        if not isinstance(scale, PxScale):
            scale = PxScale(scale)
        return ScaledFont(self, scale)


@dataclass(frozen=True)
class ScaledFont:
    """A font paired with a pixel scale; metrics are in pixels."""

    font: Font
    scale: PxScale

    @property
    def _height_unscaled(self) -> float:
        return self.font.ascent_unscaled() - self.font.descent_unscaled()

    @property
    def _h_factor(self) -> float:
        return self.scale.x / self._height_unscaled

    @property
    def _v_factor(self) -> float:
        return self.scale.y / self._height_unscaled

    def ascent(self) -> float:
        return self._v_factor * self.font.ascent_unscaled()

    def descent(self) -> float:
        return self._v_factor * self.font.descent_unscaled()

    def line_gap(self) -> float:
        return self._v_factor * self.font.line_gap_unscaled()

    def height(self) -> float:
        return self.ascent() - self.descent()

    def h_advance(self, glyph_id: int) -> float:
        return self._h_factor * self.font.h_advance_unscaled(glyph_id)

    def h_side_bearing(self, glyph_id: int) -> float:
        return self._h_factor * self.font.h_side_bearing_unscaled(glyph_id)

    def kern(self, first: int, second: int) -> float:
        return self._h_factor * self.font.kern_unscaled(first, second)

    def scaled_glyph(self, char: str) -> Glyph:
        return Glyph(self.font.glyph_id(char), self.scale, Point(0.0, 0.0))