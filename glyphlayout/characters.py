"""Per-character layout information drawn from sections of text."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from glyphlayout.font import Font, Glyph, ScaledFont
from glyphlayout.linebreak import LineBreak, eol_line_break
from glyphlayout.section import SectionText

# Characters Python treats as whitespace that lack the Unicode White_Space property.
_NOT_WHITE_SPACE = frozenset("\x1c\x1d\x1e\x1f")


@dataclass(frozen=True)
class Character:
    """A single character with its unpositioned glyph and break information."""

    glyph: Glyph
    scaled_font: ScaledFont
    font_id: int
    line_break: LineBreak | None
    control: bool
    whitespace: bool
    section_index: int
    byte_index: int


def _is_control(c: str) -> bool:
    return unicodedata.category(c) == "Cc"


def _is_whitespace(c: str) -> bool:
    return c.isspace() and c not in _NOT_WHITE_SPACE


def _valid_section(section: SectionText) -> bool:
    return section.scale.x > 0.0 and section.scale.y > 0.0


def _section_characters(
    fonts: Sequence[Font],
    section_index: int,
    section: SectionText,
    line_breaker,
) -> Iterator[Character]:
    text = section.text
    breaks = iter(line_breaker.line_breaks(text))
    next_break: LineBreak | None = None
    scaled_font = fonts[section.font_id].as_scaled(section.scale)

    for index, c in enumerate(text):
        if next_break is None or next_break.offset <= index:
            while True:
                candidate = next(breaks, None)
                if candidate is None or candidate.offset > index:
                    next_break = candidate
                    break

        line_break = (
            next_break if next_break is not None and next_break.offset == index + 1 else None
        )
        if line_break is not None and index + 1 == len(text):
            # the end of a text is not itself a break unless the character is one
            line_break = eol_line_break(c, line_breaker)

        yield Character(
            glyph=scaled_font.scaled_glyph(c),
            scaled_font=scaled_font,
            font_id=section.font_id,
            line_break=line_break,
            control=_is_control(c),
            whitespace=_is_whitespace(c),
            section_index=section_index,
            byte_index=index,
        )


def characters(
    fonts: Sequence[Font],
    sections: Iterable[SectionText],
    line_breaker,
) -> Iterator[Character]:
    """Yield every character of every section with a positive scale."""
    for section_index, section in enumerate(sections):
        if _valid_section(section):
            yield from _section_characters(fonts, section_index, section, line_breaker)