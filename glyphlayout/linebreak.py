"""Line break detection: soft and hard break opportunities in text.

Offsets are character indices just after the breaking character.
"""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass
from typing import Iterator

_MANDATORY = frozenset("\n\x0b\x0c\r\x85\u2028\u2029")
_SPACES = frozenset(" \u200b")
_HYPHENS = frozenset("-\u2010")
_CLOSING = frozenset(")]}\u3001\u3002\uff0c\uff09\u300d\u300f\uff01\uff1f\uff1a\uff1b!?,.:;")
_OPENING = frozenset("([{\uff08\u300c\u300e")


@dataclass(frozen=True)
class LineBreak:
    """A break opportunity after ``offset`` characters; ``hard`` if mandatory."""

    offset: int
    hard: bool = False


def _is_ideographic(c: str) -> bool:
    cp = ord(c)
    return (
        0x2E80 <= cp <= 0x9FFF
        or 0xAC00 <= cp <= 0xD7AF
        or 0xF900 <= cp <= 0xFAFF
        or 0xFF00 <= cp <= 0xFFEF
        or 0x20000 <= cp <= 0x3FFFF
    )


def _break_between(a: str, b: str) -> bool | None:
    """None for no break, False for soft, True for hard."""
    if a == "\r" and b == "\n":
        return None
    if a in _MANDATORY:
        return True
    if b in _SPACES or b in _MANDATORY:
        return None
    if a in _SPACES:
        return False
    if b in _CLOSING or a in _OPENING:
        return None
    if _is_ideographic(a) or _is_ideographic(b):
        return False
    if a in _HYPHENS and not unicodedata.category(b).startswith("N"):
        return False
    return None


def unicode_line_breaks(text: str) -> Iterator[LineBreak]:
    """Yield break opportunities; the end of text is always a hard break."""
    for offset, (a, b) in enumerate(zip(text, text[1:]), start=1):
        kind = _break_between(a, b)
        if kind is not None:
            yield LineBreak(offset, kind)
    yield LineBreak(len(text), True)


def _any_char_line_breaks(text: str) -> Iterator[LineBreak]:
    breaks = unicode_line_breaks(text)
    current = next(breaks, None)
    for offset in range(1, len(text) + 1):
        while current is not None and current.offset < offset:
            current = next(breaks, None)
        hard = current is not None and current.hard and current.offset == offset
        yield LineBreak(offset, hard)


class BuiltInLineBreaker(enum.Enum):
    """Built-in line breaking strategies; UNICODE is the default."""

    UNICODE = "unicode"
    ANY_CHAR = "any_char"

    def line_breaks(self, text: str) -> Iterator[LineBreak]:
        if self is BuiltInLineBreaker.UNICODE:
            return unicode_line_breaks(text)
        return _any_char_line_breaks(text)


def eol_line_break(char: str, line_breaker) -> LineBreak | None:
    """Whether ``char`` at the end of a text is itself a true break."""
    for follower in (" ", "a"):
        first = next(iter(line_breaker.line_breaks(char + follower)), None)
        if first is not None and first.offset == 1:
            return first
    return None