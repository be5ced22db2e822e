import math

import pytest

from glyphlayout.align import HorizontalAlign, VerticalAlign
from glyphlayout.characters import characters
from glyphlayout.font import Font, PxScale
from glyphlayout.linebreak import BuiltInLineBreaker
from glyphlayout.lines import Line, lines
from glyphlayout.section import SectionText
from glyphlayout.words import VMetrics, words

FONT = Font()


def make_lines(sections, width=math.inf, breaker=BuiltInLineBreaker.UNICODE):
    return list(lines(words(characters([FONT], sections, breaker)), width))


def text_of(line):
    return "".join(chr(sg.glyph.id) for sg in line.glyphs)


def test_unbounded_lines_split_on_hard_breaks():
    result = make_lines([SectionText("ab cd\nef", PxScale(20.0))])
    assert [text_of(line) for line in result] == ["ab cd", "ef"]


def test_width_bound_wraps_words():
    advance = FONT.as_scaled(20.0).h_advance(ord("h"))
    result = make_lines([SectionText("hello world", PxScale(20.0))], width=5.5 * advance)
    assert [text_of(line) for line in result] == ["hello ", "world"]
    assert result[0].rightmost == pytest.approx(5 * advance)


def test_word_exactly_on_bound_fits():
    advance = FONT.as_scaled(20.0).h_advance(ord("h"))
    result = make_lines([SectionText("hello world", PxScale(20.0))], width=5 * advance)
    assert [text_of(line) for line in result] == ["hello ", "world"]


def test_oversized_words_still_make_lines():
    result = make_lines([SectionText("hello world", PxScale(20.0))], width=1.0)
    assert [text_of(line) for line in result] == ["hello ", "world"]


def test_glyphs_share_largest_ascent():
    result = make_lines(
        [
            SectionText("small ", PxScale(10.0)),
            SectionText("big ", PxScale(40.0)),
            SectionText("tiny", PxScale(15.0)),
        ]
    )
    assert len(result) == 1
    ascent = FONT.as_scaled(40.0).ascent()
    assert all(sg.glyph.position.y == pytest.approx(ascent) for sg in result[0].glyphs)
    assert result[0].max_v_metrics == VMetrics.from_scaled_font(FONT.as_scaled(40.0))


def test_line_height_matches_metrics():
    line = make_lines([SectionText("abc", PxScale(20.0))])[0]
    assert line.line_height() == line.max_v_metrics.height()
    assert line.line_height() == pytest.approx(FONT.as_scaled(20.0).height())


def test_aligned_left_top_offsets_by_screen_position():
    line = make_lines([SectionText("abc", PxScale(20.0))])[0]
    placed = line.aligned_on_screen((100.0, 50.0), HorizontalAlign.LEFT, VerticalAlign.TOP)
    for before, after in zip(line.glyphs, placed):
        assert after.glyph.position.x == pytest.approx(before.glyph.position.x + 100.0)
        assert after.glyph.position.y == pytest.approx(before.glyph.position.y + 50.0)


def test_aligned_right_ends_at_screen_x():
    scaled = FONT.as_scaled(20.0)
    line = make_lines([SectionText("abc", PxScale(20.0))])[0]
    placed = line.aligned_on_screen((0.0, 0.0), HorizontalAlign.RIGHT, VerticalAlign.TOP)
    last = placed[-1].glyph
    assert last.position.x + scaled.h_advance(last.id) == pytest.approx(0.0)


def test_aligned_center_is_symmetric():
    scaled = FONT.as_scaled(20.0)
    line = make_lines([SectionText("abcd", PxScale(20.0))])[0]
    placed = line.aligned_on_screen((0.0, 0.0), HorizontalAlign.CENTER, VerticalAlign.TOP)
    left = placed[0].glyph.position.x
    last = placed[-1].glyph
    assert last.position.x + scaled.h_advance(last.id) == pytest.approx(-left)


def test_aligned_bottom_and_center_shift_up():
    line = make_lines([SectionText("ab", PxScale(20.0))])[0]
    top = line.aligned_on_screen((0.0, 0.0), HorizontalAlign.LEFT, VerticalAlign.TOP)
    center = line.aligned_on_screen((0.0, 0.0), HorizontalAlign.LEFT, VerticalAlign.CENTER)
    bottom = line.aligned_on_screen((0.0, 0.0), HorizontalAlign.LEFT, VerticalAlign.BOTTOM)
    height = line.line_height()
    assert center[0].glyph.position.y == pytest.approx(top[0].glyph.position.y - height / 2)
    assert bottom[0].glyph.position.y == pytest.approx(top[0].glyph.position.y - height)


def test_aligned_empty_line_is_empty():
    assert Line().aligned_on_screen((5.0, 5.0), HorizontalAlign.RIGHT, VerticalAlign.BOTTOM) == []


def test_no_lines_from_empty_input():
    assert make_lines([]) == []