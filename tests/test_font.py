import pytest

from glyphlayout.font import Font, Glyph, Point, PxScale, Rect


def test_point_add():
    assert Point(1.0, 2.0) + Point(3.0, 4.0) == Point(4.0, 6.0)


def test_rect_size():
    r = Rect(Point(1.0, 2.0), Point(4.0, 8.0))
    assert r.width() == 3.0
    assert r.height() == 6.0


def test_pxscale_uniform():
    s = PxScale(20)
    assert (s.x, s.y) == (20.0, 20.0)
    assert PxScale(10, 30).y == 30.0


def test_default_glyph_ids_are_code_points():
    f = Font()
    assert f.glyph_id("A") == ord("A")


def test_explicit_glyph_table_missing_is_zero():
    f = Font(glyph_ids={"a": 5})
    assert f.glyph_id("a") == 5
    assert f.glyph_id("b") == 0


def test_scaled_height_equals_scale():
    sf = Font(ascent=900, descent=-300, line_gap=60).as_scaled(24.0)
    assert sf.height() == pytest.approx(24.0)
    assert sf.ascent() / sf.descent() == pytest.approx(900 / -300)
    assert sf.line_gap() / sf.ascent() == pytest.approx(60 / 900)


def test_horizontal_metrics_scale_linearly():
    f = Font(advances={1: 600}, side_bearings={1: 50}, kerning={(1, 2): -40})
    small, big = f.as_scaled(10.0), f.as_scaled(20.0)
    assert big.h_advance(1) == pytest.approx(2 * small.h_advance(1))
    assert big.h_side_bearing(1) == pytest.approx(2 * small.h_side_bearing(1))
    assert big.kern(1, 2) == pytest.approx(2 * small.kern(1, 2))
    assert small.kern(2, 1) == 0.0


def test_scaled_glyph():
    sf = Font().as_scaled(PxScale(16.0))
    g = sf.scaled_glyph("x")
    assert g == Glyph(ord("x"), PxScale(16.0), Point(0.0, 0.0))


def test_invalid_metrics_rejected():
    with pytest.raises(ValueError):
        Font(ascent=0, descent=0)