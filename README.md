# glyphlayout

Lays out text for rendering. Given a list of fonts, a screen position with
width and height bounds, and one or more text sections (each with its own
font and pixel scale), it works out where every glyph goes.

## Features

- Single-line and wrapping layouts (`glyphlayout.builtin.Layout`, with
  `LayoutKind.SINGLE_LINE` or `LayoutKind.WRAP`).
- Horizontal alignment: left, center and right
  (`glyphlayout.align.HorizontalAlign`).
- Vertical alignment: top, center and bottom
  (`glyphlayout.align.VerticalAlign`).
- Line breaking at word boundaries (`BuiltInLineBreaker.UNICODE`, the
  default) or at any character (`BuiltInLineBreaker.ANY_CHAR`), from
  `glyphlayout.linebreak`. Newlines and other mandatory breaks force a new
  line.
- Lines grow to fit the tallest font used in them.
- Kerning between neighbouring glyphs of the same section.
- A cheap relayout when only the screen position has changed
  (`Layout.recalculate_glyphs` with a `GlyphChange` holding the old
  geometry).

## Installation

```
pip install glyphlayout
```

## Usage

```python
import math

from glyphlayout.align import HorizontalAlign
from glyphlayout.builtin import Layout
from glyphlayout.font import Font, PxScale
from glyphlayout.section import SectionGeometry, SectionText

fonts = [Font(units_per_em=1000, ascent=800, descent=-200, default_advance=600)]

layout = Layout.default_wrap().with_h_align(HorizontalAlign.CENTER)
geometry = SectionGeometry(screen_position=(300.0, 20.0), bounds=(200.0, math.inf))
sections = [SectionText(text="hello world", scale=PxScale(20.0))]

for sg in layout.calculate_glyphs(fonts, geometry, sections):
    print(sg.section_index, sg.byte_index, sg.glyph.id, sg.glyph.position)

print(layout.bounds_rect(geometry))
```

Each result is a `SectionGlyph`: the positioned `Glyph`, the font id, the
index of the section it came from, and `byte_index`, the position of its
character in that section's text (counted in characters of the Python
string). Control characters such as `\n` produce no glyph. Sections whose
scale is zero or negative are skipped.

### Layouts

- `Layout.default_wrap()` (also the plain `Layout()`) and
  `Layout.default_single_line()` are left/top aligned with the Unicode line
  breaker.
- `with_h_align`, `with_v_align` and `with_line_breaker` return a copy with
  one setting changed.
- A single-line layout keeps only the first line: it ends at the first hard
  break or where the next word would cross the width bound. At least one
  word is always placed, even if it is wider than the bound.
- A wrapping layout starts a new line on hard breaks and when a word would
  cross the width bound. Trailing spaces do not count against the bound,
  except directly before a hard break or the end of the text. With top
  alignment it stops adding lines once the height bound is reached; with
  center or bottom alignment the block is moved up and glyphs falling
  outside the bounds are dropped.
- `bounds_rect(geometry)` gives the screen `Rect` of the bounds for the
  layout's alignment, widened to whole pixels.

`Layout` implements the abstract `glyphlayout.positioner.GlyphPositioner`,
which other positioners can implement too.

### Fonts

`glyphlayout.font.Font` describes a font by metric tables in font units,
given as keyword arguments: `units_per_em`, `ascent`, `descent`, `line_gap`,
`glyph_ids` (character to glyph id; without it a glyph id is the code point,
and missing characters map to 0), `advances`, `side_bearings`, `kerning`
(keyed by pairs of glyph ids) and `default_advance`. A subclass can override
the unscaled metric methods (`glyph_id`, `ascent_unscaled`,
`descent_unscaled`, `line_gap_unscaled`, `h_advance_unscaled`,
`h_side_bearing_unscaled`, `kern_unscaled`) to supply metrics in other ways.

`Font.as_scaled(scale)` returns a `ScaledFont` with metrics in pixels, where
the scale is the pixel height of ascent minus descent.

## Limitations

- The package does not read font files (TrueType, OpenType) and does not
  rasterise or draw glyphs; it only computes positions from the metrics a
  `Font` gives it.
- The Unicode line breaker applies a small set of rules (mandatory breaks,
  spaces, opening and closing punctuation, ideographs, hyphens), not the
  full Unicode line breaking algorithm.

## Tests

```
pip install -e ".[test]"
pytest
```