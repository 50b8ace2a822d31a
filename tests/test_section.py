"""
Tests for section sizing and pin row placement.
"""

from itertools import permutations

import pytest

from drawing_surface import Rectangle
from symbol_pin import Pin, PinDirection
from symbol_section import Section


def make_section(*pins):
    section = Section()
    for pin in pins:
        section.add_pin(pin)
    return section


IN = PinDirection.IN
OUT = PinDirection.OUT
INOUT = PinDirection.INOUT


class TestRows:

    def test_rows_is_taller_column(self):
        section = make_section(Pin("a", IN), Pin("b", IN), Pin("c", IN), Pin("x", OUT))
        assert section.rows() == 3

    def test_inout_counts_towards_right_column(self):
        section = make_section(Pin("a", IN), Pin("x", OUT), Pin("y", INOUT))
        assert section.rows() == 2

    def test_empty_section_has_no_rows(self):
        assert Section().rows() == 0


class TestHeight:

    def test_single_row(self):
        """One IN + one OUT: rows 1, height = row + 2 * padding."""
        section = make_section(Pin("i_foo", IN, True, "logic [15:0]"), Pin("o_bar", OUT, False, "logic"))
        assert section.rows() == 1
        assert section.height(8) == 0 * Section.PIN_SPACING + 1 * 8 + 2 * 10

    def test_multiple_rows(self):
        section = make_section(Pin("a", IN), Pin("b", IN), Pin("c", IN))
        assert section.height(8) == 5 * 2 + 3 * 8 + 20

    def test_empty_section_is_clamped_to_padding(self):
        assert Section().height(8) == 2 * Section.TOP_BOTTOM_PADDING

    def test_height_never_decreases_with_rows(self):
        section = Section()
        heights = [section.height(8)]
        for i in range(6):
            section.add_pin(Pin(f"p{i}", IN))
            heights.append(section.height(8))
        assert heights == sorted(heights)


class TestWidths:

    def test_min_inner_width(self, measurer):
        section = make_section(Pin("i_foo", IN), Pin("i_foobar", IN), Pin("o_bar", OUT))
        assert section.min_inner_width(measurer) == (5 + 8 * 6) + 10 + (5 + 5 * 6)

    def test_min_inner_width_includes_inout(self, measurer):
        section = make_section(Pin("a", IN), Pin("bidirectional", INOUT))
        assert section.min_inner_width(measurer) == (5 + 6) + 10 + (5 + 13 * 6)

    def test_min_inner_width_ignores_order(self, measurer):
        pins = [Pin("a", IN), Pin("abcd", IN), Pin("xy", OUT), Pin("wxyz12", INOUT)]
        widths = {make_section(*order).min_inner_width(measurer) for order in permutations(pins)}
        assert len(widths) == 1

    def test_empty_section_widths(self, measurer):
        assert Section().min_inner_width(measurer) == Section.TEXT_SEPARATOR
        assert Section().min_outer_width(measurer) == 0

    def test_min_outer_width_is_widest_type_on_either_side(self, measurer):
        section = make_section(Pin("i", IN, type="logic"), Pin("o", OUT, type="logic [15:0]"))
        assert section.min_outer_width(measurer) == 15 + 5 + 12 * 6

    def test_measure(self, measurer):
        section = make_section(Pin("i_foo", IN, True, "logic [15:0]"), Pin("o_bar", OUT, False, "logic"))
        metrics = section.measure(measurer)
        assert metrics.rows == 1
        assert metrics.height == 8 + 20
        assert metrics.min_inner_width == 80
        assert metrics.min_outer_width == 92


class TestSectionValueSemantics:

    def test_copy_is_independent(self):
        section = make_section(Pin("a", IN))
        snapshot = section.copy()
        section.add_pin(Pin("b", OUT))
        assert len(snapshot.pins) == 1
        assert len(section.pins) == 2

    def test_pins_keep_insertion_order(self):
        pins = [Pin("b", OUT), Pin("a", IN), Pin("c", OUT)]
        assert make_section(*pins).pins == tuple(pins)


class TestSectionDraw:

    RECT = Rectangle(100, 40, 80, 60)

    def test_border(self, surface):
        Section().draw(surface, self.RECT, 8)
        [border] = surface.strokes
        assert border.closed
        assert border.points == ((100, 40), (180, 40), (180, 100), (100, 100))
        assert border.line_width == Section.BORDER_THICKNESS

    def test_rows_are_stacked_from_top_padding(self, surface):
        section = make_section(Pin("a", IN), Pin("b", IN), Pin("c", IN))
        section.draw(surface, self.RECT, 8)
        baselines = [surface.text_op(name).y for name in "abc"]
        assert baselines == [40 + 10 + 8, 40 + 10 + 8 + 5 + 8, 40 + 10 + 2 * (8 + 5) + 8]

    def test_columns_anchor_on_their_border(self, surface):
        section = make_section(Pin("a", IN), Pin("x", OUT))
        section.draw(surface, self.RECT, 8)
        assert surface.text_op("a").x == 100 + Pin.TEXT_PADDING
        x = surface.text_op("x")
        assert x.x + x.width == 180 - Pin.TEXT_PADDING

    def test_ragged_columns_share_starting_row(self, surface):
        section = make_section(Pin("a", IN), Pin("b", IN), Pin("x", INOUT))
        section.draw(surface, self.RECT, 8)
        assert surface.text_op("x").y == surface.text_op("a").y
        assert surface.text_op("b").y > surface.text_op("a").y

    def test_column_order_follows_insertion(self, surface):
        section = make_section(Pin("x", OUT), Pin("b", IN), Pin("y", OUT), Pin("a", IN))
        section.draw(surface, self.RECT, 8)
        assert surface.text_op("b").y < surface.text_op("a").y
        assert surface.text_op("x").y < surface.text_op("y").y

    def test_row_height_defaults_to_reference_height(self, surface, measurer):
        section = make_section(Pin("a", IN))
        section.draw(surface, self.RECT)
        assert surface.text_op("a").y == 40 + 10 + measurer.HEIGHT

    def test_bus_and_wire_stems(self, surface):
        """The example section: bus input stem width 2, wire output stem width 1."""
        section = make_section(Pin("i_foo", IN, True, "logic [15:0]"), Pin("o_bar", OUT, False, "logic"))
        section.draw(surface, self.RECT, 8)
        border, in_stem, out_stem = surface.strokes
        assert in_stem.line_width == 2
        assert out_stem.line_width == 1
        assert surface.line_width == pytest.approx(1.0)
