"""
Tests for pin metrics, column placement and pin drawing.
"""

import pytest

from symbol_pin import COLUMN_FOR_DIRECTION, Column, Pin, PinDirection


BUS_IN = Pin("i_foo", PinDirection.IN, True, "logic [15:0]")
WIRE_OUT = Pin("o_bar", PinDirection.OUT, False, "logic")


class TestPinMetrics:

    def test_inner_width_is_padding_plus_name(self, measurer):
        """inner width = text padding + name width."""
        assert BUS_IN.inner_width(measurer) == 5 + 5 * 6

    def test_outer_width_is_stem_padding_and_type(self, measurer):
        """outer width = stem + padding + type width."""
        assert BUS_IN.outer_width(measurer) == 15 + 5 + 12 * 6
        assert WIRE_OUT.outer_width(measurer) == 15 + 5 + 5 * 6

    def test_empty_strings_measure_to_padding_only(self, measurer):
        pin = Pin("", PinDirection.OUT, type="")
        assert pin.inner_width(measurer) == Pin.TEXT_PADDING
        assert pin.outer_width(measurer) == Pin.STEM_LENGTH + Pin.TEXT_PADDING

    def test_height_uses_reference_string(self, measurer):
        assert Pin.height(measurer) == measurer.measure("Hello world").height

    def test_measure_bundles_both_widths(self, measurer):
        metrics = BUS_IN.measure(measurer)
        assert metrics.inner_width == BUS_IN.inner_width(measurer)
        assert metrics.outer_width == BUS_IN.outer_width(measurer)

    def test_default_type(self):
        assert Pin("clk", PinDirection.IN).type == "cc"

    def test_pins_are_immutable(self):
        with pytest.raises(AttributeError):
            BUS_IN.name = "other"


class TestColumnPlacement:

    @pytest.mark.parametrize("direction, column", [
        (PinDirection.IN, Column.LEFT),
        (PinDirection.OUT, Column.RIGHT),
        (PinDirection.INOUT, Column.RIGHT),
    ])
    def test_mapping(self, direction, column):
        assert COLUMN_FOR_DIRECTION[direction] is column
        assert Pin("p", direction).column is column

    def test_every_direction_is_mapped(self):
        assert set(COLUMN_FOR_DIRECTION) == set(PinDirection)


class TestPinDraw:

    def test_input_name_starts_inside_left_border(self, surface):
        """IN pin: name is drawn left-to-right from x + padding."""
        BUS_IN.draw(surface, 100, 50)
        name = surface.text_op("i_foo")
        assert (name.x, name.y) == (105, 50)

    def test_output_name_ends_inside_right_border(self, surface):
        """OUT pin: name's trailing edge sits at x - padding."""
        WIRE_OUT.draw(surface, 100, 50)
        name = surface.text_op("o_bar")
        assert name.x + name.width == 95
        assert name.y == 50

    def test_inout_is_drawn_like_output(self, measurer):
        from drawing_surface import RecordingSurface
        out_surface = RecordingSurface(measurer)
        inout_surface = RecordingSurface(measurer)
        Pin("io", PinDirection.OUT, type="t").draw(out_surface, 10, 20)
        Pin("io", PinDirection.INOUT, type="t").draw(inout_surface, 10, 20)
        assert out_surface.ops == inout_surface.ops

    def test_input_stem_grows_left_at_half_bearing(self, surface):
        BUS_IN.draw(surface, 100, 50)
        [stem] = surface.strokes
        assert stem.points == ((100, 47), (85, 47))
        assert not stem.closed

    def test_output_stem_grows_right(self, surface):
        WIRE_OUT.draw(surface, 100, 50)
        [stem] = surface.strokes
        assert stem.points == ((100, 47), (115, 47))

    def test_stem_width_depends_on_bus(self, surface):
        BUS_IN.draw(surface, 100, 50)
        WIRE_OUT.draw(surface, 200, 50)
        assert [s.line_width for s in surface.strokes] == [2, 1]

    def test_input_type_ends_before_stem(self, surface):
        """IN pin: type label is mirrored and ends at x - stem - padding."""
        BUS_IN.draw(surface, 100, 50)
        label = surface.text_op("logic [15:0]")
        assert label.x + label.width == 80
        assert label.color == Pin.TYPE_COLOR

    def test_output_type_starts_after_stem(self, surface):
        WIRE_OUT.draw(surface, 100, 50)
        label = surface.text_op("logic")
        assert label.x == 120
        assert label.color == Pin.TYPE_COLOR

    def test_name_is_black_and_state_is_restored(self, surface):
        BUS_IN.draw(surface, 100, 50)
        assert surface.text_op("i_foo").color == (0.0, 0.0, 0.0)
        assert surface.line_width == 1.0
        assert surface.color == (0.0, 0.0, 0.0)

    def test_paint_order(self, surface):
        """Name, then stem, then type."""
        BUS_IN.draw(surface, 100, 50)
        kinds = [type(op).__name__ for op in surface.ops]
        assert kinds == ["TextOp", "StrokeOp", "TextOp"]
