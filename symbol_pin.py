"""
Pin model and pin drawing.

A pin is drawn relative to an anchor on the section border: the name sits inside
the section, the stem and the type label extend outward. IN pins live on the left
border, every other direction on the right border.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Tuple

from drawing_surface import DrawingSurface
from text_metrics import TextMeasurer


class PinDirection(Enum):
    IN = "in"
    OUT = "out"
    INOUT = "inout"


class Column(Enum):
    """Side of the section a pin is placed on."""
    LEFT = "left"
    RIGHT = "right"


# INOUT shares the right column (and the outward stem) with OUT
COLUMN_FOR_DIRECTION: Dict[PinDirection, Column] = {
    PinDirection.IN: Column.LEFT,
    PinDirection.OUT: Column.RIGHT,
    PinDirection.INOUT: Column.RIGHT,
}


def draw_rtl_text(surface: DrawingSurface, text: str) -> None:
    """Paint text so that it ends at the current point."""
    extents = surface.text_extents(text)
    surface.rel_move_to(-extents.width, 0)
    surface.show_text(text)


@dataclass(frozen=True)
class PinMetrics:
    inner_width: float
    outer_width: float


@dataclass(frozen=True)
class Pin:
    """A named, directional connection point with a type annotation."""

    STEM_LENGTH: ClassVar[float] = 15
    WIRE_STEM_WIDTH: ClassVar[float] = 1
    BUS_STEM_WIDTH: ClassVar[float] = 2
    TEXT_PADDING: ClassVar[float] = 5
    TYPE_COLOR: ClassVar[Tuple[float, float, float]] = (0.5, 0.5, 0.5)
    REFERENCE_TEXT: ClassVar[str] = "Hello world"

    name: str
    direction: PinDirection
    is_bus: bool = False
    type: str = "cc"

    @property
    def column(self) -> Column:
        return COLUMN_FOR_DIRECTION[self.direction]

    @property
    def stem_width(self) -> float:
        return self.BUS_STEM_WIDTH if self.is_bus else self.WIRE_STEM_WIDTH

    def inner_width(self, measurer: TextMeasurer) -> float:
        """Space taken by the name label and its padding inside the section."""
        return self.TEXT_PADDING + measurer.measure(self.name).width

    def outer_width(self, measurer: TextMeasurer) -> float:
        """Space from the section border to the far end of the type label."""
        return self.STEM_LENGTH + self.TEXT_PADDING + measurer.measure(self.type).width

    def measure(self, measurer: TextMeasurer) -> PinMetrics:
        return PinMetrics(self.inner_width(measurer), self.outer_width(measurer))

    @classmethod
    def height(cls, measurer: TextMeasurer) -> float:
        """Uniform row height: the height of the reference string.

        Glyphs taller than the reference string are not accounted for.
        """
        return measurer.measure(cls.REFERENCE_TEXT).height

    def draw(self, surface: DrawingSurface, x: float, y: float) -> None:
        """Draw name, stem and type around the anchor (x, y).

        y is the baseline of the name label; x lies on the section border.
        """
        inward = self.column is Column.LEFT
        surface.save()

        # Name, growing away from the border into the section
        surface.save()
        if inward:
            surface.move_to(x + self.TEXT_PADDING, y)
            surface.show_text(self.name)
        else:
            surface.move_to(x - self.TEXT_PADDING, y)
            draw_rtl_text(surface, self.name)
        surface.restore()

        # Stem, centred on the name's x-height
        stem_y = y + surface.text_extents(self.name).y_bearing / 2
        stem_end = x - self.STEM_LENGTH if inward else x + self.STEM_LENGTH
        surface.save()
        surface.set_line_width(self.stem_width)
        surface.move_to(x, stem_y)
        surface.line_to(stem_end, stem_y)
        surface.stroke()
        surface.restore()

        # Type, past the stem end
        surface.save()
        surface.set_source_rgb(*self.TYPE_COLOR)
        if inward:
            surface.move_to(x - self.TEXT_PADDING - self.STEM_LENGTH, y)
            draw_rtl_text(surface, self.type)
        else:
            surface.move_to(x + self.TEXT_PADDING + self.STEM_LENGTH, y)
            surface.show_text(self.type)
        surface.restore()

        surface.restore()
