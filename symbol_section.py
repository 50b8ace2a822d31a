"""
Section: a bordered box of pins laid out as two columns.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable, List, Optional, Tuple

from drawing_surface import DrawingSurface, Rectangle
from symbol_pin import Column, Pin
from text_metrics import TextMeasurer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionMetrics:
    rows: int
    height: float
    min_inner_width: float
    min_outer_width: float


class Section:
    """Ordered, append-only collection of pins.

    The name is kept for section headers and is not drawn yet.
    """

    TEXT_SEPARATOR: ClassVar[float] = 10
    TOP_BOTTOM_PADDING: ClassVar[float] = 10
    BORDER_THICKNESS: ClassVar[float] = 1.5
    PIN_SPACING: ClassVar[float] = 5

    def __init__(self, name: str = "", pins: Iterable[Pin] = ()):
        self.name = name
        self._pins: List[Pin] = list(pins)

    def __repr__(self) -> str:
        return f"Section({self.name!r}, {len(self._pins)} pins)"

    @property
    def pins(self) -> Tuple[Pin, ...]:
        return tuple(self._pins)

    def add_pin(self, pin: Pin) -> None:
        self._pins.append(pin)

    def copy(self) -> "Section":
        return Section(self.name, self._pins)

    def column(self, column: Column) -> List[Pin]:
        """Pins placed in column, in insertion order."""
        return [pin for pin in self._pins if pin.column is column]

    def rows(self) -> int:
        return max(len(self.column(Column.LEFT)), len(self.column(Column.RIGHT)))

    def height(self, row_height: float) -> float:
        rows = self.rows()
        if rows == 0:
            return 2 * self.TOP_BOTTOM_PADDING
        return self.PIN_SPACING * (rows - 1) + rows * row_height + 2 * self.TOP_BOTTOM_PADDING

    def min_inner_width(self, measurer: TextMeasurer) -> float:
        """Widest left name + separator + widest right name."""
        left = max((pin.inner_width(measurer) for pin in self.column(Column.LEFT)), default=0.0)
        right = max((pin.inner_width(measurer) for pin in self.column(Column.RIGHT)), default=0.0)
        return left + self.TEXT_SEPARATOR + right

    def min_outer_width(self, measurer: TextMeasurer) -> float:
        return max((pin.outer_width(measurer) for pin in self._pins), default=0.0)

    def measure(self, measurer: TextMeasurer, row_height: Optional[float] = None) -> SectionMetrics:
        if row_height is None:
            row_height = Pin.height(measurer)
        if not self._pins:
            logger.warning("section %r has no pins; height clamped to %g",
                           self.name, 2 * self.TOP_BOTTOM_PADDING)
        return SectionMetrics(
            rows=self.rows(),
            height=self.height(row_height),
            min_inner_width=self.min_inner_width(measurer),
            min_outer_width=self.min_outer_width(measurer),
        )

    def draw(self, surface: DrawingSurface, rect: Rectangle, row_height: Optional[float] = None) -> None:
        """Draw the border into rect and each column of pins along its sides."""
        if row_height is None:
            row_height = Pin.height(surface.measurer)
        surface.save()

        surface.set_line_width(self.BORDER_THICKNESS)
        surface.rectangle(rect.x, rect.y, rect.width, rect.height)
        surface.stroke()

        for column, x in ((Column.LEFT, rect.x), (Column.RIGHT, rect.x + rect.width)):
            y = rect.y + self.TOP_BOTTOM_PADDING
            for pin in self.column(column):
                y += row_height
                pin.draw(surface, x, y)
                y += self.PIN_SPACING

        surface.restore()
