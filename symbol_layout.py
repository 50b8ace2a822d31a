"""
Symbol: a named diagram of vertically stacked sections.

Layout is done in two passes. Symbol.measure() walks sections and pins bottom-up
and returns the shared dimensions; Symbol.draw() then places every section in a
rectangle of the shared inner width, offset by the shared outer width, so the pin
columns of all sections line up.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable, List, Optional, Tuple

from drawing_surface import DrawingSurface, Rectangle
from symbol_pin import Pin
from symbol_section import Section, SectionMetrics
from text_metrics import TextExtents, TextMeasurer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolMetrics:
    inner_width: float
    outer_width: float
    row_height: float
    name_extents: TextExtents
    sections: Tuple[SectionMetrics, ...]
    section_top: float

    @property
    def total_width(self) -> float:
        return 2 * self.outer_width + self.inner_width

    @property
    def total_height(self) -> float:
        return self.section_top + sum(section.height for section in self.sections)

    def section_rects(self) -> List[Rectangle]:
        """Rectangles the sections are drawn into, top to bottom."""
        rects = []
        y = self.section_top
        for section in self.sections:
            rects.append(Rectangle(self.outer_width, y, self.inner_width, section.height))
            y += section.height
        return rects


class Symbol:
    NAME_SPACING: ClassVar[float] = 5

    def __init__(self, name: str, sections: Iterable[Section] = ()):
        self.name = name
        self._sections: List[Section] = []
        for section in sections:
            self.add_section(section)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r}, {len(self._sections)} sections)"

    @property
    def sections(self) -> Tuple[Section, ...]:
        return tuple(self._sections)

    def add_section(self, section: Section) -> None:
        """Append a snapshot of section; later edits to it are not seen here."""
        self._sections.append(section.copy())

    def measure(self, measurer: TextMeasurer) -> SymbolMetrics:
        row_height = Pin.height(measurer)
        sections = tuple(section.measure(measurer, row_height) for section in self._sections)
        name_extents = measurer.measure(self.name)
        if not sections:
            logger.warning("symbol %r has no sections; only the name is drawn", self.name)
        metrics = SymbolMetrics(
            inner_width=max((s.min_inner_width for s in sections), default=0.0),
            outer_width=max((s.min_outer_width for s in sections), default=0.0),
            row_height=row_height,
            name_extents=name_extents,
            sections=sections,
            section_top=name_extents.height + self.NAME_SPACING,
        )
        logger.debug("symbol %r: inner=%.2f outer=%.2f height=%.2f", self.name,
                     metrics.inner_width, metrics.outer_width, metrics.total_height)
        return metrics

    def draw(self, surface: DrawingSurface, metrics: Optional[SymbolMetrics] = None) -> SymbolMetrics:
        """Draw the name and all sections; returns the metrics used."""
        if metrics is None:
            metrics = self.measure(surface.measurer)

        surface.save()
        name_x = metrics.outer_width + (metrics.inner_width - metrics.name_extents.width) / 2
        surface.move_to(max(name_x, 0.0), metrics.name_extents.height)
        surface.show_text(self.name)
        surface.restore()

        for section, rect in zip(self._sections, metrics.section_rects()):
            section.draw(surface, rect, metrics.row_height)
        return metrics
