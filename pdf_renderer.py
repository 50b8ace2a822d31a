#!/usr/bin/env python3
"""
ReportLab-based PDF Renderer for schematic symbols

Draws a Symbol onto a single PDF page. Layout happens in top-left page
coordinates (y down); PdfSurface flips y when it hands paths and text to the
ReportLab canvas, whose origin is bottom-left with y up.

Usage:
    python render_symbol.py [symbol.json] [output.pdf]
"""

import logging
from typing import Dict, Optional, Tuple

from reportlab.lib.colors import Color
from reportlab.pdfgen import canvas

from drawing_surface import DrawingSurface, PointList
from symbol_layout import Symbol, SymbolMetrics
from text_metrics import TextMeasurer

logger = logging.getLogger(__name__)


class PdfSurface(DrawingSurface):
    """DrawingSurface that paints onto a ReportLab canvas."""

    def __init__(self, c: canvas.Canvas, page_height: float, measurer: Optional[TextMeasurer] = None):
        super().__init__(measurer)
        self.canvas = c
        self.page_height = page_height
        self.stats = {'strokes': 0, 'labels': 0}

    def to_pdf_coords(self, x: float, y: float) -> Tuple[float, float]:
        """Flip a top-left page coordinate into ReportLab's bottom-left system."""
        return x, self.page_height - y

    def _stroke_subpath(self, points: PointList, closed: bool, line_width: float, color) -> None:
        c = self.canvas
        c.setStrokeColor(Color(*color))
        c.setLineWidth(line_width)

        path = c.beginPath()
        path.moveTo(*self.to_pdf_coords(*points[0]))
        for point in points[1:]:
            path.lineTo(*self.to_pdf_coords(*point))
        if closed:
            path.close()
        c.drawPath(path, stroke=1, fill=0)
        self.stats['strokes'] += 1

    def _paint_text(self, x: float, y: float, text: str, color) -> None:
        c = self.canvas
        c.setFont(self.measurer.font_name, self.measurer.font_size)
        c.setFillColor(Color(*color))
        pdf_x, pdf_y = self.to_pdf_coords(x, y)
        c.drawString(pdf_x, pdf_y, text)
        self.stats['labels'] += 1


def fitted_page_size(metrics: SymbolMetrics, margin: float) -> Tuple[float, float]:
    """Page size that holds the measured symbol plus margin on the right and bottom."""
    return metrics.total_width + margin, metrics.total_height + margin


class SymbolPDFRenderer:
    """Renders one symbol to a one-page PDF using ReportLab."""

    # Default page size in points
    PAGE_WIDTH = 320
    PAGE_HEIGHT = 320
    FIT_MARGIN = 10

    def __init__(self, symbol: Symbol, page_width: Optional[float] = None,
                 page_height: Optional[float] = None, measurer: Optional[TextMeasurer] = None,
                 fit: bool = False):
        """Initialize renderer; fit=True sizes the page to the symbol."""
        self.symbol = symbol
        self.measurer = measurer or TextMeasurer()
        self.metrics = symbol.measure(self.measurer)
        if fit:
            self.page_width, self.page_height = fitted_page_size(self.metrics, self.FIT_MARGIN)
        else:
            self.page_width = self.PAGE_WIDTH if page_width is None else page_width
            self.page_height = self.PAGE_HEIGHT if page_height is None else page_height
        self.stats: Dict[str, int] = {}

    def render_to_pdf(self, output_path: str) -> None:
        """Render the symbol and write the PDF file."""
        print(f"\n{'='*60}")
        print("REPORTLAB PDF RENDERER")
        print(f"{'='*60}")
        print(f"Symbol: {self.symbol.name}")
        print(f"Output: {output_path}")
        print(f"Page size: {self.page_width:g} x {self.page_height:g} pt")
        print(f"Font: {self.measurer.font_name} {self.measurer.font_size:g}")

        c = canvas.Canvas(output_path, pagesize=(self.page_width, self.page_height))
        surface = PdfSurface(c, self.page_height, self.measurer)

        c.saveState()
        self.symbol.draw(surface, self.metrics)
        c.restoreState()

        c.showPage()
        c.save()
        self.stats = dict(surface.stats)

        if self.metrics.total_width > self.page_width or self.metrics.total_height > self.page_height:
            logger.warning("symbol %r (%.1f x %.1f) overflows the %g x %g page",
                           self.symbol.name, self.metrics.total_width, self.metrics.total_height,
                           self.page_width, self.page_height)

        print(f"  Sections drawn: {len(self.metrics.sections)}")
        print(f"  Strokes drawn: {self.stats['strokes']}")
        print(f"  Labels drawn: {self.stats['labels']}")
