"""
SVG output for schematic symbols.

SVG already uses a top-left origin with y down, so coordinates are written as-is.
Text metrics still come from the ReportLab measurer, so the viewer should have the
same font available for labels to line up with the stems.
"""

import os
from typing import List, Optional

from drawing_surface import DrawingSurface, PointList
from pdf_renderer import fitted_page_size
from symbol_layout import Symbol
from text_metrics import TextMeasurer


def svg_escape(text: str) -> str:
    """Escape text for element content and double-quoted attributes."""
    return (text.replace('&', '&amp;').replace('<', '&lt;')
            .replace('>', '&gt;').replace('"', '&quot;'))


def svg_color(color) -> str:
    r, g, b = (max(0, min(255, round(c * 255))) for c in color)
    return f"#{r:02x}{g:02x}{b:02x}"


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip('0').rstrip('.')


class SvgSurface(DrawingSurface):
    """DrawingSurface that collects SVG elements."""

    def __init__(self, measurer: Optional[TextMeasurer] = None):
        super().__init__(measurer)
        self.elements: List[str] = []

    def _stroke_subpath(self, points: PointList, closed: bool, line_width: float, color) -> None:
        pts_str = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in points)
        tag = 'polygon' if closed else 'polyline'
        self.elements.append(
            f'<{tag} points="{pts_str}" stroke="{svg_color(color)}" '
            f'stroke-width="{_fmt(line_width)}" fill="none"/>'
        )

    def _paint_text(self, x: float, y: float, text: str, color) -> None:
        self.elements.append(
            f'<text x="{_fmt(x)}" y="{_fmt(y)}" font-family="{svg_escape(self.measurer.font_name)}" '
            f'font-size="{_fmt(self.measurer.font_size)}" fill="{svg_color(color)}" '
            f'xml:space="preserve">{svg_escape(text)}</text>'
        )

    def document(self, width: float, height: float) -> str:
        svg_content = [
            '<?xml version="1.0" encoding="UTF-8" standalone="no"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
            f'width="{_fmt(width)}pt" height="{_fmt(height)}pt" '
            f'viewBox="0 0 {_fmt(width)} {_fmt(height)}">',
            f'<rect x="0" y="0" width="{_fmt(width)}" height="{_fmt(height)}" fill="white"/>',
        ]
        svg_content.extend(self.elements)
        svg_content.append('</svg>')
        return "\n".join(svg_content)


class SymbolSVGRenderer:
    """Renders one symbol to an SVG file."""

    PAGE_WIDTH = 320
    PAGE_HEIGHT = 320
    FIT_MARGIN = 10

    def __init__(self, symbol: Symbol, page_width: Optional[float] = None,
                 page_height: Optional[float] = None, measurer: Optional[TextMeasurer] = None,
                 fit: bool = False):
        self.symbol = symbol
        self.measurer = measurer or TextMeasurer()
        self.metrics = symbol.measure(self.measurer)
        if fit:
            self.page_width, self.page_height = fitted_page_size(self.metrics, self.FIT_MARGIN)
        else:
            self.page_width = self.PAGE_WIDTH if page_width is None else page_width
            self.page_height = self.PAGE_HEIGHT if page_height is None else page_height

    def render_to_string(self) -> str:
        surface = SvgSurface(self.measurer)
        self.symbol.draw(surface, self.metrics)
        return surface.document(self.page_width, self.page_height)

    def render_to_svg(self, output_path: str) -> None:
        print(f"Rendering {self.symbol.name!r} to SVG...")
        content = self.render_to_string()

        out_dir = os.path.dirname(output_path)
        if out_dir and not os.path.exists(out_dir):
            os.makedirs(out_dir)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)

        print(f"  Page size: {self.page_width:g} x {self.page_height:g}")
        print(f"Rendered SVG to {output_path}")
