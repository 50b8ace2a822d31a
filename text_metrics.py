"""
Text metrics for symbol layout.

Wraps ReportLab's font metrics so layout code can ask for the rendered extents of a
string under one fixed font context. Coordinates follow the drawing surfaces in
this project: y grows downward, so a positive ascent gives a negative y_bearing.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.pdfmetrics import stringWidth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextExtents:
    """Rendered extents of a string.

    y_bearing is the offset from the baseline to the top of the text and is
    negative for any non-empty string.
    """
    width: float
    height: float
    y_bearing: float


EMPTY_EXTENTS = TextExtents(0.0, 0.0, 0.0)


class TextMeasurer:
    """Measures strings for one font context (font name + size)."""

    DEFAULT_FONT = "Helvetica"
    DEFAULT_FONT_SIZE = 10.0

    def __init__(self, font_name: str = DEFAULT_FONT, font_size: float = DEFAULT_FONT_SIZE):
        # Fails early with ReportLab's KeyError for fonts it does not know
        pdfmetrics.getFont(font_name)
        self.font_name = font_name
        self.font_size = float(font_size)
        ascent, descent = pdfmetrics.getAscentDescent(font_name, self.font_size)
        self.ascent = ascent
        self.descent = descent
        self._cache: Dict[str, TextExtents] = {}

    def __repr__(self) -> str:
        return f"TextMeasurer({self.font_name!r}, {self.font_size:g})"

    def measure(self, text: str) -> TextExtents:
        """Return the extents of text; empty strings measure to zero."""
        if not text:
            return EMPTY_EXTENTS

        extents = self._cache.get(text)
        if extents is None:
            width = stringWidth(text, self.font_name, self.font_size)
            extents = TextExtents(width, self.ascent - self.descent, -self.ascent)
            self._cache[text] = extents
            logger.debug("measured %r: %.2f x %.2f", text, extents.width, extents.height)
        return extents
