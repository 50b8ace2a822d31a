"""
Shared fixtures: a deterministic text measurer and recording surfaces.
"""

import pytest

from drawing_surface import RecordingSurface
from text_metrics import EMPTY_EXTENTS, TextExtents


class FixedWidthMeasurer:
    """Every character is char_width wide; every string is 8 tall, bearing -6."""

    font_name = "Courier"
    font_size = 10.0
    HEIGHT = 8.0
    Y_BEARING = -6.0

    def __init__(self, char_width: float = 6.0):
        self.char_width = char_width

    def measure(self, text):
        if not text:
            return EMPTY_EXTENTS
        return TextExtents(self.char_width * len(text), self.HEIGHT, self.Y_BEARING)


@pytest.fixture
def measurer():
    return FixedWidthMeasurer()


@pytest.fixture
def surface(measurer):
    return RecordingSurface(measurer)
