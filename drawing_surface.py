"""
Drawing surface abstraction used by the symbol layout code.

The surface behaves like a small cairo context: it keeps a current point, a path
under construction and a stack of graphics states (line width, colour). Concrete
backends only implement the two paint hooks, _stroke_subpath and _paint_text.

All coordinates are page coordinates with the origin at the top-left corner and
y growing downward.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from text_metrics import TextExtents, TextMeasurer

Color = Tuple[float, float, float]
PointList = Tuple[Tuple[float, float], ...]

BLACK: Color = (0.0, 0.0, 0.0)


class NoCurrentPointError(RuntimeError):
    """Raised when a text or relative move is issued before any move_to."""


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class GraphicsState:
    line_width: float = 1.0
    color: Color = BLACK


@dataclass(frozen=True)
class StrokeOp:
    """A stroked open or closed polyline."""
    points: PointList
    closed: bool
    line_width: float
    color: Color


@dataclass(frozen=True)
class TextOp:
    """A string painted with its leading edge on the baseline point (x, y)."""
    x: float
    y: float
    text: str
    color: Color
    width: float


class DrawingSurface:
    """Base class for drawing backends."""

    def __init__(self, measurer: Optional[TextMeasurer] = None):
        self.measurer = measurer or TextMeasurer()
        self._state = GraphicsState()
        self._saved: List[GraphicsState] = []
        self._subpaths: List[Tuple[List[Tuple[float, float]], bool]] = []
        self._current_point: Optional[Tuple[float, float]] = None

    # Graphics state

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @property
    def color(self) -> Color:
        return self._state.color

    def save(self) -> None:
        self._saved.append(self._state)

    def restore(self) -> None:
        if self._saved:
            self._state = self._saved.pop()

    def set_line_width(self, width: float) -> None:
        self._state = replace(self._state, line_width=float(width))

    def set_source_rgb(self, red: float, green: float, blue: float) -> None:
        self._state = replace(self._state, color=(red, green, blue))

    # Path construction

    @property
    def current_point(self) -> Optional[Tuple[float, float]]:
        return self._current_point

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(([(x, y)], False))
        self._current_point = (x, y)

    def rel_move_to(self, dx: float, dy: float) -> None:
        if self._current_point is None:
            raise NoCurrentPointError("rel_move_to without a current point")
        x, y = self._current_point
        self.move_to(x + dx, y + dy)

    def line_to(self, x: float, y: float) -> None:
        if self._current_point is None:
            self.move_to(x, y)
            return
        self._subpaths[-1][0].append((x, y))
        self._current_point = (x, y)

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        """Add a closed rectangular subpath."""
        points = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        self._subpaths.append((points, True))
        self._current_point = (x, y)

    def stroke(self) -> None:
        """Stroke every subpath with the current state, then clear the path."""
        for points, closed in self._subpaths:
            if len(points) > 1:
                self._stroke_subpath(tuple(points), closed, self._state.line_width, self._state.color)
        self._subpaths = []
        self._current_point = None

    # Text

    def text_extents(self, text: str) -> TextExtents:
        return self.measurer.measure(text)

    def show_text(self, text: str) -> None:
        """Paint text at the current point and advance the point by its width."""
        if self._current_point is None:
            raise NoCurrentPointError(f"show_text({text!r}) without a current point")
        x, y = self._current_point
        width = self.text_extents(text).width
        if text:
            self._paint_text(x, y, text, self._state.color)
        self._current_point = (x + width, y)

    # Backend hooks

    def _stroke_subpath(self, points: PointList, closed: bool, line_width: float, color: Color) -> None:
        raise NotImplementedError

    def _paint_text(self, x: float, y: float, text: str, color: Color) -> None:
        raise NotImplementedError


class RecordingSurface(DrawingSurface):
    """Surface that records paint operations instead of producing output."""

    def __init__(self, measurer: Optional[TextMeasurer] = None):
        super().__init__(measurer)
        self.ops: List[object] = []

    @property
    def strokes(self) -> List[StrokeOp]:
        return [op for op in self.ops if isinstance(op, StrokeOp)]

    @property
    def texts(self) -> List[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    def text_op(self, text: str) -> TextOp:
        """Return the first recorded TextOp painting exactly text."""
        for op in self.texts:
            if op.text == text:
                return op
        raise KeyError(text)

    def _stroke_subpath(self, points: PointList, closed: bool, line_width: float, color: Color) -> None:
        self.ops.append(StrokeOp(points, closed, line_width, color))

    def _paint_text(self, x: float, y: float, text: str, color: Color) -> None:
        self.ops.append(TextOp(x, y, text, color, self.text_extents(text).width))
