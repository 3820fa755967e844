"""Interactive editing of an easing curve against a frozen reference curve."""

import logging
from dataclasses import dataclass
from typing import Callable

from ..constants import GRAPH_PADDING, GRAPH_SIZE
from .bezier import (
    BezierCurve,
    ControlPoint,
    CoordinateKey,
    clamp_x,
    clamp_y,
    parse_coordinate,
)
from .presets import find_preset, matching_preset

logger = logging.getLogger(__name__)

CurveListener = Callable[[BezierCurve], None]


@dataclass(frozen=True, slots=True)
class GraphGeometry:
    """Square graph holding the unit curve square inset by ``padding`` (y grows downward)."""

    size: int = GRAPH_SIZE
    padding: int = GRAPH_PADDING

    @property
    def inner_size(self) -> int:
        return self.size - self.padding * 2

    def to_graph(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.padding + x * self.inner_size,
            self.size - self.padding - y * self.inner_size,
        )

    def from_graph(self, px: float, py: float) -> tuple[float, float]:
        """Convert a graph pixel position into clamped curve coordinates."""
        x = (px - self.padding) / self.inner_size
        y = (self.size - self.padding - py) / self.inner_size
        return clamp_x(x), clamp_y(y)


class CurveEditor:
    """Holds a reference curve and an editable curve sharing one graph."""

    def __init__(
        self,
        reference: BezierCurve,
        edited: BezierCurve | None = None,
        on_change: CurveListener | None = None,
        size: int = GRAPH_SIZE,
        padding: int = GRAPH_PADDING,
    ):
        """
        Initialize the editor.

        Args:
            reference: Curve shown for comparison; never mutated
            edited: Starting value of the editable curve (defaults to reference)
            on_change: Called with the new curve after every committed edit
            size: Graph width and height in pixels
            padding: Inset of the unit square inside the graph
        """
        self._reference = reference
        self._edited = edited if edited is not None else reference
        self.on_change = on_change
        self.geometry = GraphGeometry(size, padding)
        self._dragging: ControlPoint | None = None

    @property
    def reference(self) -> BezierCurve:
        return self._reference

    @property
    def edited(self) -> BezierCurve:
        return self._edited

    @property
    def dragging(self) -> ControlPoint | None:
        return self._dragging

    @property
    def active_preset(self) -> str | None:
        preset = matching_preset(self._edited)
        return preset.name if preset else None

    # Graph coordinates

    def to_graph(self, x: float, y: float) -> tuple[float, float]:
        return self.geometry.to_graph(x, y)

    def from_graph(self, px: float, py: float) -> tuple[float, float]:
        return self.geometry.from_graph(px, py)

    def path(self, curve: BezierCurve) -> str:
        """SVG path data for a curve drawn on this graph."""
        sx, sy = self.to_graph(0, 0)
        c1x, c1y = self.to_graph(curve.x1, curve.y1)
        c2x, c2y = self.to_graph(curve.x2, curve.y2)
        ex, ey = self.to_graph(1, 1)
        return f"M {sx:g} {sy:g} C {c1x:g} {c1y:g}, {c2x:g} {c2y:g}, {ex:g} {ey:g}"

    # Editing

    def begin_drag(self, point: ControlPoint) -> None:
        self._dragging = point

    def drag_to(self, px: float, py: float) -> bool:
        """Move the dragged control point to a graph pixel position."""
        if self._dragging is None:
            return False
        x, y = self.from_graph(px, py)
        self._commit(self._edited.with_point(self._dragging, x, y))
        return True

    def end_drag(self) -> None:
        self._dragging = None

    def move_point(self, point: ControlPoint, x: float, y: float) -> None:
        self._commit(self._edited.with_point(point, x, y))

    def select_preset(self, name: str) -> None:
        """Replace all four coordinates with a preset in one commit."""
        self._commit(find_preset(name).curve)

    def set_curve(self, curve: BezierCurve) -> None:
        self._commit(curve)

    def set_coordinate(self, key: CoordinateKey, text: str) -> None:
        """Apply numeric text entry for one coordinate."""
        self._commit(self._edited.with_coordinate(key, parse_coordinate(text)))

    def revert(self) -> None:
        self._commit(self._reference)

    # Sampling

    def progress_dots(self, progress: float) -> tuple[float, float] | None:
        """
        Sample both curves at the same progress for the comparison dots.

        Returns:
            ``(reference_y, edited_y)``, or ``None`` at the endpoints where
            the dots are hidden
        """
        if not 0 < progress < 1:
            return None
        return self._reference.sample_y(progress), self._edited.sample_y(progress)

    def _commit(self, curve: BezierCurve) -> None:
        self._edited = curve
        logger.debug("Edited curve set to %s", curve.css())
        if self.on_change is not None:
            self.on_change(curve)
