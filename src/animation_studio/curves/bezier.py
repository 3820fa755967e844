"""Cubic-bezier easing curves with fixed (0, 0) and (1, 1) anchors."""

import re
from dataclasses import dataclass, replace
from typing import Literal

from ..constants import BEZIER_X_RANGE, BEZIER_Y_RANGE

ControlPoint = Literal["p1", "p2"]
CoordinateKey = Literal["x1", "y1", "x2", "y2"]

COORDINATE_KEYS: tuple[CoordinateKey, ...] = ("x1", "y1", "x2", "y2")

# Leading decimal, matched the way a browser number field reads its text.
_DECIMAL_PREFIX = re.compile(r"^\s*[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def bezier_y(t: float, p1y: float, p2y: float) -> float:
    """
    Evaluate the curve's Y output directly at parameter ``t``.

    The progress value is used as the bezier parameter itself; X is not
    inverted first. Comparison dots depend on this exact formula.
    """
    mt = 1 - t
    return 3 * mt * mt * t * p1y + 3 * mt * t * t * p2y + t * t * t


def clamp_x(value: float) -> float:
    low, high = BEZIER_X_RANGE
    return max(low, min(high, value))


def clamp_y(value: float) -> float:
    low, high = BEZIER_Y_RANGE
    return max(low, min(high, value))


def clamp_coordinate(key: CoordinateKey, value: float) -> float:
    """Clamp a coordinate into the bounds of its axis."""
    return clamp_x(value) if key.startswith("x") else clamp_y(value)


def parse_coordinate(text: str) -> float:
    """Parse numeric text entry, falling back to ``0.0`` when nothing parses."""
    match = _DECIMAL_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


@dataclass(frozen=True, slots=True)
class BezierCurve:
    """Two interior control points of a cubic bezier between (0, 0) and (1, 1)."""

    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_values(cls, values: tuple[float, float, float, float]) -> "BezierCurve":
        x1, y1, x2, y2 = values
        return cls(float(x1), float(y1), float(x2), float(y2))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def sample_y(self, t: float) -> float:
        return bezier_y(t, self.y1, self.y2)

    def point(self, point: ControlPoint) -> tuple[float, float]:
        if point == "p1":
            return (self.x1, self.y1)
        return (self.x2, self.y2)

    def clamped(self) -> "BezierCurve":
        """Return a copy with both control points inside the editing bounds."""
        return BezierCurve(
            clamp_x(self.x1), clamp_y(self.y1), clamp_x(self.x2), clamp_y(self.y2)
        )

    def with_point(self, point: ControlPoint, x: float, y: float) -> "BezierCurve":
        """Move one control point, leaving the other untouched."""
        if point == "p1":
            return replace(self, x1=clamp_x(x), y1=clamp_y(y))
        return replace(self, x2=clamp_x(x), y2=clamp_y(y))

    def with_coordinate(self, key: CoordinateKey, value: float) -> "BezierCurve":
        if key not in COORDINATE_KEYS:
            raise KeyError(f"Unknown coordinate '{key}'. Available: {', '.join(COORDINATE_KEYS)}")
        return replace(self, **{key: clamp_coordinate(key, value)})

    def css(self) -> str:
        """CSS timing function, two decimals per coordinate."""
        return "cubic-bezier(" + ", ".join(f"{v:.2f}" for v in self.as_tuple()) + ")"

    def __str__(self) -> str:
        return self.css()
