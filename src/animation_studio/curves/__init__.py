"""Cubic-bezier easing curves, presets and the curve editor."""

from .bezier import (
    COORDINATE_KEYS,
    BezierCurve,
    ControlPoint,
    CoordinateKey,
    bezier_y,
    parse_coordinate,
)
from .editor import CurveEditor, GraphGeometry
from .presets import (
    DEFAULT_PRESET_NAME,
    PRESETS,
    CurvePreset,
    find_preset,
    matching_preset,
    preset_names,
)

__all__ = [
    "BezierCurve",
    "ControlPoint",
    "CoordinateKey",
    "COORDINATE_KEYS",
    "bezier_y",
    "parse_coordinate",
    "CurveEditor",
    "GraphGeometry",
    "CurvePreset",
    "PRESETS",
    "DEFAULT_PRESET_NAME",
    "find_preset",
    "matching_preset",
    "preset_names",
]
