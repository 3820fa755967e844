"""Frame-accurate animation timeline engine and cubic-bezier easing editor."""

from .curves import BezierCurve, CurveEditor, bezier_y
from .studio import AnimationStudio, ComparisonFrame
from .timeline import (
    AnimationConfig,
    ManualScheduler,
    RealtimeScheduler,
    Timeline,
    TimelineConfig,
    frame_markers,
)

__all__ = [
    "AnimationConfig",
    "AnimationStudio",
    "BezierCurve",
    "ComparisonFrame",
    "CurveEditor",
    "ManualScheduler",
    "RealtimeScheduler",
    "Timeline",
    "TimelineConfig",
    "bezier_y",
    "frame_markers",
]
