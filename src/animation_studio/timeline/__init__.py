"""Timeline engine: configuration, scheduling, playback and input."""

from .config import AnimationConfig, ColorConfig, TimelineConfig
from .engine import Timeline, TimelineSnapshot, frame_to_progress, progress_to_frame
from .input import (
    KeyEvent,
    TrackScrubber,
    apply_wheel,
    pointer_to_frame,
    resolve_key,
    resolve_wheel_zoom,
    toggle_playback,
)
from .markers import FrameMarkers, frame_markers, is_major_tick, marker_position, show_label
from .scheduler import ManualScheduler, RealtimeScheduler, Scheduler, TickHandle

__all__ = [
    "AnimationConfig",
    "ColorConfig",
    "TimelineConfig",
    "Timeline",
    "TimelineSnapshot",
    "frame_to_progress",
    "progress_to_frame",
    "KeyEvent",
    "TrackScrubber",
    "apply_wheel",
    "pointer_to_frame",
    "resolve_key",
    "resolve_wheel_zoom",
    "toggle_playback",
    "FrameMarkers",
    "frame_markers",
    "is_major_tick",
    "marker_position",
    "show_label",
    "Scheduler",
    "ManualScheduler",
    "RealtimeScheduler",
    "TickHandle",
]
