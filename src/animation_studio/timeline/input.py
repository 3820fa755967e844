"""Translate pointer, wheel and keyboard input into timeline commands."""

import math
from dataclasses import dataclass

from ..constants import KEYBOARD_JUMP_PERCENT, ZOOM_STEP
from .engine import Timeline, clamp_zoom, round_half_up


def pointer_to_frame(x: float, track_left: float, track_width: float, total_frames: int) -> int:
    """Map a pointer position over the scrubber track to a frame index."""
    if track_width <= 0 or total_frames <= 1 or math.isnan(x):
        return 0
    percent = max(0.0, min(1.0, (x - track_left) / track_width))
    frame = round_half_up(percent * (total_frames - 1))
    return max(0, min(frame, total_frames - 1))


class TrackScrubber:
    """Click- and drag-to-seek over a scrubber track."""

    def __init__(self, timeline: Timeline, track_left: float = 0.0, track_width: float = 100.0):
        self.timeline = timeline
        self.track_left = track_left
        self.track_width = track_width
        self.dragging = False

    def seek(self, x: float) -> int:
        frame = pointer_to_frame(x, self.track_left, self.track_width, self.timeline.total_frames)
        self.timeline.set_frame(frame)
        return frame

    def pointer_down(self, x: float) -> int:
        self.dragging = True
        return self.seek(x)

    def pointer_move(self, x: float) -> int | None:
        if not self.dragging:
            return None
        return self.seek(x)

    def pointer_up(self) -> None:
        self.dragging = False


def resolve_wheel_zoom(zoom: float, delta_y: float, modifier: bool) -> float | None:
    """
    Zoom for one wheel notch, or ``None`` when the gesture is not a zoom.

    Scrolling down zooms out; without the modifier the wheel is left for
    ordinary scrolling.
    """
    if not modifier:
        return None
    delta = -ZOOM_STEP if delta_y > 0 else ZOOM_STEP
    return clamp_zoom(zoom + delta)


def apply_wheel(timeline: Timeline, delta_y: float, modifier: bool) -> bool:
    zoom = resolve_wheel_zoom(timeline.zoom, delta_y, modifier)
    if zoom is None:
        return False
    timeline.set_zoom(zoom)
    return True


@dataclass(frozen=True, slots=True)
class KeyEvent:
    key: str
    ctrl: bool = False
    meta: bool = False
    in_text_entry: bool = False

    @property
    def modifier(self) -> bool:
        return self.ctrl or self.meta


def toggle_playback(timeline: Timeline) -> None:
    """Pause when playing; otherwise rewind a completed pass and play."""
    if timeline.is_playing:
        timeline.pause()
        return
    if timeline.progress >= 1:
        timeline.reset()
    timeline.play()


def resolve_key(timeline: Timeline, event: KeyEvent) -> bool:
    """
    Run the command bound to a key.

    Returns:
        True when the key was handled and its default action must be suppressed
    """
    if event.in_text_entry:
        return False

    if event.key == "ArrowLeft":
        if event.modifier:
            timeline.jump_to_percent(max(0, timeline.progress * 100 - KEYBOARD_JUMP_PERCENT))
        else:
            timeline.step_backward(1)
    elif event.key == "ArrowRight":
        if event.modifier:
            timeline.jump_to_percent(min(100, timeline.progress * 100 + KEYBOARD_JUMP_PERCENT))
        else:
            timeline.step_forward(1)
    elif event.key == " ":
        toggle_playback(timeline)
    elif event.key == "Home":
        timeline.set_frame(0)
    elif event.key == "End":
        timeline.set_frame(timeline.last_frame)
    else:
        return False
    return True
