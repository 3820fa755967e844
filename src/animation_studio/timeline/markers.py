"""Zoom-dependent frame marker density for the scrubber track."""

import math
from dataclasses import dataclass

from ..constants import (
    MARKER_LABEL_MAX_STEP,
    MARKER_MAJOR_MAX_STEP,
    MARKER_MIN_SPACING,
    MARKER_TRACK_WIDTH,
)
from .engine import clamp_zoom


@dataclass(frozen=True, slots=True)
class FrameMarkers:
    frames: tuple[int, ...]
    step: int

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)


def max_markers(zoom: float) -> int:
    """Number of markers that fit the track at this zoom."""
    return math.floor(MARKER_TRACK_WIDTH * clamp_zoom(zoom) / MARKER_MIN_SPACING)


def frame_markers(total_frames: int, zoom: float) -> FrameMarkers:
    """
    Pick the frames that get a tick on the scrubber.

    Markers are spaced by a fixed stride starting at frame 0; the last
    frame is always appended, so the count is at most ``max_markers + 1``.
    Higher zoom never yields a larger stride.
    """
    total_frames = max(1, total_frames)
    step = max(1, math.ceil(total_frames / max_markers(zoom)))
    frames = list(range(0, total_frames, step))
    if frames[-1] != total_frames - 1:
        frames.append(total_frames - 1)
    return FrameMarkers(frames=tuple(frames), step=step)


def marker_position(frame: int, total_frames: int) -> float:
    """Horizontal marker position as a percentage of the track width."""
    if total_frames <= 1:
        return 0.0
    return frame / (total_frames - 1) * 100


def show_label(frame: int, step: int, total_frames: int) -> bool:
    return (
        step <= MARKER_LABEL_MAX_STEP
        or frame == 0
        or frame == total_frames - 1
        or frame % (step * 2) == 0
    )


def is_major_tick(frame: int, step: int) -> bool:
    return step <= MARKER_MAJOR_MAX_STEP or frame % (step * 2) == 0
