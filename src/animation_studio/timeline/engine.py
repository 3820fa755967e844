"""Frame-accurate timeline state machine."""

import logging
import math
from dataclasses import dataclass
from typing import Callable

from ..constants import DEFAULT_ZOOM, FPS, MAX_ZOOM, MIN_ZOOM, ZOOM_STEP
from .config import TimelineConfig
from .scheduler import Scheduler, TickHandle

logger = logging.getLogger(__name__)

FrameListener = Callable[[int, float], None]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def clamp_frame(frame: float, last_frame: int) -> int:
    """Clamp a requested frame into ``[0, last_frame]``; NaN maps to 0."""
    if math.isnan(frame):
        return 0
    return int(max(0, min(frame, last_frame)))


def clamp_zoom(zoom: float) -> float:
    return max(MIN_ZOOM, min(MAX_ZOOM, zoom))


def frame_to_progress(frame: int, total_frames: int) -> float:
    if total_frames <= 1:
        return 0.0
    return frame / (total_frames - 1)


def progress_to_frame(progress: float, total_frames: int) -> int:
    return math.floor(progress * (total_frames - 1))


@dataclass(frozen=True, slots=True)
class TimelineSnapshot:
    """Read-only view of the timeline at one moment."""

    current_frame: int
    total_frames: int
    progress: float
    is_playing: bool
    zoom: float

    @property
    def is_completed(self) -> bool:
        return not self.is_playing and self.progress >= 1


class Timeline:
    """
    Converts a duration into a discrete frame sequence and plays it back.

    Playback advances through a chain of scheduler callbacks, one outstanding
    at a time. Explicit commands (pause, reset, set_frame) cancel the pending
    callback before they commit, so a late tick never overwrites a scrub.
    """

    def __init__(
        self,
        config: TimelineConfig,
        scheduler: Scheduler,
        on_frame_change: FrameListener | None = None,
    ):
        """
        Initialize timeline.

        Args:
            config: Duration and speed of one playback pass
            scheduler: Source of per-refresh callbacks and clock readings
            on_frame_change: Called with ``(frame, progress)`` on every committed change
        """
        self._config = config
        self.scheduler = scheduler
        self.on_frame_change = on_frame_change

        self._total_frames = config.total_frames
        self._current_frame = 0
        self._progress = 0.0
        self._is_playing = False
        self._zoom = DEFAULT_ZOOM

        # Playback anchor
        self._start_time: float | None = None
        self._paused_progress = 0.0
        self._tick_handle: TickHandle | None = None

    # Read-only state

    @property
    def config(self) -> TimelineConfig:
        return self._config

    @property
    def fps(self) -> int:
        return FPS

    @property
    def effective_duration(self) -> float:
        return self._config.effective_duration

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def total_frames(self) -> int:
        return self._total_frames

    @property
    def last_frame(self) -> int:
        return self._total_frames - 1

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def is_completed(self) -> bool:
        return not self._is_playing and self._progress >= 1

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def can_zoom_in(self) -> bool:
        return self._zoom < MAX_ZOOM

    @property
    def can_zoom_out(self) -> bool:
        return self._zoom > MIN_ZOOM

    @property
    def has_pending_tick(self) -> bool:
        return self._tick_handle is not None and self._tick_handle.active

    def snapshot(self) -> TimelineSnapshot:
        return TimelineSnapshot(
            current_frame=self._current_frame,
            total_frames=self._total_frames,
            progress=self._progress,
            is_playing=self._is_playing,
            zoom=self._zoom,
        )

    def frame_label(self) -> str:
        return f"{self._current_frame} / {self.last_frame} ({round_half_up(self._progress * 100)}%)"

    # Commands

    def play(self) -> None:
        """
        Start or resume playback from the paused position.

        Does not rewind a completed timeline; call ``reset`` first to replay.
        """
        if self._is_playing:
            return
        self._is_playing = True
        self._start_time = None
        logger.debug("Play from progress %.4f", self._paused_progress)
        self._schedule_tick()

    def pause(self) -> None:
        self._cancel_tick()
        self._paused_progress = self._progress
        self._is_playing = False
        self._start_time = None
        logger.debug("Paused at progress %.4f", self._progress)

    def reset(self) -> None:
        self.pause()
        self._paused_progress = 0.0
        self._commit(0, 0.0)

    def set_frame(self, frame: float) -> None:
        """Stop playback and jump to ``frame`` (clamped into range)."""
        self._cancel_tick()
        clamped = clamp_frame(frame, self.last_frame)
        progress = frame_to_progress(clamped, self._total_frames)
        self._is_playing = False
        self._paused_progress = progress
        self._start_time = None
        self._commit(clamped, progress)

    def step_forward(self, frames: int = 1) -> None:
        self.set_frame(self._current_frame + frames)

    def step_backward(self, frames: int = 1) -> None:
        self.set_frame(self._current_frame - frames)

    def jump_to_percent(self, percent: float) -> None:
        percent = 0.0 if math.isnan(percent) else max(0.0, min(100.0, percent))
        self.set_frame(round_half_up((percent / 100) * self.last_frame))

    def set_zoom(self, zoom: float) -> None:
        self._zoom = clamp_zoom(zoom)

    def zoom_in(self) -> None:
        self.set_zoom(self._zoom + ZOOM_STEP)

    def zoom_out(self) -> None:
        self.set_zoom(self._zoom - ZOOM_STEP)

    def update_config(self, config: TimelineConfig) -> None:
        """
        Replace the configuration and re-derive the frame count.

        While idle, the frame is clamped into the new range and progress
        follows it. While playing, playback continues from the same progress
        under the new duration.
        """
        if config == self._config:
            return
        self._config = config
        self._total_frames = config.total_frames
        logger.debug(
            "Config replaced: %.1fms effective, %d frames",
            config.effective_duration,
            self._total_frames,
        )

        if self._is_playing:
            self._paused_progress = self._progress
            self._start_time = None
            self._current_frame = min(self._current_frame, self.last_frame)
            return

        frame = min(self._current_frame, self.last_frame)
        if self._progress >= 1:
            frame = self.last_frame
        progress = frame_to_progress(frame, self._total_frames)
        self._paused_progress = progress
        if (frame, progress) != (self._current_frame, self._progress):
            self._commit(frame, progress)

    def tick(self, now: float) -> None:
        """Advance playback to the clock reading ``now`` (milliseconds)."""
        self._tick_handle = None
        if not self._is_playing:
            return

        duration = self._config.effective_duration
        if self._start_time is None:
            self._start_time = now - self._paused_progress * duration

        elapsed = now - self._start_time
        progress = min(max(elapsed / duration, 0.0), 1.0) if duration > 0 else 1.0
        if progress >= 1:
            self._is_playing = False
            self._paused_progress = 1.0
            self._start_time = None
            logger.debug("Playback completed after %.1fms", elapsed)
        self._commit(progress_to_frame(progress, self._total_frames), progress)

        # The observer may have paused, scrubbed or completed playback.
        if self._is_playing and self._tick_handle is None:
            self._schedule_tick()

    def close(self) -> None:
        """Cancel any outstanding tick; the timeline stays readable."""
        self._cancel_tick()

    # Internals

    def _schedule_tick(self) -> None:
        self._cancel_tick()
        self._tick_handle = self.scheduler.request(self.tick)

    def _cancel_tick(self) -> None:
        if self._tick_handle is not None:
            self.scheduler.cancel(self._tick_handle)
            self._tick_handle = None

    def _commit(self, frame: int, progress: float) -> None:
        self._current_frame = frame
        self._progress = progress
        if self.on_frame_change is not None:
            self.on_frame_change(frame, progress)
