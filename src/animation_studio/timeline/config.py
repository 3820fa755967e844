"""Immutable timeline and animation configuration snapshots."""

import math
from dataclasses import dataclass, field, replace
from typing import Any

from ..constants import (
    DEFAULT_COLORS,
    DELAY_RANGE,
    DURATION_RANGE,
    FPS,
    SPEED_RANGE,
    TOGGLE_COUNT_RANGE,
)
from ..curves import BezierCurve, find_preset, DEFAULT_PRESET_NAME


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(high, value))


@dataclass(frozen=True, slots=True)
class TimelineConfig:
    """Duration and speed of one playback pass; replaced wholesale on edit."""

    duration: float  # Milliseconds
    speed: float = 1.0

    @property
    def effective_duration(self) -> float:
        """Wall-clock span of one pass in milliseconds."""
        return self.duration / max(self.speed, SPEED_RANGE[0])

    @property
    def total_frames(self) -> int:
        return max(1, math.ceil((self.effective_duration / 1000) * FPS))


@dataclass(frozen=True, slots=True)
class ColorConfig:
    """Colour set handed to the render target."""

    active: str = DEFAULT_COLORS["active"]
    success: str = DEFAULT_COLORS["success"]
    warning: str = DEFAULT_COLORS["warning"]
    danger: str = DEFAULT_COLORS["danger"]
    default: str = DEFAULT_COLORS["default"]
    default_hover: str = DEFAULT_COLORS["default_hover"]
    knob: str = DEFAULT_COLORS["knob"]

    def for_variant(self, variant: str) -> dict[str, str]:
        """Colours consumed by a component: the variant's active colour, track and knob."""
        return {
            "active": getattr(self, variant),
            "default": self.default,
            "knob": self.knob,
        }


@dataclass(frozen=True, slots=True)
class AnimationConfig:
    """Externally editable animation parameters."""

    duration: int = 500  # Milliseconds
    delay: int = 500  # Milliseconds
    toggle_count: int = 2
    infinite_loop: bool = False
    bezier: BezierCurve = field(default_factory=lambda: find_preset(DEFAULT_PRESET_NAME).curve)
    speed: float = 1.0

    @property
    def effective_duration(self) -> float:
        return self.timeline_config().effective_duration

    def clamped(self) -> "AnimationConfig":
        """Return a copy with every numeric field inside its allowed range."""
        return replace(
            self,
            duration=int(_clamp(self.duration, DURATION_RANGE)),
            delay=int(_clamp(self.delay, DELAY_RANGE)),
            toggle_count=int(_clamp(self.toggle_count, TOGGLE_COUNT_RANGE)),
            speed=float(_clamp(self.speed, SPEED_RANGE)),
        )

    def with_changes(self, **changes: Any) -> "AnimationConfig":
        return replace(self, **changes).clamped()

    def timeline_config(self) -> TimelineConfig:
        return TimelineConfig(duration=self.duration, speed=self.speed)
