"""Studio session wiring one timeline clock to a reference and an edited animation."""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from .components import DEFAULT_COMPONENT_ID, AnimatableComponent, get_component
from .constants import ACTIVE_VARIANTS
from .curves import BezierCurve, CurveEditor
from .timeline import AnimationConfig, Timeline
from .timeline.scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderProps:
    """Animation inputs handed to one side of the comparison."""

    duration: float
    bezier: BezierCurve
    colors: dict[str, str]
    is_edited: bool


@dataclass(frozen=True)
class ComparisonFrame:
    """Both sides of the comparison sampled from the same clock."""

    checked: bool
    progress: float
    frame: int
    total_frames: int
    reference: RenderProps
    edited: RenderProps
    dots: tuple[float, float] | None


class AnimationStudio:
    """Edits one component's animation side by side with its reference."""

    def __init__(
        self,
        scheduler: Scheduler,
        component_id: str = DEFAULT_COMPONENT_ID,
        config: AnimationConfig | None = None,
    ):
        """
        Initialize the studio.

        Args:
            scheduler: Drives timeline playback
            component_id: Registered component whose defaults seed both configs
            config: Optional starting point for the edited config
        """
        self.component: AnimatableComponent = get_component(component_id)
        self.reference_config = AnimationConfig(
            duration=self.component.default_duration,
            bezier=self.component.default_bezier,
        ).clamped()
        self.reference_colors = self.component.default_colors
        self.config = (config or self.reference_config).clamped()
        self.colors = self.reference_colors
        self.active_variant = "active"

        self.checked = False
        self.current_toggle = 0

        self.timeline = Timeline(self.config.timeline_config(), scheduler)
        self.curve_editor = CurveEditor(
            self.reference_config.bezier,
            self.config.bezier,
            on_change=self._on_curve_change,
        )

    # Playback

    def handle_play(self) -> None:
        """Pause, or flip the checked state and play a new pass."""
        if self.timeline.is_playing:
            self.timeline.pause()
            return
        if self.timeline.progress >= 1:
            self.timeline.reset()
            self.checked = False
        self.checked = not self.checked
        self.current_toggle += 1
        logger.debug("Toggle %d -> checked=%s", self.current_toggle, self.checked)
        self.timeline.play()

    def handle_reset(self) -> None:
        self.timeline.reset()
        self.checked = False
        self.current_toggle = 0

    def close(self) -> None:
        self.timeline.close()

    # Configuration

    def update_config(self, **changes: Any) -> AnimationConfig:
        """Replace the edited config with a clamped copy carrying ``changes``."""
        self.config = self.config.with_changes(**changes)
        self.timeline.update_config(self.config.timeline_config())
        if "bezier" in changes and self.curve_editor.edited != self.config.bezier:
            self.curve_editor.set_curve(self.config.bezier)
        return self.config

    def update_color(self, key: str, value: str) -> None:
        names = [f.name for f in fields(self.colors)]
        if key not in names:
            raise KeyError(f"Unknown color '{key}'. Available: {', '.join(names)}")
        self.colors = replace(self.colors, **{key: value})

    def set_variant(self, variant: str) -> None:
        if variant not in ACTIVE_VARIANTS:
            available = ", ".join(ACTIVE_VARIANTS)
            raise ValueError(f"Unknown variant '{variant}'. Available: {available}")
        self.active_variant = variant

    def _on_curve_change(self, curve: BezierCurve) -> None:
        if curve != self.config.bezier:
            self.config = replace(self.config, bezier=curve)

    # Outputs

    def comparison(self) -> ComparisonFrame:
        progress = self.timeline.progress
        return ComparisonFrame(
            checked=self.checked,
            progress=progress,
            frame=self.timeline.current_frame,
            total_frames=self.timeline.total_frames,
            reference=RenderProps(
                duration=self.reference_config.duration / self.config.speed,
                bezier=self.reference_config.bezier,
                colors=self.reference_colors.for_variant(self.active_variant),
                is_edited=False,
            ),
            edited=RenderProps(
                duration=self.config.effective_duration,
                bezier=self.config.bezier,
                colors=self.colors.for_variant(self.active_variant),
                is_edited=True,
            ),
            dots=self.curve_editor.progress_dots(progress),
        )

    def css_transition(self) -> str:
        values = ", ".join(f"{v:g}" for v in self.config.bezier.as_tuple())
        return f"transition: all {self.config.duration}ms cubic-bezier({values});"

    def toggle_label(self) -> str:
        total = "∞" if self.config.infinite_loop else str(self.config.toggle_count)
        return f"{self.current_toggle} / {total}"
