"""Registry of animatable components and their default animation settings."""

from dataclasses import dataclass, field

from .curves import BezierCurve, find_preset
from .timeline.config import ColorConfig

DEFAULT_COMPONENT_ID = "gooey-toggle"


@dataclass(frozen=True)
class AnimatableComponent:
    id: str
    name: str
    description: str
    default_duration: int
    default_bezier: BezierCurve
    default_colors: ColorConfig = field(default_factory=ColorConfig)


COMPONENT_REGISTRY: dict[str, AnimatableComponent] = {
    "gooey-toggle": AnimatableComponent(
        id="gooey-toggle",
        name="Gooey Toggle",
        description="Liquid toggle switch with morphing animation",
        default_duration=500,
        default_bezier=find_preset("Ease").curve,
    ),
    "gooey-checkbox": AnimatableComponent(
        id="gooey-checkbox",
        name="Gooey Checkbox",
        description="Checkbox with morphing checkmark animation",
        default_duration=400,
        default_bezier=find_preset("Bounce").curve,
    ),
}


def component_ids() -> tuple[str, ...]:
    """Return registered component IDs in deterministic order."""
    return tuple(COMPONENT_REGISTRY.keys())


def get_component(component_id: str) -> AnimatableComponent:
    """Look up a registered component by ID."""
    component = COMPONENT_REGISTRY.get(component_id)
    if component is None:
        available = ", ".join(component_ids())
        raise KeyError(f"Unknown component '{component_id}'. Available: {available}")
    return component
