"""Named easing presets selectable in the curve editor."""

from dataclasses import dataclass

from .bezier import BezierCurve


@dataclass(frozen=True, slots=True)
class CurvePreset:
    name: str
    curve: BezierCurve


# Bounce and Elastic overshoot the drag bounds on purpose; presets are assigned verbatim.
PRESETS: tuple[CurvePreset, ...] = (
    CurvePreset("Linear", BezierCurve(0, 0, 1, 1)),
    CurvePreset("Ease", BezierCurve(0.25, 0.1, 0.25, 1)),
    CurvePreset("Ease In", BezierCurve(0.42, 0, 1, 1)),
    CurvePreset("Ease Out", BezierCurve(0, 0, 0.58, 1)),
    CurvePreset("Ease In Out", BezierCurve(0.42, 0, 0.58, 1)),
    CurvePreset("Bounce", BezierCurve(0.68, -0.55, 0.265, 1.55)),
    CurvePreset("Elastic", BezierCurve(0.68, -0.6, 0.32, 1.6)),
)

DEFAULT_PRESET_NAME = "Ease"


def preset_names() -> tuple[str, ...]:
    """Return preset names in display order."""
    return tuple(preset.name for preset in PRESETS)


def find_preset(name: str) -> CurvePreset:
    """Look up a preset by name (case-insensitive)."""
    for preset in PRESETS:
        if preset.name.lower() == name.lower():
            return preset
    available = ", ".join(preset_names())
    raise KeyError(f"Unknown preset '{name}'. Available: {available}")


def matching_preset(curve: BezierCurve) -> CurvePreset | None:
    """Return the preset with exactly these control values, if any."""
    for preset in PRESETS:
        if preset.curve.as_tuple() == curve.as_tuple():
            return preset
    return None
