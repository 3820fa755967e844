"""Rendering configuration and theming for preview frames."""

from dataclasses import dataclass

Color = tuple[int, int, int]


def hex_to_rgb(value: str) -> Color:
    """Convert ``#rrggbb`` (or ``#rgb``) to an RGB tuple."""
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: #{value}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


@dataclass(frozen=True)
class RenderContext:
    """Layout and palette of a preview frame."""

    background_color: Color
    panel_color: Color
    grid_color: Color
    text_color: Color
    muted_color: Color
    reference_curve_color: Color
    edited_curve_color: Color
    playhead_color: Color
    panel_width: int = 200
    panel_height: int = 120
    graph_size: int = 240
    track_height: int = 32
    padding: int = 16

    @staticmethod
    def darkmode() -> "RenderContext":
        return RenderContext(
            background_color=(10, 10, 10),
            panel_color=(23, 23, 23),
            grid_color=(42, 42, 42),
            text_color=(229, 229, 229),
            muted_color=(115, 115, 115),
            reference_curve_color=(85, 85, 85),
            edited_curve_color=(255, 255, 255),
            playhead_color=(255, 255, 255),
        )
