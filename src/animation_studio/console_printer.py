"""Rich console output for timeline and curve inspection."""

from rich.console import Console
from rich.table import Table

from .curves import PRESETS
from .studio import AnimationStudio
from .timeline.markers import frame_markers, show_label


class StudioConsolePrinter:
    """Prints studio state as rich tables."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, studio: AnimationStudio) -> None:
        timeline = studio.timeline
        config = studio.config

        table = Table(title=f"{studio.component.name} timeline", show_header=False)
        table.add_column("Field", style="dim")
        table.add_column("Value", style="bold")
        table.add_row("Frame", timeline.frame_label())
        table.add_row("Total frames", str(timeline.total_frames))
        table.add_row("FPS", str(timeline.fps))
        table.add_row("Toggle count", studio.toggle_label())
        table.add_row("Speed", f"{config.speed:g}x")
        duration = f"{round(config.effective_duration)}ms"
        if config.speed != 1:
            duration += f" (base: {config.duration}ms)"
        table.add_row("Effective duration", duration)
        table.add_row("Delay", f"{config.delay}ms")
        table.add_row("Zoom", f"{timeline.zoom:.1f}x")
        self.console.print(table)

    def display_markers(self, studio: AnimationStudio) -> None:
        timeline = studio.timeline
        markers = frame_markers(timeline.total_frames, timeline.zoom)
        labels = [
            str(frame) if show_label(frame, markers.step, timeline.total_frames) else "·"
            for frame in markers
        ]
        self.console.print(
            f"\n[bold]Frame markers[/bold] (step {markers.step}, {len(markers)} ticks)"
        )
        self.console.print(" ".join(labels))

    def display_curves(self, studio: AnimationStudio, samples: int = 5) -> None:
        editor = studio.curve_editor
        table = Table(title="Easing curves")
        table.add_column("t", justify="right")
        table.add_column("Original", justify="right")
        table.add_column("Edited", justify="right")
        for i in range(samples + 1):
            t = i / samples
            table.add_row(
                f"{t:.2f}",
                f"{editor.reference.sample_y(t):.3f}",
                f"{editor.edited.sample_y(t):.3f}",
            )
        self.console.print(table)

        active = editor.active_preset or "custom"
        self.console.print(f"Edited curve: [bold]{editor.edited.css()}[/bold] ({active})")
        self.console.print(
            "Presets: " + ", ".join(f"{p.name} {p.curve.css()}" for p in PRESETS)
        )

    def display_css(self, studio: AnimationStudio) -> None:
        self.console.print("\n[bold]Generated CSS[/bold]")
        self.console.print(studio.css_transition(), highlight=False)
