"""CLI interface for animation-studio."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, Progress, TextColumn

from .animation_pipeline import create_offline_studio, create_preview_provider, encode_preview
from .components import DEFAULT_COMPONENT_ID, component_ids, get_component
from .console_printer import StudioConsolePrinter
from .constants import DEFAULT_ZOOM, FPS
from .curves import BezierCurve, find_preset, preset_names
from .output import supported_output_formats
from .studio import AnimationStudio
from .timeline import AnimationConfig, RealtimeScheduler

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

app = typer.Typer(help="Frame-accurate animation timeline and easing curve studio.")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


ComponentOption = typer.Option(
    DEFAULT_COMPONENT_ID,
    "--component",
    "-c",
    envvar="ANIMATION_STUDIO_COMPONENT",
    help=f"Component to animate ({', '.join(component_ids())})",
)
DurationOption = typer.Option(
    None,
    "--duration",
    "-d",
    envvar="ANIMATION_STUDIO_DURATION",
    help="Animation duration in milliseconds (100-3000, defaults to the component's)",
)
SpeedOption = typer.Option(
    1.0, "--speed", envvar="ANIMATION_STUDIO_SPEED", help="Playback speed multiplier (0.1-4)"
)
DelayOption = typer.Option(500, "--delay", help="Delay between toggles in milliseconds (0-2000)")
ToggleCountOption = typer.Option(2, "--toggles", help="Number of toggles (1-16)")
InfiniteOption = typer.Option(False, "--infinite", help="Loop toggles forever")
PresetOption = typer.Option(
    None, "--preset", "-p", help=f"Easing preset ({', '.join(preset_names())})"
)
BezierOption = typer.Option(
    None, "--bezier", "-b", help="Custom easing as x1,y1,x2,y2 (overrides --preset)"
)
ZoomOption = typer.Option(
    DEFAULT_ZOOM, "--zoom", "-z", envvar="ANIMATION_STUDIO_ZOOM", help="Scrubber zoom (0.5-4)"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log timeline transitions")


@app.command()
def inspect(
    component: str = ComponentOption,
    duration: int | None = DurationOption,
    speed: float = SpeedOption,
    delay: int = DelayOption,
    toggles: int = ToggleCountOption,
    infinite: bool = InfiniteOption,
    preset: str | None = PresetOption,
    bezier: str | None = BezierOption,
    zoom: float = ZoomOption,
    frame: int | None = typer.Option(None, "--frame", "-f", help="Seek to this frame first"),
    percent: float | None = typer.Option(
        None, "--percent", help="Seek to this percentage of the pass first"
    ),
    verbose: bool = VerboseOption,
) -> None:
    """
    Print timeline statistics, frame markers, easing samples and generated CSS.

    Examples:
      # Inspect the default toggle at half speed
      animation-studio inspect --speed 0.5

      # Compare a bounce curve at frame 12
      animation-studio inspect --preset bounce --frame 12
    """
    try:
        _configure_logging(verbose)
        config = _build_config(component, duration, speed, delay, toggles, infinite, preset, bezier)
        studio, _scheduler = create_offline_studio(config, component)
        studio.timeline.set_zoom(zoom)
        if frame is not None:
            studio.timeline.set_frame(frame)
        elif percent is not None:
            studio.timeline.jump_to_percent(percent)

        printer = StudioConsolePrinter(console)
        printer.display_stats(studio)
        printer.display_markers(studio)
        printer.display_curves(studio)
        dots = studio.curve_editor.progress_dots(studio.timeline.progress)
        if dots is not None:
            console.print(
                f"Progress dots at {studio.timeline.progress:.3f}: "
                f"original {dots[0]:.3f}, edited {dots[1]:.3f}"
            )
        printer.display_css(studio)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def render(
    out: str = typer.Option(
        None,
        "--output",
        "-out",
        "-o",
        help=f"Output file for the preview animation ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    component: str = ComponentOption,
    duration: int | None = DurationOption,
    speed: float = SpeedOption,
    delay: int = DelayOption,
    toggles: int = ToggleCountOption,
    infinite: bool = InfiniteOption,
    preset: str | None = PresetOption,
    bezier: str | None = BezierOption,
    zoom: float = ZoomOption,
    max_frames: int | None = typer.Option(
        None, "--max-frame", help="Maximum number of frames to generate"
    ),
    verbose: bool = VerboseOption,
) -> None:
    """Render one playback pass of the original/edited comparison to GIF or WebP."""
    try:
        _configure_logging(verbose)
        config = _build_config(component, duration, speed, delay, toggles, infinite, preset, bezier)
        output_path = out or f"{component}-preview.gif"

        if output_path.lower().endswith(".gif"):
            console.print(
                f"[yellow]Warning:[/yellow] {FPS} FPS exceeds what browsers play back for GIF "
                f"(delays < 20ms are clamped to ~100ms); prefer .webp for true speed"
            )

        ext = Path(output_path).suffix[1:].upper()
        console.print(f"[bold blue]Generating {ext} preview...[/bold blue]")
        try:
            provider = create_preview_provider(config, output_path)
            encoded = encode_preview(
                config,
                output_path,
                component_id=component,
                zoom=zoom,
                max_frames=max_frames,
                provider=provider,
            )
        except ValueError as e:
            raise CLIError(str(e))

        console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
        try:
            provider.write(encoded)
        except OSError as e:
            raise CLIError(f"Failed to save file '{output_path}': {e}")
        console.print(f"[green]✓[/green] {ext} saved to {output_path}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def play(
    component: str = ComponentOption,
    duration: int | None = DurationOption,
    speed: float = SpeedOption,
    preset: str | None = PresetOption,
    bezier: str | None = BezierOption,
    verbose: bool = VerboseOption,
) -> None:
    """Play one pass in real time, showing original and edited easing side by side."""
    try:
        _configure_logging(verbose)
        config = _build_config(component, duration, speed, 500, 2, False, preset, bezier)
        scheduler = RealtimeScheduler()
        studio = AnimationStudio(scheduler, component_id=component, config=config)
        _run_realtime(studio, scheduler)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


def _run_realtime(studio: AnimationStudio, scheduler: RealtimeScheduler) -> None:
    columns = (
        TextColumn("{task.description}", justify="right"),
        BarColumn(bar_width=40),
        TextColumn("{task.percentage:>3.0f}%"),
    )
    with Progress(*columns, console=console) as progress:
        timeline_task = progress.add_task("Timeline", total=1.0)
        original_task = progress.add_task("Original", total=1.0)
        edited_task = progress.add_task("Edited", total=1.0)

        def on_frame_change(frame: int, value: float) -> None:
            editor = studio.curve_editor
            progress.update(timeline_task, completed=value, description=f"Frame {frame:>3}")
            progress.update(original_task, completed=editor.reference.sample_y(value))
            progress.update(edited_task, completed=editor.edited.sample_y(value))

        studio.timeline.on_frame_change = on_frame_change
        studio.handle_play()
        try:
            scheduler.run_until_idle()
        except KeyboardInterrupt:
            studio.timeline.pause()
        finally:
            studio.close()

    console.print(f"[green]✓[/green] {studio.timeline.frame_label()}")


def _build_config(
    component_id: str,
    duration: int | None,
    speed: float,
    delay: int,
    toggles: int,
    infinite: bool,
    preset: str | None,
    bezier: str | None,
) -> AnimationConfig:
    """Build a clamped AnimationConfig from CLI options."""
    try:
        component = get_component(component_id)
    except KeyError as e:
        raise CLIError(e.args[0])

    curve = component.default_bezier
    if bezier:
        curve = _parse_bezier(bezier)
    elif preset:
        try:
            curve = find_preset(preset).curve
        except KeyError as e:
            raise CLIError(e.args[0])

    return AnimationConfig(
        duration=duration if duration is not None else component.default_duration,
        delay=delay,
        toggle_count=toggles,
        infinite_loop=infinite,
        bezier=curve,
        speed=speed,
    ).clamped()


def _parse_bezier(text: str) -> BezierCurve:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 4:
        raise CLIError(f"Bezier must have four comma-separated values, got '{text}'")
    try:
        values = tuple(float(part) for part in parts)
    except ValueError:
        raise CLIError(f"Bezier values must be numbers, got '{text}'")
    return BezierCurve.from_values(values).clamped()  # type: ignore[arg-type]


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
