"""Offline playback of one studio pass, shared by the CLI render and inspect commands."""

from typing import Iterator

from PIL import Image

from .constants import DEFAULT_ZOOM, FRAME_DURATION_MS
from .components import DEFAULT_COMPONENT_ID
from .output import resolve_output_provider
from .output.base import OutputProvider
from .preview import RenderContext, Renderer
from .studio import AnimationStudio, ComparisonFrame
from .timeline import AnimationConfig, ManualScheduler


def create_offline_studio(
    config: AnimationConfig | None = None,
    component_id: str = DEFAULT_COMPONENT_ID,
) -> tuple[AnimationStudio, ManualScheduler]:
    """Create a studio driven by a deterministic clock."""
    scheduler = ManualScheduler()
    studio = AnimationStudio(scheduler, component_id=component_id, config=config)
    return studio, scheduler


def iter_comparison_timeline(
    studio: AnimationStudio,
    scheduler: ManualScheduler,
    max_frames: int | None = None,
) -> Iterator[ComparisonFrame]:
    """Play one pass and yield the comparison after every committed tick."""
    studio.handle_play()
    rendered = 0
    try:
        while studio.timeline.is_playing:
            if max_frames is not None and rendered >= max_frames:
                break
            if scheduler.advance(FRAME_DURATION_MS) == 0:
                break
            yield studio.comparison()
            rendered += 1
    finally:
        studio.close()


def generate_raster_frames(
    frames: Iterator[ComparisonFrame], zoom: float = DEFAULT_ZOOM
) -> Iterator[Image.Image]:
    """Render comparison frames with Pillow."""
    renderer = Renderer(RenderContext.darkmode(), zoom=zoom)
    for frame in frames:
        yield renderer.render_frame(frame)


def create_preview_provider(config: AnimationConfig, output_path: str) -> OutputProvider:
    """Resolve the provider for ``output_path``, looping as often as the config toggles."""
    loop = 0 if config.infinite_loop else config.toggle_count
    return resolve_output_provider(output_path, loop=loop)


def encode_preview(
    config: AnimationConfig,
    output_path: str,
    *,
    component_id: str = DEFAULT_COMPONENT_ID,
    zoom: float = DEFAULT_ZOOM,
    max_frames: int | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """Encode a preview animation of one playback pass for the given output path."""
    target_provider = provider or create_preview_provider(config, output_path)
    studio, scheduler = create_offline_studio(config, component_id)
    comparisons = iter_comparison_timeline(studio, scheduler, max_frames)
    return target_provider.encode(
        generate_raster_frames(comparisons, zoom=zoom),
        frame_duration=round(FRAME_DURATION_MS),
    )
