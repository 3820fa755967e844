"""GIF output provider."""

from .base import OutputProvider


class GifOutputProvider(OutputProvider):
    """Output provider for GIF format."""

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        # Frames share an adaptive palette; disposal 2 clears between frames.
        return {"optimize": False, "disposal": 2}
