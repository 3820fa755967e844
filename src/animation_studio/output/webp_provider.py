"""WebP output provider."""

from .base import OutputProvider


class WebPOutputProvider(OutputProvider):
    """Output provider for lossless animated WebP."""

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {"lossless": True, "quality": 80, "method": 4}
