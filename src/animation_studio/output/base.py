"""Base class for preview output providers."""

from abc import ABC, abstractmethod
from io import BytesIO
from typing import Iterator

from PIL import Image


class OutputProvider(ABC):
    """Encodes a sequence of rendered preview frames into one file format."""

    def __init__(self, path: str = "", loop: int = 0):
        """
        Initialize the provider.

        Args:
            path: Path to the output file
            loop: Number of times the animation repeats (0 repeats forever)
        """
        self.path = path
        self.loop = loop

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Rendered preview frames
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded output as bytes, empty when there are no frames
        """
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=frame_duration,
            loop=self.loop,
            **self.save_options,
        )
        return buffer.getvalue()

    def write(self, data: bytes) -> None:
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)
