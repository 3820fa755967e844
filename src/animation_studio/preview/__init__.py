"""Pillow preview of the side-by-side comparison."""

from .render_context import RenderContext, hex_to_rgb
from .renderer import Renderer

__all__ = ["RenderContext", "Renderer", "hex_to_rgb"]
