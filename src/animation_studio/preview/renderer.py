"""Renderer for drawing comparison frames using Pillow."""

from PIL import Image, ImageDraw, ImageFont

from ..curves import BezierCurve, GraphGeometry
from ..studio import ComparisonFrame, RenderProps
from ..timeline.markers import frame_markers, is_major_tick, marker_position, show_label
from .render_context import Color, RenderContext, hex_to_rgb

CURVE_SEGMENTS = 48


def _curve_point(curve: BezierCurve, t: float) -> tuple[float, float]:
    """Point on the drawn bezier path at parameter ``t``."""
    mt = 1 - t
    x = 3 * mt * mt * t * curve.x1 + 3 * mt * t * t * curve.x2 + t * t * t
    y = 3 * mt * mt * t * curve.y1 + 3 * mt * t * t * curve.y2 + t * t * t
    return x, y


class Renderer:
    """Renders comparison frames as PIL Images."""

    def __init__(self, render_context: RenderContext, zoom: float = 1.0):
        """
        Initialize renderer.

        Args:
            render_context: Rendering configuration and theming
            zoom: Scrubber zoom used for frame marker density
        """
        self.context = render_context
        self.zoom = zoom

        ctx = self.context
        self.width = max(2 * ctx.panel_width + 3 * ctx.padding, ctx.graph_size + 2 * ctx.padding)
        self.graph_top = ctx.padding * 2 + ctx.panel_height
        self.track_top = self.graph_top + ctx.graph_size + ctx.padding + 14
        self.height = self.track_top + ctx.track_height + ctx.padding
        self.font = ImageFont.load_default()

    def render_frame(self, frame: ComparisonFrame) -> Image.Image:
        """
        Render one comparison frame.

        Returns:
            PIL Image of the frame
        """
        img = Image.new("RGB", (self.width, self.height), self.context.background_color)
        draw = ImageDraw.Draw(img)

        ctx = self.context
        self._draw_panel(draw, frame, frame.reference, ctx.padding, "Original")
        self._draw_panel(draw, frame, frame.edited, ctx.padding * 2 + ctx.panel_width, "Edited")
        self._draw_graph(draw, frame)
        self._draw_track(draw, frame)

        return img.convert("P", palette=Image.Palette.ADAPTIVE)

    def _draw_panel(
        self,
        draw: ImageDraw.ImageDraw,
        frame: ComparisonFrame,
        props: RenderProps,
        left: int,
        title: str,
    ) -> None:
        """Draw a toggle whose knob travels along the side's easing curve."""
        ctx = self.context
        top = ctx.padding
        draw.rectangle(
            (left, top, left + ctx.panel_width, top + ctx.panel_height),
            fill=ctx.panel_color,
            outline=ctx.edited_curve_color if props.is_edited else ctx.grid_color,
        )
        draw.text((left + 8, top + 6), title.upper(), font=self.font, fill=ctx.muted_color)

        track_w, track_h = 96, 40
        track_x = left + (ctx.panel_width - track_w) // 2
        track_y = top + (ctx.panel_height - track_h) // 2 + 6
        eased = props.bezier.sample_y(frame.progress)
        amount = eased if frame.checked else 1 - eased

        track_color = self._blend(
            hex_to_rgb(props.colors["default"]), hex_to_rgb(props.colors["active"]), amount
        )
        draw.rounded_rectangle(
            (track_x, track_y, track_x + track_w, track_y + track_h),
            radius=track_h // 2,
            fill=track_color,
        )

        knob = track_h - 8
        travel = track_w - knob - 8
        knob_x = track_x + 4 + travel * amount
        draw.ellipse(
            (knob_x, track_y + 4, knob_x + knob, track_y + 4 + knob),
            fill=hex_to_rgb(props.colors["knob"]),
        )

    def _draw_graph(self, draw: ImageDraw.ImageDraw, frame: ComparisonFrame) -> None:
        ctx = self.context
        left = (self.width - ctx.graph_size) // 2
        top = self.graph_top
        size = ctx.graph_size
        geometry = GraphGeometry(size)
        inner = geometry.inner_size

        def to_px(x: float, y: float) -> tuple[float, float]:
            gx, gy = geometry.to_graph(x, y)
            return left + gx, top + gy

        draw.rectangle((left, top, left + size, top + size), fill=ctx.panel_color)
        for i in range(0, inner + 1, geometry.padding):
            x0, y0 = to_px(i / inner, 0)
            draw.line((x0, top + geometry.padding, x0, y0), fill=ctx.grid_color)
            gx, gy = to_px(0, i / inner)
            draw.line((gx, gy, gx + inner, gy), fill=ctx.grid_color)
        draw.line((*to_px(0, 0), *to_px(1, 1)), fill=ctx.grid_color)

        if frame.progress > 0:
            draw.line((*to_px(frame.progress, 0), *to_px(frame.progress, 1)), fill=ctx.muted_color)

        for props, color, width in (
            (frame.reference, ctx.reference_curve_color, 1),
            (frame.edited, ctx.edited_curve_color, 2),
        ):
            points = [
                to_px(*_curve_point(props.bezier, i / CURVE_SEGMENTS))
                for i in range(CURVE_SEGMENTS + 1)
            ]
            draw.line(points, fill=color, width=width)

        if frame.dots is not None:
            reference_y, edited_y = frame.dots
            self._dot(draw, to_px(frame.progress, reference_y), 5, ctx.reference_curve_color)
            self._dot(draw, to_px(frame.progress, edited_y), 6, ctx.edited_curve_color)

    def _draw_track(self, draw: ImageDraw.ImageDraw, frame: ComparisonFrame) -> None:
        ctx = self.context
        left = ctx.padding
        width = self.width - 2 * ctx.padding
        top = self.track_top
        bottom = top + ctx.track_height

        label = f"{frame.frame} / {frame.total_frames - 1}"
        draw.text((left, top - 14), label, font=self.font, fill=ctx.text_color)

        draw.rectangle((left, top, left + width, bottom), fill=ctx.panel_color)
        draw.rectangle((left, top, left + width * frame.progress, bottom), fill=ctx.grid_color)

        markers = frame_markers(frame.total_frames, self.zoom)
        for marker in markers:
            x = left + width * marker_position(marker, frame.total_frames) / 100
            tick = 12 if is_major_tick(marker, markers.step) else 8
            draw.line((x, bottom - tick, x, bottom), fill=ctx.muted_color)
            if show_label(marker, markers.step, frame.total_frames):
                draw.text((x + 2, top + 2), str(marker), font=self.font, fill=ctx.muted_color)

        playhead = left + width * frame.progress
        draw.line((playhead, top, playhead, bottom), fill=ctx.playhead_color, width=2)

    @staticmethod
    def _dot(draw: ImageDraw.ImageDraw, center: tuple[float, float], radius: int, color: Color) -> None:
        x, y = center
        draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)

    @staticmethod
    def _blend(start: Color, end: Color, amount: float) -> Color:
        amount = max(0.0, min(1.0, amount))
        return tuple(round(a + (b - a) * amount) for a, b in zip(start, end))  # type: ignore[return-value]
