"""
PNG Renderer module for graph visualization.

Rasterises draw primitives into PNG images with Pillow.
"""

import os
from pathlib import Path
from typing import Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .layout import LayoutEngine
from .models import Graph
from .render import DrawPrimitive, EdgePrimitive, NodePrimitive, RenderModel

DEFAULT_VIEWPORT = (800, 600)


class PNGRenderer:
    """Paints draw primitives onto a Pillow image."""

    def __init__(
        self,
        width: int = DEFAULT_VIEWPORT[0],
        height: int = DEFAULT_VIEWPORT[1],
        font_size: int = 11,
        font_path: str | None = None,  # Custom font path
        scale: int = 2,  # For high-resolution output
        bg_color: str = "#ffffff",
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.font_size = font_size
        self.font_path = font_path
        self.scale = scale
        self.bg_color = bg_color

        self.font = None

    def _get_font(self) -> ImageFont.FreeTypeFont:
        """Get a font for rendering node labels."""
        if self.font is not None:
            return self.font

        font_size = self.font_size * self.scale

        if self.font_path and os.path.exists(self.font_path):
            try:
                self.font = ImageFont.truetype(self.font_path, font_size)
                return self.font
            except OSError:
                pass  # Fall through to default fonts

        font_options = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
            "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
        ]

        for path in font_options:
            if os.path.exists(path):
                try:
                    self.font = ImageFont.truetype(path, font_size)
                    return self.font
                except OSError:
                    continue

        try:
            self.font = ImageFont.load_default(size=font_size)
        except TypeError:
            # Older Pillow versions don't support size parameter
            self.font = ImageFont.load_default()
        return self.font

    def _scaled(self, point: Tuple[int, int]) -> Tuple[int, int]:
        return point[0] * self.scale, point[1] * self.scale

    def draw(self, primitives: Sequence[DrawPrimitive]) -> Image.Image:
        """
        Paint primitives in order onto a new image.

        Args:
            primitives: Output of RenderModel.render

        Returns:
            The painted image
        """
        img = Image.new(
            "RGB", (self.width * self.scale, self.height * self.scale), self.bg_color
        )
        draw = ImageDraw.Draw(img)

        for primitive in primitives:
            if isinstance(primitive, EdgePrimitive):
                self._draw_edge(draw, primitive)
            elif isinstance(primitive, NodePrimitive):
                self._draw_node(draw, primitive)
            else:
                raise TypeError(f"Unknown draw primitive: {primitive!r}")

        return img

    def _draw_edge(self, draw: ImageDraw.ImageDraw, edge: EdgePrimitive):
        draw.line(
            [self._scaled(edge.start), self._scaled(edge.end)],
            fill=edge.color,
            width=max(1, self.scale),
        )

    def _draw_node(self, draw: ImageDraw.ImageDraw, node: NodePrimitive):
        left, top, right, bottom = node.bounds
        draw.ellipse(
            [self._scaled((left, top)), self._scaled((right, bottom))],
            fill=node.fill,
            outline=node.outline,
            width=max(1, self.scale),
        )

        # Label centered on the disc
        font = self._get_font()
        x, y = self._scaled(node.center)
        bbox = draw.textbbox((0, 0), node.label, font=font)
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]
        draw.text(
            (x - text_w // 2 - bbox[0], y - text_h // 2 - bbox[1]),
            node.label,
            fill=node.label_color,
            font=font,
        )

    def render(
        self, primitives: Sequence[DrawPrimitive], output_path: Union[str, Path]
    ) -> str:
        """
        Render primitives as a PNG file.

        Args:
            primitives: Ordered draw primitives
            output_path: Path to save the PNG file

        Returns:
            Path to the saved PNG file
        """
        img = self.draw(primitives)
        img.save(output_path, "PNG")
        return str(output_path)


def render_to_png(
    graph: Graph,
    output_path: Union[str, Path] = "graph.png",
    width: int = DEFAULT_VIEWPORT[0],
    height: int = DEFAULT_VIEWPORT[1],
    **kwargs,
) -> str:
    """
    Convenience function to lay out a graph and render it to PNG.

    Args:
        graph: Graph to draw
        output_path: Path to save the PNG file
        width: Viewport width used for layout
        height: Viewport height used for layout
        **kwargs: Additional parameters for PNGRenderer

    Returns:
        Path to the saved PNG file
    """
    coordinates = LayoutEngine().layout(graph, width, height)
    primitives = RenderModel().render(graph, coordinates)
    renderer = PNGRenderer(width=width, height=height, **kwargs)
    return renderer.render(primitives, output_path)
