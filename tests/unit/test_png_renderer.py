"""Tests for the PNG renderer module."""

import os
import tempfile

import pytest
from PIL import Image

from graphview.layout import LayoutEngine
from graphview.models import Graph
from graphview.png_renderer import PNGRenderer, render_to_png
from graphview.render import EdgePrimitive, NodePrimitive, RenderModel


class TestPNGRenderer:
    """Tests for PNGRenderer class."""

    def test_render_graph(self, square_graph):
        """Render a laid out graph to PNG."""
        coords = LayoutEngine().layout(square_graph, 300, 200)
        primitives = RenderModel().render(square_graph, coords)
        renderer = PNGRenderer(width=300, height=200)

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            output_path = f.name

        try:
            result = renderer.render(primitives, output_path)
            assert result == output_path
            assert os.path.exists(output_path)
            assert os.path.getsize(output_path) > 0
        finally:
            if os.path.exists(output_path):
                os.unlink(output_path)

    def test_image_size_scaled(self):
        renderer = PNGRenderer(width=120, height=80, scale=3)
        img = renderer.draw([])
        assert img.size == (360, 240)

    def test_node_fill_painted(self):
        """The pixel at a node's center has the node's fill color."""
        renderer = PNGRenderer(width=100, height=100, scale=1)
        node = NodePrimitive(center=(50, 50), radius=10, fill="#0000ff", label="")
        img = renderer.draw([node])
        assert img.getpixel((50, 50)) == (0, 0, 255)
        assert img.getpixel((5, 5)) == (255, 255, 255)

    def test_edge_painted(self):
        renderer = PNGRenderer(width=100, height=100, scale=1)
        edge = EdgePrimitive((10, 50), (90, 50), color="#ff0000")
        img = renderer.draw([edge])
        assert img.getpixel((50, 50)) == (255, 0, 0)

    def test_unknown_primitive(self):
        renderer = PNGRenderer(width=10, height=10)
        with pytest.raises(TypeError):
            renderer.draw(["not a primitive"])

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            PNGRenderer(width=0, height=100)


class TestRenderToPng:
    """Tests for the render_to_png convenience function."""

    def test_render_to_png(self, triangle_graph, tmp_path):
        output_path = tmp_path / "triangle.png"
        result = render_to_png(triangle_graph, output_path, width=200, height=150)

        assert result == str(output_path)
        with Image.open(output_path) as img:
            assert img.size == (400, 300)

    def test_render_empty_graph(self, tmp_path):
        """An empty graph still produces a blank image."""
        output_path = tmp_path / "empty.png"
        render_to_png(Graph.from_edges(0, []), output_path, width=50, height=50, scale=1)

        with Image.open(output_path) as img:
            assert img.getpixel((25, 25)) == (255, 255, 255)
