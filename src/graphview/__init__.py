"""
graphview - Interactive viewer for small grouped graphs

A Python library for loading graph documents (vertex grid or adjacency
matrix, edge list, three vertex groups) and turning them into draw
primitives for a desktop canvas or a PNG file.

Example:
    >>> from graphview import GraphVisualizer
    >>> visualizer = GraphVisualizer()
    >>> visualizer.resize(800, 600)
    >>> visualizer.load_text('''
    ...     Macierz
    ...     [1 0]
    ...     [0 1]
    ...     Lista polaczen
    ...     0 - 1
    ... ''')
    >>> primitives = visualizer.primitives()

Debug Mode Example:
    >>> visualizer = GraphVisualizer(debug=True)
    >>> visualizer.load_file("graph.txt")
    >>> print(visualizer.get_trace().summary())
"""

from .errors import (
    EmptyGraph,
    GraphFormatError,
    InvalidToken,
    MalformedGroupHeader,
    MissingSection,
    NonSquareMatrix,
    OutOfRange,
)
from .layout import CIRCLE_MARGIN, Coordinates, LayoutEngine, compute_layout
from .models import Graph, GridCell
from .parser import GraphDocumentParser, load_graph_file, parse_graph
from .png_renderer import PNGRenderer, render_to_png
from .render import (
    GROUP_PALETTE,
    NODE_RADIUS,
    DrawPrimitive,
    EdgePrimitive,
    NodePrimitive,
    RenderModel,
    render_graph,
)
from .tracer import PipelineStage, RenderTrace
from .visualizer import GraphVisualizer, LoadResult

__version__ = "0.1.0"

__all__ = [
    # Main API
    "GraphVisualizer",
    "LoadResult",
    # Model
    "Graph",
    "GridCell",
    # Parser
    "GraphDocumentParser",
    "parse_graph",
    "load_graph_file",
    # Errors
    "GraphFormatError",
    "MissingSection",
    "InvalidToken",
    "NonSquareMatrix",
    "OutOfRange",
    "MalformedGroupHeader",
    "EmptyGraph",
    # Layout
    "LayoutEngine",
    "Coordinates",
    "compute_layout",
    "CIRCLE_MARGIN",
    # Render
    "RenderModel",
    "DrawPrimitive",
    "EdgePrimitive",
    "NodePrimitive",
    "render_graph",
    "GROUP_PALETTE",
    "NODE_RADIUS",
    # PNG export
    "PNGRenderer",
    "render_to_png",
    # Debug/Tracing
    "RenderTrace",
    "PipelineStage",
]
