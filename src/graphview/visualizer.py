"""
Main graph visualizer module.

Combines parsing, layout, and rendering behind the small API a presentation
shell needs: load a document, report the viewport size, fetch primitives.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import networkx as nx

from .errors import EmptyGraph
from .layout import CIRCLE_MARGIN, Coordinates, LayoutEngine
from .models import Graph
from .parser import GraphDocumentParser
from .png_renderer import PNGRenderer
from .render import NODE_RADIUS, DrawPrimitive, RenderModel
from .tracer import RenderTrace

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of a successful load."""

    graph: Graph
    warnings: List[str] = field(default_factory=list)


class GraphVisualizer:
    """
    Keep the displayed graph and its layout in sync with the viewport.

    Example:
        >>> visualizer = GraphVisualizer()
        >>> visualizer.resize(800, 600)
        >>> visualizer.load_text(document)
        >>> for primitive in visualizer.primitives():
        ...     paint(primitive)
    """

    def __init__(
        self,
        node_radius: int = NODE_RADIUS,
        margin: int = CIRCLE_MARGIN,
        reject_empty: bool = False,
        debug: bool = False,
    ):
        """
        Initialize the visualizer.

        Args:
            node_radius: Radius of vertex discs in pixels
            margin: Gap between the circular layout and the viewport edge
            reject_empty: Raise EmptyGraph instead of warning on graphs
                without vertices
            debug: Record a RenderTrace of every pipeline stage
        """
        self.parser = GraphDocumentParser()
        self.layout_engine = LayoutEngine(margin=margin)
        self.render_model = RenderModel(node_radius=node_radius)
        self.reject_empty = reject_empty

        self.graph: Optional[Graph] = None
        self.viewport: Tuple[int, int] = (0, 0)
        self.coordinates: Coordinates = {}

        self._trace: Optional[RenderTrace] = RenderTrace() if debug else None

    def load_text(self, input_text: str) -> LoadResult:
        """
        Parse a document and make it the displayed graph.

        On any error the previously displayed graph is left untouched.

        Args:
            input_text: Complete document text

        Returns:
            LoadResult with the new graph and any warnings

        Raises:
            GraphFormatError: If the document is malformed
        """
        graph = self.parser.parse(input_text)

        warnings: List[str] = []
        if graph.vertex_count == 0:
            if self.reject_empty:
                raise EmptyGraph()
            warnings.append(str(EmptyGraph()))
            logger.warning("Loaded document describes an empty graph")

        if self._trace is not None:
            self._trace.input_text = input_text
            self._trace.add_stage(
                "parse",
                {
                    "vertex_count": graph.vertex_count,
                    "edges": graph.edges(),
                    "groups": graph.groups,
                    "spatial_hint": graph.spatial_hint,
                },
            )

        self.graph = graph
        self._relayout()
        logger.info(
            "Loaded graph with %d vertices and %d edges",
            graph.vertex_count,
            graph.edge_count(),
        )
        return LoadResult(graph=graph, warnings=warnings)

    def load_file(self, path: Union[str, Path], encoding: str = "utf-8") -> LoadResult:
        """
        Read a document from disk and load it.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid in the given encoding
            GraphFormatError: If the document is malformed
        """
        text = Path(path).read_text(encoding=encoding)
        logger.debug("Read %d characters from %s", len(text), path)
        return self.load_text(text)

    def resize(self, width: int, height: int) -> bool:
        """
        Report a new viewport size.

        Returns:
            True if the layout was recomputed
        """
        if (width, height) == self.viewport:
            return False
        self.viewport = (width, height)
        self._relayout()
        return True

    def _relayout(self) -> None:
        if self.graph is None:
            self.coordinates = {}
            return

        width, height = self.viewport
        self.coordinates = self.layout_engine.layout(self.graph, width, height)

        if self._trace is not None:
            self._trace.add_stage(
                "layout",
                {
                    "viewport": self.viewport,
                    "mode": self.layout_mode,
                    "coordinates": self.coordinates,
                },
            )

    @property
    def layout_mode(self) -> Optional[str]:
        """'grid' or 'circle' for the displayed graph, None without one."""
        if self.graph is None:
            return None
        return "grid" if self.graph.has_spatial_hint else "circle"

    def primitives(self) -> List[DrawPrimitive]:
        """Draw primitives for the displayed graph at the current viewport."""
        if self.graph is None:
            return []

        primitives = self.render_model.render(self.graph, self.coordinates)
        if self._trace is not None:
            self._trace.add_stage(
                "render",
                {
                    "viewport": self.viewport,
                    "edges": sum(1 for p in primitives if p.kind == "edge"),
                    "nodes": sum(1 for p in primitives if p.kind == "node"),
                },
            )
        return primitives

    def summary(self) -> str:
        """One-line description of the displayed graph."""
        if self.graph is None:
            return "No graph loaded."
        return (
            f"Loaded: {self.graph.vertex_count} vertices, "
            f"{self.graph.edge_count()} edges."
        )

    def describe(self) -> Dict[str, Any]:
        """Statistics about the displayed graph, empty without one."""
        if self.graph is None:
            return {}

        nx_graph = self.graph.to_networkx()
        return {
            "vertices": nx_graph.number_of_nodes(),
            "edges": nx_graph.number_of_edges(),
            "group_sizes": self.graph.group_sizes(),
            "layout": self.layout_mode,
            "isolated": sorted(nx.isolates(nx_graph)),
        }

    def export_png(self, output_path: Union[str, Path], **kwargs) -> str:
        """
        Save the displayed graph as a PNG at the current viewport size.

        Args:
            output_path: Path to save the PNG file
            **kwargs: Additional parameters for PNGRenderer

        Raises:
            ValueError: If no graph is loaded or the viewport has no area
        """
        if self.graph is None:
            raise ValueError("No graph loaded")
        width, height = self.viewport
        renderer = PNGRenderer(width=width, height=height, **kwargs)
        return renderer.render(self.primitives(), output_path)

    def get_trace(self) -> Optional[RenderTrace]:
        """Return the debug trace, or None when debug mode is off."""
        return self._trace
