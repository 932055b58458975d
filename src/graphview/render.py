"""
Render model for graph visualization.

Turns a Graph and its coordinates into renderer-agnostic draw primitives:
line segments for edges and labeled discs for vertices. Any 2-D surface
(tkinter canvas, Pillow image) can paint the resulting list in order.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .layout import Coordinates
from .models import Graph

# Node disc radius (20 pixel diameter)
NODE_RADIUS = 10

# Fill color per group tag: red, dark green, blue
GROUP_PALETTE = ("#ff0000", "#00b200", "#0000ff")

EDGE_COLOR = "#c0c0c0"
NODE_OUTLINE = "#000000"
LABEL_COLOR = "#000000"

Point = Tuple[int, int]


@dataclass(frozen=True)
class EdgePrimitive:
    """Line segment between two vertex centers."""

    start: Point
    end: Point
    color: str = EDGE_COLOR

    kind = "edge"


@dataclass(frozen=True)
class NodePrimitive:
    """Filled disc with a centered text label."""

    center: Point
    radius: int
    fill: str
    label: str
    outline: str = NODE_OUTLINE
    label_color: str = LABEL_COLOR

    kind = "node"

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Bounding box as (left, top, right, bottom)."""
        x, y = self.center
        return (x - self.radius, y - self.radius, x + self.radius, y + self.radius)


DrawPrimitive = Union[EdgePrimitive, NodePrimitive]


class RenderModel:
    """Builds the ordered list of draw primitives for a laid out graph."""

    def __init__(
        self,
        node_radius: int = NODE_RADIUS,
        palette: Sequence[str] = GROUP_PALETTE,
        edge_color: str = EDGE_COLOR,
    ):
        if not palette:
            raise ValueError("palette must contain at least one color")
        self.node_radius = node_radius
        self.palette = tuple(palette)
        self.edge_color = edge_color

    def render(self, graph: Graph, coordinates: Coordinates) -> List[DrawPrimitive]:
        """
        Build primitives for the graph.

        Edges come first so nodes are painted on top of the lines.

        Args:
            graph: Graph to draw
            coordinates: Vertex positions from the layout engine

        Returns:
            Ordered draw primitives, or an empty list when some vertex has
            no coordinate (e.g. a zero-sized viewport)
        """
        if any(vertex not in coordinates for vertex in range(graph.vertex_count)):
            return []

        primitives: List[DrawPrimitive] = [
            EdgePrimitive(coordinates[i], coordinates[j], self.edge_color)
            for i, j in graph.edges()
        ]

        for vertex in range(graph.vertex_count):
            fill = self.palette[graph.group_of(vertex) % len(self.palette)]
            primitives.append(
                NodePrimitive(
                    center=coordinates[vertex],
                    radius=self.node_radius,
                    fill=fill,
                    label=str(vertex),
                )
            )

        return primitives


def render_graph(graph: Graph, coordinates: Coordinates) -> List[DrawPrimitive]:
    """
    Convenience function to build draw primitives with the default style.

    Args:
        graph: Graph to draw
        coordinates: Vertex positions

    Returns:
        Ordered draw primitives
    """
    return RenderModel().render(graph, coordinates)
