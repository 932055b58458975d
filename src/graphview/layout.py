"""
Layout module mapping vertices to viewport pixels.

Two placements are supported:
- Grid placement for graphs carrying spatial hints, with a one-cell margin
  on every side of the occupancy grid
- Circular placement for abstract graphs, evenly spaced around the
  viewport centre

Layouts are recomputed from scratch for every (graph, viewport) pair.
"""

import math
from typing import Dict, Tuple

from .models import Graph

# Gap between the circle and the nearest viewport edge
CIRCLE_MARGIN = 50

Coordinates = Dict[int, Tuple[int, int]]


class LayoutEngine:
    """Computes pixel coordinates for each vertex of a Graph."""

    def __init__(self, margin: int = CIRCLE_MARGIN):
        self.margin = margin

    def layout(self, graph: Graph, width: int, height: int) -> Coordinates:
        """
        Compute coordinates for the given graph and viewport.

        Args:
            graph: Graph to place
            width: Viewport width in pixels
            height: Viewport height in pixels

        Returns:
            Mapping of vertex id to (x, y). Empty when the viewport has no
            area or the graph has no vertices.
        """
        if width <= 0 or height <= 0 or graph.vertex_count == 0:
            return {}

        if graph.has_spatial_hint:
            return self._grid_layout(graph, width, height)
        return self._circular_layout(graph, width, height)

    def _grid_layout(self, graph: Graph, width: int, height: int) -> Coordinates:
        max_col = max(cell.col for cell in graph.spatial_hint)
        max_row = max(cell.row for cell in graph.spatial_hint)

        cell_width = width // (max_col + 2)
        cell_height = height // (max_row + 2)

        return {
            vertex: ((cell.col + 1) * cell_width, (cell.row + 1) * cell_height)
            for vertex, cell in enumerate(graph.spatial_hint)
        }

    def _circular_layout(self, graph: Graph, width: int, height: int) -> Coordinates:
        n = graph.vertex_count
        center_x = width / 2
        center_y = height / 2
        radius = max(0.0, min(width, height) / 2 - self.margin)

        coordinates: Coordinates = {}
        for vertex in range(n):
            angle = 2 * math.pi * vertex / n
            coordinates[vertex] = (
                round(center_x + radius * math.cos(angle)),
                round(center_y + radius * math.sin(angle)),
            )
        return coordinates


def compute_layout(
    graph: Graph, width: int, height: int, margin: int = CIRCLE_MARGIN
) -> Coordinates:
    """
    Convenience function to lay out a graph.

    Args:
        graph: Graph to place
        width: Viewport width in pixels
        height: Viewport height in pixels
        margin: Circle margin used when the graph has no spatial hints

    Returns:
        Mapping of vertex id to (x, y)
    """
    return LayoutEngine(margin=margin).layout(graph, width, height)
