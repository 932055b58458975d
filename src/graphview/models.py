"""
Data models for graph visualization.

This module contains the immutable values produced by the parser and consumed
by the layout engine and the render model. A Graph is built once per loaded
document and never mutated afterwards; a new load replaces it wholesale.

Classes:
    GridCell: (column, row) placement of a vertex in an occupancy grid.
    Graph: Vertex count, symmetric adjacency, group tags and spatial hints.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple

import networkx as nx

GROUP_COUNT = 3


class GridCell(NamedTuple):
    """Grid coordinate of a vertex taken from a spatial matrix."""

    col: int
    row: int


@dataclass(frozen=True)
class Graph:
    """
    Undirected graph with a 3-way group partition.

    Attributes:
        vertex_count: Number of vertices, identified as 0..vertex_count-1.
        adjacency: Square symmetric boolean matrix. The diagonal is always False.
        groups: Group tag (0, 1 or 2) for every vertex.
        spatial_hint: Grid cell for every vertex, or None when the source
            document had no occupancy grid.
    """

    vertex_count: int
    adjacency: Tuple[Tuple[bool, ...], ...]
    groups: Tuple[int, ...]
    spatial_hint: Optional[Tuple[GridCell, ...]] = None

    def __post_init__(self):
        n = self.vertex_count
        if n < 0:
            raise ValueError(f"vertex_count must be >= 0, got {n}")
        if len(self.adjacency) != n or any(len(row) != n for row in self.adjacency):
            raise ValueError(f"adjacency must be a {n}x{n} matrix")
        for i in range(n):
            if self.adjacency[i][i]:
                raise ValueError(f"self-loop on vertex {i}")
            for j in range(i + 1, n):
                if self.adjacency[i][j] != self.adjacency[j][i]:
                    raise ValueError(f"adjacency not symmetric at ({i}, {j})")
        if len(self.groups) != n:
            raise ValueError(f"expected {n} group tags, got {len(self.groups)}")
        for vertex, group in enumerate(self.groups):
            if not 0 <= group < GROUP_COUNT:
                raise ValueError(f"vertex {vertex} has invalid group {group}")
        if self.spatial_hint is not None and len(self.spatial_hint) != n:
            raise ValueError(
                f"spatial hint must place all {n} vertices, "
                f"got {len(self.spatial_hint)}"
            )

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: List[Tuple[int, int]],
        groups: Optional[Dict[int, int]] = None,
        spatial_hint: Optional[List[GridCell]] = None,
    ) -> "Graph":
        """
        Build a Graph from an edge list and a sparse group assignment.

        Self-loops in ``edges`` are dropped. Vertices missing from ``groups``
        get group 0.

        Raises:
            ValueError: If an edge endpoint or group key is not a vertex id
        """
        groups = groups or {}
        for vertex in [v for edge in edges for v in edge] + list(groups):
            if not 0 <= vertex < vertex_count:
                raise ValueError(
                    f"vertex id {vertex} out of range for {vertex_count} vertices"
                )

        matrix = [[False] * vertex_count for _ in range(vertex_count)]
        for v1, v2 in edges:
            if v1 != v2:
                matrix[v1][v2] = matrix[v2][v1] = True

        tags = [0] * vertex_count
        for vertex, group in groups.items():
            tags[vertex] = group

        return cls(
            vertex_count=vertex_count,
            adjacency=tuple(tuple(row) for row in matrix),
            groups=tuple(tags),
            spatial_hint=tuple(spatial_hint) if spatial_hint is not None else None,
        )

    @property
    def has_spatial_hint(self) -> bool:
        return self.spatial_hint is not None

    def has_edge(self, v1: int, v2: int) -> bool:
        return self.adjacency[v1][v2]

    def group_of(self, vertex: int) -> int:
        return self.groups[vertex]

    def edges(self) -> List[Tuple[int, int]]:
        """Return every edge once as (i, j) with i < j, in row-major order."""
        return [
            (i, j)
            for i in range(self.vertex_count)
            for j in range(i + 1, self.vertex_count)
            if self.adjacency[i][j]
        ]

    def edge_count(self) -> int:
        return len(self.edges())

    def group_sizes(self) -> Tuple[int, ...]:
        """Number of vertices in each group, indexed by group tag."""
        sizes = [0] * GROUP_COUNT
        for group in self.groups:
            sizes[group] += 1
        return tuple(sizes)

    def to_networkx(self) -> nx.Graph:
        """
        Convert to a networkx graph.

        Every node carries a ``group`` attribute and, when spatial hints are
        present, a ``cell`` attribute holding its GridCell.
        """
        graph = nx.Graph()
        for vertex in range(self.vertex_count):
            attrs = {"group": self.groups[vertex]}
            if self.spatial_hint is not None:
                attrs["cell"] = self.spatial_hint[vertex]
            graph.add_node(vertex, **attrs)
        graph.add_edges_from(self.edges())
        return graph
