"""Unit tests for the models module."""

import dataclasses

import pytest

from graphview.models import Graph, GridCell


class TestGraphFromEdges:
    """Tests for Graph.from_edges."""

    def test_defaults(self):
        graph = Graph.from_edges(3, [])
        assert graph.vertex_count == 3
        assert graph.groups == (0, 0, 0)
        assert graph.spatial_hint is None
        assert graph.edges() == []

    def test_edges_normalized(self):
        """Edges are reported once with i < j."""
        graph = Graph.from_edges(3, [(2, 0), (0, 2), (1, 2)])
        assert graph.edges() == [(0, 2), (1, 2)]
        assert graph.edge_count() == 2

    def test_self_loop_dropped(self):
        graph = Graph.from_edges(2, [(1, 1)])
        assert graph.edge_count() == 0

    def test_group_sizes(self, square_graph):
        assert square_graph.group_sizes() == (2, 1, 1)

    def test_empty_graph(self):
        graph = Graph.from_edges(0, [])
        assert graph.vertex_count == 0
        assert graph.adjacency == ()

    @pytest.mark.parametrize("vertex", [-1, 2, 10])
    def test_out_of_range_group_rejected(self, vertex):
        """Group keys must be vertex ids; negative keys do not wrap around."""
        with pytest.raises(ValueError):
            Graph.from_edges(2, [], groups={vertex: 2})

    @pytest.mark.parametrize("edge", [(-1, 0), (0, 2), (5, 5)])
    def test_out_of_range_edge_rejected(self, edge):
        with pytest.raises(ValueError):
            Graph.from_edges(2, [edge])


class TestGraphValidation:
    """Invariants enforced by the Graph constructor."""

    def test_negative_vertex_count(self):
        with pytest.raises(ValueError):
            Graph(vertex_count=-1, adjacency=(), groups=())

    def test_non_square_adjacency(self):
        with pytest.raises(ValueError):
            Graph(vertex_count=2, adjacency=((False, True),), groups=(0, 0))

    def test_asymmetric_adjacency(self):
        with pytest.raises(ValueError):
            Graph(
                vertex_count=2,
                adjacency=((False, True), (False, False)),
                groups=(0, 0),
            )

    def test_self_loop(self):
        with pytest.raises(ValueError):
            Graph(vertex_count=1, adjacency=((True,),), groups=(0,))

    def test_invalid_group(self):
        with pytest.raises(ValueError):
            Graph(vertex_count=1, adjacency=((False,),), groups=(3,))

    def test_partial_spatial_hint(self):
        with pytest.raises(ValueError):
            Graph(
                vertex_count=2,
                adjacency=((False, False), (False, False)),
                groups=(0, 0),
                spatial_hint=(GridCell(0, 0),),
            )


class TestGraphImmutability:
    def test_frozen(self, triangle_graph):
        with pytest.raises(dataclasses.FrozenInstanceError):
            triangle_graph.vertex_count = 5

    def test_structural_equality(self):
        assert Graph.from_edges(2, [(0, 1)]) == Graph.from_edges(2, [(1, 0)])


class TestToNetworkx:
    def test_nodes_and_edges(self, triangle_graph):
        nx_graph = triangle_graph.to_networkx()
        assert nx_graph.number_of_nodes() == 3
        assert nx_graph.number_of_edges() == 3
        assert nx_graph.nodes[2]["group"] == 2
        assert "cell" not in nx_graph.nodes[0]

    def test_cells_attached(self, square_graph):
        nx_graph = square_graph.to_networkx()
        assert nx_graph.nodes[3]["cell"] == GridCell(1, 1)

    def test_isolated_vertices_kept(self):
        nx_graph = Graph.from_edges(3, [(0, 1)]).to_networkx()
        assert sorted(nx_graph.nodes) == [0, 1, 2]
