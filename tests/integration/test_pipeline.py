"""
Integration tests for the parse -> layout -> render pipeline.

These tests run complete documents through every stage and check the
primitives a shell would paint.
"""

import pytest

from graphview import (
    GraphVisualizer,
    GridCell,
    LayoutEngine,
    MissingSection,
    NonSquareMatrix,
    OutOfRange,
    RenderModel,
    parse_graph,
)


class TestEndToEndScenarios:
    """Reference documents and their expected outcome."""

    def test_diagonal_grid_without_groups(self):
        graph = parse_graph("Macierz\n[1 0]\n[0 1]\nLista polaczen\n0 - 1\n")

        assert graph.vertex_count == 2
        assert graph.edges() == [(0, 1)]
        assert graph.spatial_hint == (GridCell(col=0, row=0), GridCell(col=1, row=1))
        assert graph.groups == (0, 0)

    def test_missing_matrix_section(self):
        with pytest.raises(MissingSection) as exc_info:
            parse_graph("Lista polaczen\n0 - 1\nGrupa 0:\nGrupa 1:\nGrupa 2:\n")
        assert exc_info.value.section == "matrix"

    def test_unequal_rows(self):
        text = "Macierz\n[0 1 1]\n[1 0 0]\n[1 0]\nGrupa 0:\nGrupa 1:\nGrupa 2:\n"
        with pytest.raises(NonSquareMatrix) as exc_info:
            parse_graph(text)
        assert exc_info.value.row == 2

    def test_group_member_out_of_range(self):
        text = (
            "Macierz\n[0 1 0 0]\n[1 0 0 0]\n[0 0 0 1]\n[0 0 1 0]\n"
            "Grupa 0: 0\nGrupa 1: 2 5\nGrupa 2: 1\n"
        )
        with pytest.raises(OutOfRange) as exc_info:
            parse_graph(text)
        assert exc_info.value.vertex_id == 5


class TestFullPipeline:
    def test_spatial_document(self, spatial_document):
        graph = parse_graph(spatial_document)
        coords = LayoutEngine().layout(graph, 500, 320)
        primitives = RenderModel().render(graph, coords)

        edges = primitives[: graph.edge_count()]
        nodes = primitives[graph.edge_count():]
        assert all(p.kind == "edge" for p in edges)
        assert all(p.kind == "node" for p in nodes)
        assert len(nodes) == 6

        # 4 columns and 3 rows plus margins: 100 x 80 pixel cells
        assert nodes[5].center == (400, 240)
        assert edges[0].start == (100, 80)
        assert edges[0].end == (200, 80)

    def test_adjacency_document(self, adjacency_document):
        graph = parse_graph(adjacency_document)
        coords = LayoutEngine().layout(graph, 600, 600)
        primitives = RenderModel().render(graph, coords)

        assert len(primitives) == graph.edge_count() + graph.vertex_count
        assert primitives[-4].center == (550, 300)

    def test_shell_session(self, spatial_document, adjacency_document):
        """Load, resize, fail a load, and keep drawing the last good graph."""
        visualizer = GraphVisualizer()
        visualizer.resize(800, 600)
        visualizer.load_text(spatial_document)
        first = visualizer.primitives()

        visualizer.resize(400, 300)
        resized = visualizer.primitives()
        assert len(resized) == len(first)
        assert resized != first

        with pytest.raises(NonSquareMatrix):
            visualizer.load_text("Macierz\n[0 1]\nGrupa 0:\nGrupa 1:\nGrupa 2:\n")
        assert visualizer.primitives() == resized

        visualizer.load_text(adjacency_document)
        assert visualizer.layout_mode == "circle"
        assert len(visualizer.primitives()) == 7
