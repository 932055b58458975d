"""Pytest configuration and shared fixtures for graphview tests."""

import pytest

from graphview import Graph, GraphVisualizer, GridCell, LayoutEngine, RenderModel


@pytest.fixture
def two_cell_document():
    """Spatial grid with two diagonal cells and one edge, no groups."""
    return "Macierz\n[1 0]\n[0 1]\nLista polaczen\n0 - 1\n"


@pytest.fixture
def spatial_document():
    """Spatial grid with ragged rows, edges and all three groups."""
    return """
    Macierz
    [1 1 0]
    [0 1]
    [1 0 1 1]
    Lista polaczen
    0 - 1
    1 - 2
    2 - 3
    3 - 5
    Grupa 0: 0
    Grupa 1: 1, 2
    Grupa 2: 3 4
    """


@pytest.fixture
def adjacency_document():
    """Square adjacency matrix with mandatory groups."""
    return """
    Macierz
    [0 1 0 1]
    [1 0 1 0]
    [0 1 0 0]
    [1 0 0 0]
    Grupa 0: 0
    Grupa 1: 1 2
    Grupa 2: 3
    """


@pytest.fixture
def square_graph():
    """Pre-built 4-cycle on a 2x2 grid."""
    return Graph.from_edges(
        4,
        [(0, 1), (1, 3), (3, 2), (2, 0)],
        groups={1: 1, 3: 2},
        spatial_hint=[GridCell(0, 0), GridCell(1, 0), GridCell(0, 1), GridCell(1, 1)],
    )


@pytest.fixture
def triangle_graph():
    """Pre-built triangle without spatial hints."""
    return Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], groups={2: 2})


@pytest.fixture
def layout_engine():
    """Default LayoutEngine instance."""
    return LayoutEngine()


@pytest.fixture
def render_model():
    """Default RenderModel instance."""
    return RenderModel()


@pytest.fixture
def visualizer():
    """GraphVisualizer with an 800x600 viewport."""
    visualizer = GraphVisualizer()
    visualizer.resize(800, 600)
    return visualizer
