#!/usr/bin/env python3
"""
Examples of using graphview.

Run this file to render the example documents as PNG files.
"""

from graphview import GraphVisualizer

MAZE_DOCUMENT = """
Macierz
[1 1 1 0]
[0 0 1 0]
[0 1 1 1]
Lista polaczen
0 - 1
1 - 2
2 - 3
3 - 5
4 - 5
5 - 6
Grupa 0: 0 1
Grupa 1: 2 3 5
Grupa 2: 4 6
"""

ADJACENCY_DOCUMENT = """
Macierz
[0 1 1 0 0]
[1 0 1 0 0]
[1 1 0 1 0]
[0 0 1 0 1]
[0 0 0 1 0]
Grupa 0: 0
Grupa 1: 1, 2
Grupa 2: 3, 4
"""


def example_spatial_grid():
    """Vertices placed on their occupancy grid cells."""
    print("Example 1: Spatial Grid")

    visualizer = GraphVisualizer()
    visualizer.resize(800, 600)
    visualizer.load_text(MAZE_DOCUMENT)
    print(f"  {visualizer.summary()}")
    visualizer.export_png("example_grid.png")
    print("  Saved: example_grid.png\n")


def example_circular():
    """Abstract graph placed on a circle."""
    print("Example 2: Circular Layout")

    visualizer = GraphVisualizer()
    visualizer.resize(600, 600)
    visualizer.load_text(ADJACENCY_DOCUMENT)
    print(f"  {visualizer.summary()}")
    visualizer.export_png("example_circle.png")
    print("  Saved: example_circle.png\n")


def example_debug_trace():
    """Pipeline trace of a load followed by a resize."""
    print("Example 3: Debug Trace")

    visualizer = GraphVisualizer(debug=True)
    visualizer.resize(800, 600)
    visualizer.load_text(ADJACENCY_DOCUMENT)
    visualizer.resize(400, 300)
    visualizer.primitives()
    print(visualizer.get_trace().summary())
    print()


if __name__ == "__main__":
    example_spatial_grid()
    example_circular()
    example_debug_trace()
