"""
Parser module for graph documents.

Handles parsing of input text into a validated, immutable Graph.

Two document variants are supported and told apart automatically:

* Spatial: a ``Macierz`` occupancy grid whose 1-cells are the vertices,
  followed by a ``Lista polaczen`` edge list and optional ``Grupa`` lines.
* Adjacency: a ``Macierz`` square adjacency matrix followed by mandatory
  ``Grupa`` lines.

A document with neither an edge list nor group lines is reported as missing
its edge list when the matrix is ragged (only a grid can be ragged) and as
missing its groups otherwise.

Parsing is all-or-nothing: rows, edges and group tags are collected first and
the Graph is only built once every section has been validated.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .errors import (
    InvalidToken,
    MalformedGroupHeader,
    MissingSection,
    NonSquareMatrix,
    OutOfRange,
)
from .models import GROUP_COUNT, Graph, GridCell

logger = logging.getLogger(__name__)

MatrixRow = Tuple[bool, ...]


class GraphDocumentParser:
    """Parses graph document text into a Graph."""

    MATRIX_MARKER = "Macierz"
    EDGE_LIST_MARKER = "Lista polaczen"
    GROUP_MARKER = "Grupa"

    NON_DIGIT = re.compile(r"[^0-9]")
    # Edge line: "<int> - <int>"
    EDGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$")
    MEMBER_SEPARATOR = re.compile(r"[\s,]+")

    def parse(self, input_text: str) -> Graph:
        """
        Parse a graph document.

        Args:
            input_text: Complete document text

        Returns:
            Graph built from the document

        Raises:
            GraphFormatError: If the document is malformed
        """
        lines = input_text.splitlines()

        matrix_idx = self._find_marker(lines, 0, self.MATRIX_MARKER)
        if matrix_idx is None:
            raise MissingSection("matrix")

        rows, after_matrix = self._read_matrix(lines, matrix_idx + 1)

        edges_idx = self._find_marker(lines, after_matrix, self.EDGE_LIST_MARKER)
        if edges_idx is not None:
            logger.debug("Edge list found at line %d, reading spatial grid", edges_idx + 1)
            return self._parse_spatial(lines, rows, edges_idx)

        groups_idx = self._find_marker(lines, after_matrix, self.GROUP_MARKER)
        if groups_idx is None:
            # A ragged matrix can only be an occupancy grid, which needs edges
            if any(len(row) != len(rows) for row in rows):
                raise MissingSection("edges")
            raise MissingSection("groups")

        logger.debug("No edge list, reading %d matrix rows as adjacency", len(rows))
        return self._parse_adjacency(lines, rows, groups_idx)

    def _parse_spatial(
        self, lines: List[str], rows: List[MatrixRow], edges_idx: int
    ) -> Graph:
        """Build a Graph from an occupancy grid plus an explicit edge list."""
        cells: List[GridCell] = []
        for row_idx, row in enumerate(rows):
            for col_idx, occupied in enumerate(row):
                if occupied:
                    cells.append(GridCell(col_idx, row_idx))
        vertex_count = len(cells)

        edges, after_edges = self._read_edges(lines, edges_idx + 1, vertex_count)

        groups: Dict[int, int] = {}
        groups_idx = self._find_marker(lines, after_edges, self.GROUP_MARKER)
        if groups_idx is not None:
            groups = self._read_groups(lines, groups_idx, vertex_count)

        return Graph.from_edges(vertex_count, edges, groups, spatial_hint=cells)

    def _parse_adjacency(
        self, lines: List[str], rows: List[MatrixRow], groups_idx: int
    ) -> Graph:
        """Build a Graph from a square adjacency matrix plus group lines."""
        vertex_count = len(rows)
        for row_idx, row in enumerate(rows):
            if len(row) != vertex_count:
                raise NonSquareMatrix(row_idx, vertex_count, len(row))

        groups =self._read_groups(lines, groups_idx, vertex_count)

        # Either direction of a cell marks the edge
        edges = [
            (i, j)
            for i in range(vertex_count)
            for j in range(i + 1, vertex_count)
            if rows[i][j] or rows[j][i]
        ]
        return Graph.from_edges(vertex_count, edges, groups)

    def _find_marker(self, lines: Sequence[str], start: int, marker: str) -> Optional[int]:
        """Return the index of the first line at or after start beginning with marker."""
        for idx in range(start, len(lines)):
            if lines[idx].strip().startswith(marker):
                return idx
        return None

    def _read_matrix(self, lines: List[str], start: int) -> Tuple[List[MatrixRow], int]:
        """
        Read consecutive bracketed rows.

        Returns:
            Tuple of (rows, index of the first line after the matrix)
        """
        rows: List[MatrixRow] = []
        idx = start
        while idx < len(lines):
            stripped = lines[idx].strip()
            if not stripped.startswith("["):
                break
            rows.append(self._parse_row(stripped, idx + 1))
            idx += 1
        return rows, idx

    def _parse_row(self, stripped: str, line_num: int) -> MatrixRow:
        content = stripped[1:]
        if content.endswith("]"):
            content = content[:-1]

        cells = []
        for raw in content.split():
            token = self.NON_DIGIT.sub("", raw)
            if token not in ("0", "1"):
                raise InvalidToken(raw, line=line_num)
            cells.append(token == "1")
        return tuple(cells)

    def _read_edges(
        self, lines: List[str], start: int, vertex_count: int
    ) -> Tuple[List[Tuple[int, int]], int]:
        """
        Read "v1 - v2" lines until the first line without a dash.

        Returns:
            Tuple of (edges, index of the first line after the edge list)
        """
        edges: List[Tuple[int, int]] = []
        idx = start
        while idx < len(lines):
            stripped = lines[idx].strip()
            if "-" not in stripped:
                break

            line_num = idx + 1
            match = self.EDGE_PATTERN.match(stripped)
            if not match:
                raise InvalidToken(stripped, line=line_num)

            v1, v2 = int(match.group(1)), int(match.group(2))
            for vertex in (v1, v2):
                if vertex >= vertex_count:
                    raise OutOfRange(vertex, vertex_count, line=line_num)
            if v1 == v2:
                logger.debug("Line %d: ignoring self-loop on vertex %d", line_num, v1)
            edges.append((v1, v2))
            idx += 1
        return edges, idx

    def _read_groups(
        self, lines: List[str], start: int, vertex_count: int
    ) -> Dict[int, int]:
        """
        Read the three "Grupa g:" lines starting at start.

        Returns:
            Mapping of vertex id to group for every listed vertex
        """
        assignment: Dict[int, int] = {}
        for group in range(GROUP_COUNT):
            idx = start + group
            header = f"{self.GROUP_MARKER} {group}:"
            if idx >= len(lines):
                raise MalformedGroupHeader(group)
            if not lines[idx].strip().startswith(header):
                raise MalformedGroupHeader(group, line=idx + 1)

            _, members = lines[idx].split(":", 1)
            for raw in self.MEMBER_SEPARATOR.split(members):
                token = self.NON_DIGIT.sub("", raw)
                if not token:
                    continue
                vertex = int(token)
                if vertex >= vertex_count:
                    raise OutOfRange(vertex, vertex_count, line=idx + 1)
                assignment[vertex] = group
        return assignment


def parse_graph(input_text: str) -> Graph:
    """
    Convenience function to parse a graph document.

    Args:
        input_text: Complete document text

    Returns:
        Parsed Graph
    """
    parser = GraphDocumentParser()
    return parser.parse(input_text)


def load_graph_file(path: Union[str, Path], encoding: str = "utf-8") -> Graph:
    """
    Read a whole graph document from disk and parse it.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid in the given encoding
        GraphFormatError: If the document is malformed
    """
    text = Path(path).read_text(encoding=encoding)
    return parse_graph(text)
