"""
Errors raised while reading graph documents.

Every failure to turn text into a Graph is a GraphFormatError. The subclass
names the kind of violation so a caller can react to it, and ``detail`` keeps
the offending value (section name, raw token, row index or vertex id).
"""

from typing import Any, Optional


class GraphFormatError(Exception):
    """Raised when a graph document cannot be parsed."""

    kind = "format"

    def __init__(self, message: str, detail: Any = None, line: Optional[int] = None):
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)
        self.detail = detail
        self.line = line


class MissingSection(GraphFormatError):
    """A required section marker was not found."""

    kind = "missing_section"

    def __init__(self, section: str):
        super().__init__(f"Section '{section}' not found", detail=section)
        self.section = section


class InvalidToken(GraphFormatError):
    """A matrix cell or edge line could not be read."""

    kind = "invalid_token"

    def __init__(self, raw: str, line: Optional[int] = None):
        super().__init__(f"Invalid token: {raw!r}", detail=raw, line=line)
        self.raw = raw


class NonSquareMatrix(GraphFormatError):
    """An adjacency matrix row does not have one cell per row."""

    kind = "non_square_matrix"

    def __init__(self, row: int, expected: int, actual: int):
        super().__init__(
            f"Matrix row {row} has {actual} entries, expected {expected}",
            detail=row,
        )
        self.row = row


class OutOfRange(GraphFormatError):
    """A vertex id outside [0, vertex_count) was referenced."""

    kind = "out_of_range"

    def __init__(self, vertex_id: int, vertex_count: int, line: Optional[int] = None):
        super().__init__(
            f"Vertex id out of range: {vertex_id} (graph has {vertex_count} vertices)",
            detail=vertex_id,
            line=line,
        )
        self.vertex_id = vertex_id


class MalformedGroupHeader(GraphFormatError):
    """A group line is missing or out of order."""

    kind = "malformed_group_header"

    def __init__(self, expected_index: int, line: Optional[int] = None):
        super().__init__(
            f"Expected 'Grupa {expected_index}:' but not found",
            detail=expected_index,
            line=line,
        )
        self.expected_index = expected_index


class EmptyGraph(GraphFormatError):
    """The document parsed but describes no vertices."""

    kind = "empty_graph"

    def __init__(self):
        super().__init__("Graph has no vertices")
