"""
Debug tracing infrastructure for graphview.

This module provides data structures for capturing traces of the
load -> layout -> render pipeline. When debug mode is enabled, the
visualizer records a snapshot of every stage it runs.

This is primarily useful for:
1. Understanding why a document produced a given graph
2. Seeing when layouts were recomputed (loads and resizes)
3. Writing targeted tests (verifying specific pipeline decisions)

Usage:
    >>> visualizer = GraphVisualizer(debug=True)
    >>> visualizer.load_text(document)
    >>> trace = visualizer.get_trace()
    >>> print(trace.summary())
    >>> trace.dump_to_file("debug_trace.txt")
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Default number of stages a trace keeps
MAX_STAGES = 200


@dataclass
class PipelineStage:
    """
    Snapshot of state at a pipeline stage.

    The visualization pipeline has these stages:
    1. parse - Convert input text to a Graph
    2. layout - Assign pixel coordinates to vertices
    3. render - Build draw primitives

    Attributes:
        name: Name of this pipeline stage
        data: Dictionary of relevant data at this stage
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            # Truncate long values
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class RenderTrace:
    """
    Complete trace of the pipeline runs of one visualizer.

    Attributes:
        stages: Pipeline stages in the order they ran
        input_text: Text of the last document handed to the parser
        max_stages: Number of most recent stages kept; older stages are
            discarded so long sessions with many resizes stay bounded.
            None keeps every stage.
    """

    stages: List[PipelineStage] = field(default_factory=list)
    input_text: str = ""
    max_stages: Optional[int] = MAX_STAGES

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        """
        Add a pipeline stage snapshot.

        Args:
            name: Name of the stage (e.g., "layout")
            data: Dictionary of relevant data at this stage
        """
        self.stages.append(PipelineStage(name, data.copy()))
        if self.max_stages is not None and len(self.stages) > self.max_stages:
            del self.stages[: len(self.stages) - self.max_stages]

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get the most recent pipeline stage with the given name."""
        for stage in reversed(self.stages):
            if stage.name == name:
                return stage
        return None

    def get_stages(self, name: str) -> List[PipelineStage]:
        """Get every recorded stage with the given name."""
        return [stage for stage in self.stages if stage.name == name]

    def summary(self) -> str:
        """Generate a human-readable summary of the trace."""
        lines = [
            "=" * 60,
            "RENDER TRACE SUMMARY",
            "=" * 60,
            "",
            f"Input: {repr(self.input_text[:100])}"
            f"{'...' if len(self.input_text) > 100 else ''}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]

        stage_counts: Dict[str, int] = {}
        for stage in self.stages:
            stage_counts[stage.name] = stage_counts.get(stage.name, 0) + 1
        for name, count in stage_counts.items():
            lines.append(f"  {name}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """Generate a complete human-readable dump of the trace."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")
        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
