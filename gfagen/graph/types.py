"""Record types emitted by the graph generator."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NodeRecord:
    """A segment: 1-indexed node id and its DNA sequence."""

    node_id: int
    sequence: str


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """A directed link between two oriented node endpoints.

    Self-loops and duplicates are legal; nothing downstream dedups them.
    """

    from_id: int
    from_sign: str  # "+" or "-"
    to_id: int
    to_sign: str  # "+" or "-"


@dataclass(frozen=True, slots=True)
class GenerationSummary:
    """What a finished generation run wrote, for logging and callers."""

    seed: int
    node_lines: int
    cycle_edge_lines: int
    random_edge_lines: int

    @property
    def edge_lines(self) -> int:
        return self.cycle_edge_lines + self.random_edge_lines
