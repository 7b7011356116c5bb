"""Graph specification dataclass, frozen and slotted for immutability."""

from dataclasses import dataclass

from gfagen.reproducibility.seed import MAX_SEED


class ConfigurationError(ValueError):
    """Raised when a graph specification cannot be generated as requested."""


@dataclass(frozen=True, slots=True)
class GraphSpec:
    """Everything a single generation run needs to know.

    Validation runs in __post_init__, so an invalid combination is rejected
    before any output sink is opened or any random draw is made.
    """

    node_count: int
    edge_count: int
    ensure_strongly_connected: bool = False
    seed: int | None = None  # None = draw from OS entropy

    def __post_init__(self) -> None:
        if self.node_count < 0 or self.edge_count < 0:
            raise ConfigurationError(
                "Counts must be non-negative "
                f"(node_count={self.node_count}, edge_count={self.edge_count})"
            )
        if self.seed is not None and not 0 <= self.seed <= MAX_SEED:
            raise ConfigurationError(f"Seed must be in [0, 2**64), got {self.seed}")
        if self.ensure_strongly_connected and self.edge_count < self.node_count:
            raise ConfigurationError(
                "Cannot ensure strong connectivity with fewer edges than nodes "
                f"(edge_count={self.edge_count}, node_count={self.node_count})"
            )
        if self.node_count == 0 and self.random_edge_count > 0:
            raise ConfigurationError(
                f"Cannot draw {self.random_edge_count} random edges "
                "from an empty node set"
            )

    @property
    def cycle_edge_count(self) -> int:
        """Number of edges consumed by the strong-connectivity cycle."""
        if self.ensure_strongly_connected and self.node_count >= 1:
            return self.node_count
        return 0

    @property
    def random_edge_count(self) -> int:
        """Number of uniformly random edges left after the cycle."""
        return self.edge_count - self.cycle_edge_count
