"""Edge emission: optional Hamiltonian cycle, then uniform random links.

A directed cycle through every node is enough for strong connectivity: any
node reaches any other by walking the cycle, whatever edges follow. The
random links that fill the rest of the budget are deliberately unfiltered,
so self-loops and duplicate links occur and exercise downstream tools.
"""

from collections.abc import Iterator

import numpy as np

from gfagen.config.spec import ConfigurationError
from gfagen.graph.gfa import ORIENTATIONS
from gfagen.graph.types import EdgeRecord


def cycle_edges(node_count: int) -> Iterator[EdgeRecord]:
    """Yield 1->2, 2->3, ..., n->1, all forward-oriented.

    Consumes no random draws. For node_count == 1 this is the single
    self-loop 1->1.

    Raises:
        ConfigurationError: If node_count < 1 (no cycle over an empty set).
    """
    if node_count < 1:
        raise ConfigurationError("Cannot build a cycle over zero nodes")

    for node_id in range(1, node_count):
        yield EdgeRecord(from_id=node_id, from_sign="+", to_id=node_id + 1, to_sign="+")
    yield EdgeRecord(from_id=node_count, from_sign="+", to_id=1, to_sign="+")


def random_edges(
    node_count: int, edge_count: int, rng: np.random.Generator
) -> Iterator[EdgeRecord]:
    """Yield edge_count uniformly random oriented links.

    Per edge the draws happen in a fixed order: from, to, from_sign,
    to_sign. Changing that order changes every seeded output.

    Args:
        node_count: Endpoints are drawn from [1, node_count].
        edge_count: Number of links to yield.
        rng: The run's random Generator.

    Raises:
        ConfigurationError: If edge_count > 0 but there are no nodes to
            draw from. Raised before the first draw.
    """
    if edge_count > 0 and node_count < 1:
        raise ConfigurationError(
            f"Cannot draw {edge_count} random edges from an empty node set"
        )

    for _ in range(edge_count):
        from_id = int(rng.integers(1, node_count, endpoint=True))
        to_id = int(rng.integers(1, node_count, endpoint=True))
        from_sign = ORIENTATIONS[rng.integers(0, 2)]
        to_sign = ORIENTATIONS[rng.integers(0, 2)]
        yield EdgeRecord(
            from_id=from_id, from_sign=from_sign, to_id=to_id, to_sign=to_sign
        )
