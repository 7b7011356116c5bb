"""Node emission: one segment per node id, ascending."""

from collections.abc import Iterator

import numpy as np

from gfagen.graph.sequences import random_dna_string
from gfagen.graph.types import NodeRecord


def generate_nodes(node_count: int, rng: np.random.Generator) -> Iterator[NodeRecord]:
    """Yield node records 1..node_count with fresh random sequences.

    Ids are dense and ascending; that order fixes the sequence of draws and
    so is part of what makes a seeded run reproducible.
    """
    for node_id in range(1, node_count + 1):
        yield NodeRecord(node_id=node_id, sequence=random_dna_string(rng))
