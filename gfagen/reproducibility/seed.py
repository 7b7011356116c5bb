"""Single-owner random stream for reproducible graph generation.

Every draw of a run comes from one numpy Generator built from one 64-bit
seed. When no seed is given, a fresh one is taken from OS entropy and
logged, so even an unseeded run can be replayed.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)

MAX_SEED = 2**64 - 1


def resolve_seed(seed: int | None) -> int:
    """Return the seed to use for a run.

    Args:
        seed: Caller-provided seed, or None for a non-reproducible one.

    Returns:
        An integer in [0, 2**64).
    """
    if seed is not None:
        return seed
    # SeedSequence() pulls 128 bits from the OS; fold to the 64-bit seed space
    entropy = int(np.random.SeedSequence().entropy)
    resolved = entropy & MAX_SEED
    log.info("No seed given, drew %d from OS entropy", resolved)
    return resolved


def make_rng(seed: int) -> np.random.Generator:
    """Build the random stream for one generation run."""
    return np.random.default_rng(seed)
