"""Seed resolution and random stream construction."""

from gfagen.reproducibility.seed import MAX_SEED, make_rng, resolve_seed

__all__ = [
    "MAX_SEED",
    "make_rng",
    "resolve_seed",
]
