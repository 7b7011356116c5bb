"""Random DNA sequence drawing."""

import numpy as np

NUCLEOTIDES = np.array(list("ACGT"))
MIN_SEQUENCE_LENGTH = 5
MAX_SEQUENCE_LENGTH = 15  # inclusive


def random_dna_string(
    rng: np.random.Generator,
    min_length: int = MIN_SEQUENCE_LENGTH,
    max_length: int = MAX_SEQUENCE_LENGTH,
) -> str:
    """Draw a uniformly random DNA string.

    The length is drawn first, uniformly from [min_length, max_length]
    inclusive, then each symbol independently and uniformly from A/C/G/T.
    Both draws advance the caller's random stream.

    Args:
        rng: The run's random Generator.
        min_length: Shortest allowed length.
        max_length: Longest allowed length (inclusive).

    Returns:
        The sequence, symbols concatenated in draw order.
    """
    length = int(rng.integers(min_length, max_length, endpoint=True))
    symbols = rng.integers(0, len(NUCLEOTIDES), size=length)
    return "".join(NUCLEOTIDES[symbols])
