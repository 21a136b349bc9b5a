"""Data manipulation utility functions."""

from typing import Any, Iterator, Sequence, Tuple


def batched(xs: Sequence[Any], n: int) -> Iterator[Tuple[int, Sequence[Any]]]:
    """Yield successive n-sized chunks of a sequence with their start offsets.

    Args:
        xs: Sequence to batch
        n: Batch size, at least 1

    Yields:
        (start_index, chunk) pairs; the last chunk may be smaller
    """
    if n < 1:
        raise ValueError(f"Batch size must be positive, got {n}")
    for start in range(0, len(xs), n):
        yield start, xs[start:start + n]
