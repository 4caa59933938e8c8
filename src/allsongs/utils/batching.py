"""
Batching helpers.
"""

from typing import Iterator, List, Sequence, TypeVar

T = TypeVar('T')


def chunked(items: Sequence[T], size: int) -> Iterator[List[T]]:
    """Yield consecutive slices of ``items`` holding at most ``size`` elements."""
    if size < 1:
        raise ValueError("size must be >= 1")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])
