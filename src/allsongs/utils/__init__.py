"""
Utility modules for AllSongs.
"""

from .throttle import ThrottlePolicy
from .batching import chunked

__all__ = [
    'ThrottlePolicy',
    'chunked',
]
