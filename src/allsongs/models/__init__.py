"""
Data models for AllSongs.
"""

from .releases import Release, ReleaseGroup
from .tracks import TrackRecord

__all__ = [
    'Release',
    'ReleaseGroup',
    'TrackRecord',
]
