"""
Track record model.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TrackRecord:
    """
    One track as it appears on one release.

    Built once per (track, release) pairing. Only ``isrc`` and ``popularity``
    change afterwards, when track details are attached.
    """
    id: str
    title: str
    uri: str
    release_id: str
    release_type: str
    external: bool = False
    artists: List[str] = field(default_factory=list)
    duration_ms: Optional[int] = None
    isrc: Optional[str] = None
    popularity: Optional[int] = None

    @property
    def grouping_key(self) -> Optional[str]:
        """Recording identifier shared by every release of the same recording."""
        return self.isrc or None

    @property
    def duration(self) -> Optional[str]:
        """Duration formatted as M:SS."""
        if not self.duration_ms:
            return None
        total_seconds = self.duration_ms // 1000
        return f"{total_seconds // 60}:{total_seconds % 60:02d}"
