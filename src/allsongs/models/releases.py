"""
Release models.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


class ReleaseGroup:
    """Release categories an artist's catalog is listed under, in fetch order."""
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"
    APPEARS_ON = "appears_on"

    FETCH_ORDER = (ALBUM, SINGLE, COMPILATION, APPEARS_ON)


@dataclass(frozen=True)
class Release:
    """A release listed under an artist, as returned by the catalog."""
    id: str
    name: str = ""
    release_date: Optional[str] = None
    release_date_precision: Optional[str] = None  # "year", "month" or "day"
    album_group: str = ReleaseGroup.ALBUM  # category the release was listed under
    album_type: str = ReleaseGroup.ALBUM  # the release's own type
    artists: Tuple[str, ...] = ()
    track_ids: Tuple[str, ...] = ()

    @property
    def is_external(self) -> bool:
        """True when the artist only appears on this release as a guest."""
        return self.album_group == ReleaseGroup.APPEARS_ON

    @property
    def sort_key(self) -> Tuple[int, int, int, int]:
        """
        Comparable key for ordering by release date.

        Partial dates ("2019", "2019-05") sort as the first day of the period;
        missing or malformed dates sort after every dated release.
        """
        if not self.release_date or not self.release_date.strip():
            return (1, 0, 0, 0)
        parts = self.release_date.strip().split('-')
        if not parts[0].isdigit():
            return (1, 0, 0, 0)
        year = int(parts[0])
        month = int(parts[1]) if len(parts) >= 2 and parts[1].isdigit() else 1
        day = int(parts[2]) if len(parts) >= 3 and parts[2].isdigit() else 1
        return (0, year, month, day)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Release":
        """Build a Release from a simplified album object."""
        tracks = (data.get("tracks") or {}).get("items") or []
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            release_date=data.get("release_date"),
            release_date_precision=data.get("release_date_precision"),
            album_group=data.get("album_group") or data.get("album_type") or ReleaseGroup.ALBUM,
            album_type=data.get("album_type") or ReleaseGroup.ALBUM,
            artists=tuple(a.get("name", "") for a in data.get("artists", [])),
            track_ids=tuple(t["id"] for t in tracks if t and t.get("id")),
        )
