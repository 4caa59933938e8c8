"""
Alternate-version filter for dropping live, remix, acoustic (and similar) takes.
"""

from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from ..core.logger import get_logger
from ..models.tracks import TrackRecord
from .version_keywords import (
    ALTERNATE_VERSION_KEYWORDS,
    ALTERNATE_VERSION_EXCEPTIONS,
    TITLE_DELIMITERS,
)

logger = get_logger("services.alternate_filter")


def split_title(title: str) -> Optional[Tuple[str, str]]:
    """
    Split a lowercased title at its earliest delimiter.
    
    Returns:
        (base, suffix), both stripped, or None when the title has no delimiter
    """
    title = title.lower()
    positions = [title.index(d) for d in TITLE_DELIMITERS if d in title]
    if not positions:
        return None
    separator_index = min(positions)
    return title[:separator_index].strip(), title[separator_index + 1:].strip()


def alternate_base_title(
    title: str,
    keywords: Sequence[str] = ALTERNATE_VERSION_KEYWORDS,
    exceptions: Sequence[str] = ALTERNATE_VERSION_EXCEPTIONS
) -> Optional[str]:
    """
    Base title of an alternate version, or None if the title is not one.
    
    "Song (Acoustic)" gives "song"; "Love Story (Taylor's Version)" gives None.
    """
    parts = split_title(title)
    if parts is None:
        return None
    base, suffix = parts
    
    if not any(keyword in suffix for keyword in keywords):
        return None
    if any(exception in suffix for exception in exceptions):
        return None
    return base


class AlternateVersionFilter:
    """Removes alternate versions of tracks whose canonical version is present."""
    
    def __init__(
        self,
        keywords: Sequence[str] = ALTERNATE_VERSION_KEYWORDS,
        exceptions: Sequence[str] = ALTERNATE_VERSION_EXCEPTIONS
    ):
        self.keywords = [k.lower() for k in keywords]
        self.exceptions = [e.lower() for e in exceptions]
    
    def filter_alternates(self, records: Sequence[TrackRecord]) -> List[TrackRecord]:
        """
        Drop every alternate version that has a track titled exactly like its base.
        
        An alternate with no canonical counterpart is the only version available
        and is kept. Order is preserved.
        """
        titles = {record.title.lower() for record in records}
        kept: Dict[Hashable, TrackRecord] = {}
        
        for position, record in enumerate(records):
            base = alternate_base_title(record.title, self.keywords, self.exceptions)
            if base is not None and base in titles:
                logger.info(f"Removed alternate version: {record.title}")
                continue
            key = record.grouping_key
            kept[key if key is not None else (None, position)] = record
        
        return list(kept.values())


def remove_alternate_versions(records: Sequence[TrackRecord]) -> List[TrackRecord]:
    """Convenience wrapper around AlternateVersionFilter.filter_alternates."""
    return AlternateVersionFilter().filter_alternates(records)
