"""
Duplicate resolver module for collapsing one recording released many times.
"""

from typing import Dict, Hashable, List, Sequence, Tuple

from ..core.logger import get_logger
from ..models.releases import ReleaseGroup
from ..models.tracks import TrackRecord

logger = get_logger("services.duplicate_resolver")

# Higher is more official
RELEASE_TYPE_RANK = {
    ReleaseGroup.ALBUM: 3,
    ReleaseGroup.SINGLE: 2,
    ReleaseGroup.COMPILATION: 1,
}


def selection_rank(record: TrackRecord) -> Tuple[int, int]:
    """
    Rank of a record when competing for its recording.
    
    Orders by (non-external, release type): every release primarily credited
    to the artist outranks every guest appearance, then album > single >
    compilation > any other type.
    """
    return (0 if record.external else 1, RELEASE_TYPE_RANK.get(record.release_type, 0))


def prefers(incoming: TrackRecord, existing: TrackRecord) -> bool:
    """
    Whether ``incoming`` should replace the currently selected ``existing`` record.
    
    The higher rank wins. On an equal rank the later record wins, so the latest
    album, single or compilation release is kept, except for external
    compilations and unknown release types, where the first one stays. A
    guest appearance of an unknown release type is never replaced.
    """
    incoming_rank = selection_rank(incoming)
    existing_rank = selection_rank(existing)
    if existing.external and not incoming.external and existing.release_type not in RELEASE_TYPE_RANK:
        return False
    if incoming_rank != existing_rank:
        return incoming_rank > existing_rank
    
    if incoming.release_type not in RELEASE_TYPE_RANK:
        return False
    if incoming.external and incoming.release_type == ReleaseGroup.COMPILATION:
        return False
    return True


class DuplicateResolver:
    """Keeps one TrackRecord per ISRC."""
    
    def resolve(self, records: Sequence[TrackRecord]) -> List[TrackRecord]:
        """
        Select one canonical record per ISRC.
        
        Records without an ISRC are never merged. Output follows the order in
        which each recording was first seen.
        """
        selected: Dict[Hashable, TrackRecord] = {}
        
        for position, record in enumerate(records):
            key = record.grouping_key
            if key is None:
                selected[(None, position)] = record
                continue
            
            existing = selected.get(key)
            if existing is None:
                selected[key] = record
            elif prefers(record, existing):
                logger.debug(
                    f"{key}: '{record.title}' from {record.release_type} {record.release_id} "
                    f"replaces {existing.release_type} {existing.release_id}"
                )
                selected[key] = record
        
        logger.info(f"Resolved {len(records)} tracks to {len(selected)} recordings")
        return list(selected.values())


def resolve_duplicates(records: Sequence[TrackRecord]) -> List[TrackRecord]:
    """Convenience wrapper around DuplicateResolver.resolve."""
    return DuplicateResolver().resolve(records)
