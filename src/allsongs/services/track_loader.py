"""
Track loader module.

Turns a release list into flat TrackRecords (one per track per release) and
attaches recording identifiers and popularity from a second round of requests.
Each stage is a pure function over an accumulator; TrackLoader only feeds it
batches fetched through the client.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..clients.spotify import SpotifyClient
from ..core.config import SPOTIFY_CONFIG
from ..core.exceptions import AllSongsError, AuthorizationRequiredError, StageError
from ..core.logger import get_logger
from ..models.releases import Release
from ..models.tracks import TrackRecord
from ..utils.batching import chunked
from ..utils.throttle import ThrottlePolicy

logger = get_logger("services.track_loader")

RELEASE_STAGE = "load release tracks"
TRACK_STAGE = "enrich tracks"


@dataclass(frozen=True)
class LoadState:
    """Records, track ids and detailed releases accumulated over the release batches so far."""
    records: Tuple[TrackRecord, ...] = ()
    track_ids: Tuple[str, ...] = ()
    releases: Tuple[Release, ...] = ()


def build_track_records(
    release_detail: Mapping[str, Any],
    release: Release,
    owner_artist_name: str,
    track_items: Optional[Iterable[Mapping[str, Any]]] = None
) -> List[TrackRecord]:
    """
    Build a TrackRecord for every track of a release that credits the owner artist.
    
    Tracks crediting only other artists are dropped. The release type comes from
    the release detail; the external flag from the group the release was listed under.
    
    Args:
        release_detail: Full album object
        release: The listed release the detail belongs to
        owner_artist_name: Exact artist name a track must credit
        track_items: Track listing to use instead of the detail's first page
    """
    if not owner_artist_name:
        return []
    if track_items is None:
        track_items = (release_detail.get("tracks") or {}).get("items") or []
    release_type = release_detail.get("album_type") or release.album_type
    
    records = []
    for track in track_items:
        if not track or not track.get("id"):
            continue
        artist_names = [artist.get("name") for artist in track.get("artists", [])]
        if owner_artist_name not in artist_names:
            continue
        records.append(TrackRecord(
            id=track["id"],
            title=track.get("name", ""),
            uri=track.get("uri", f"spotify:track:{track['id']}"),
            release_id=release.id,
            release_type=release_type,
            external=release.is_external,
            artists=artist_names,
            duration_ms=track.get("duration_ms"),
        ))
    return records


def flatten_release_batch(
    state: LoadState,
    release_details: Sequence[Optional[Mapping[str, Any]]],
    releases_by_id: Mapping[str, Release],
    owner_artist_name: str,
    track_items_by_release: Optional[Mapping[str, List[Mapping[str, Any]]]] = None
) -> LoadState:
    """Fold one batch of release details into the accumulator."""
    track_items_by_release = track_items_by_release or {}
    new_records: List[TrackRecord] = []
    detailed: List[Release] = []
    for detail in release_details:
        if not detail:
            continue
        release = releases_by_id.get(detail.get("id"))
        if release is None:
            logger.debug(f"Skipping unrequested release {detail.get('id')}")
            continue
        track_items = track_items_by_release.get(release.id)
        if track_items is None:
            track_items = (detail.get("tracks") or {}).get("items") or []
        detailed.append(replace(release, track_ids=tuple(
            track["id"] for track in track_items if track and track.get("id")
        )))
        new_records.extend(build_track_records(detail, release, owner_artist_name, track_items))
    return LoadState(
        records=state.records + tuple(new_records),
        track_ids=state.track_ids + tuple(record.id for record in new_records),
        releases=state.releases + tuple(detailed),
    )


def apply_track_details(
    records: Iterable[TrackRecord],
    track_details: Iterable[Optional[Mapping[str, Any]]]
) -> int:
    """
    Attach ISRC and popularity to records, matched by track id.
    
    Records without a matching detail (removed or restricted tracks) are left
    untouched. A relinked detail also matches the id it was linked from.
    
    Returns:
        Number of records that received details
    """
    details_by_id: Dict[str, Mapping[str, Any]] = {}
    for detail in track_details:
        if not detail:
            continue
        if detail.get("id"):
            details_by_id.setdefault(detail["id"], detail)
        linked_from = detail.get("linked_from") or {}
        if linked_from.get("id"):
            details_by_id.setdefault(linked_from["id"], detail)
    
    enriched = 0
    for record in records:
        detail = details_by_id.get(record.id)
        if detail is None:
            continue
        record.isrc = (detail.get("external_ids") or {}).get("isrc")
        record.popularity = detail.get("popularity")
        enriched += 1
    return enriched


class TrackLoader:
    """Loads track listings and track details in throttled, sequential batches."""
    
    def __init__(
        self,
        client: SpotifyClient,
        throttle: Optional[ThrottlePolicy] = None,
        release_batch_size: Optional[int] = None,
        track_batch_size: Optional[int] = None
    ):
        self.client = client
        self.throttle = throttle or ThrottlePolicy()
        self.release_batch_size = release_batch_size or SPOTIFY_CONFIG["RELEASE_BATCH_SIZE"]
        self.track_batch_size = track_batch_size or SPOTIFY_CONFIG["TRACK_BATCH_SIZE"]
    
    def load_tracks(self, releases: Sequence[Release], owner_artist_name: str) -> List[TrackRecord]:
        """Fetch release details and return the flattened TrackRecords."""
        return list(self.load(releases, owner_artist_name).records)
    
    def load(self, releases: Sequence[Release], owner_artist_name: str) -> LoadState:
        """
        Fetch release details batch by batch and fold them into a LoadState.
        
        Records keep the order of ``releases``, then track order within a release.
        The returned state also carries ``releases`` in their original order, each
        with its full track listing. Releases the API returned no detail for keep
        an empty ``track_ids``.
        """
        releases_by_id = {release.id: release for release in releases}
        state = LoadState()
        
        batches = list(chunked(releases, self.release_batch_size))
        for index, batch in enumerate(batches, start=1):
            release_ids = [release.id for release in batch]
            logger.debug(f"Release batch {index}/{len(batches)}: {len(release_ids)} releases")
            
            details = self._call(RELEASE_STAGE, release_ids, self.client.get_albums, release_ids)
            self.throttle.wait()
            
            extra_items = {}
            for detail in details:
                if detail and (detail.get("tracks") or {}).get("next"):
                    extra_items[detail["id"]] = self._fetch_remaining_tracks(detail)
            
            state = flatten_release_batch(state, details, releases_by_id, owner_artist_name, extra_items)
        
        detailed = {release.id: release for release in state.releases}
        state = replace(state, releases=tuple(detailed.get(release.id, release) for release in releases))
        logger.info(f"Loaded {len(state.records)} tracks crediting {owner_artist_name} from {len(releases)} releases")
        return state
    
    def enrich(
        self,
        records: Sequence[TrackRecord],
        track_ids: Optional[Iterable[str]] = None
    ) -> Sequence[TrackRecord]:
        """
        Attach ISRC and popularity to ``records`` in place and return them.
        
        Args:
            records: Records to enrich
            track_ids: Ids collected while loading; derived from ``records`` if omitted
        """
        if track_ids is None:
            track_ids = (record.id for record in records)
        track_ids = list(dict.fromkeys(track_ids))
        
        enriched = 0
        batches = list(chunked(track_ids, self.track_batch_size))
        for index, batch in enumerate(batches, start=1):
            logger.debug(f"Track batch {index}/{len(batches)}: {len(batch)} tracks")
            details = self._call(TRACK_STAGE, batch, self.client.get_tracks, batch)
            self.throttle.wait()
            enriched += apply_track_details(records, details)
        
        missing = len(records) - enriched
        if missing:
            logger.info(f"{missing} tracks have no track details and will not be merged")
        return records
    
    def _fetch_remaining_tracks(self, detail: Mapping[str, Any]) -> List[Mapping[str, Any]]:
        """Page through a long album's track listing beyond the first page."""
        tracks_page = detail["tracks"]
        items = list(tracks_page.get("items") or [])
        limit = tracks_page.get("limit") or 50
        offset = tracks_page.get("offset", 0) + limit
        
        while True:
            page = self._call(
                RELEASE_STAGE, [detail["id"]], self.client.get_album_tracks,
                detail["id"], limit=limit, offset=offset
            )
            self.throttle.wait()
            page_items = page.get("items") or []
            items.extend(page_items)
            if not page_items or not page.get("next"):
                break
            offset += limit
        return items
    
    def _call(self, stage: str, ids: List[str], func, *args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AuthorizationRequiredError:
            raise
        except AllSongsError as e:
            raise StageError(stage, f"batch [{', '.join(ids)}]", str(e)) from e
