"""
Catalog pipeline: fetch, load, enrich, resolve and filter one artist's tracks.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..clients.spotify import SpotifyClient
from ..core.config import ERROR_MESSAGES
from ..core.exceptions import AuthorizationRequiredError
from ..core.logger import get_logger
from ..models.releases import Release
from ..models.tracks import TrackRecord
from ..utils.throttle import ThrottlePolicy
from .alternate_filter import AlternateVersionFilter
from .duplicate_resolver import DuplicateResolver
from .playlist_builder import PlaylistBuilder, PlaylistResult
from .release_fetcher import ReleaseFetcher, owner_artist_name, sort_by_release_date
from .track_loader import TrackLoader

logger = get_logger("services.pipeline")


@dataclass
class PipelineResult:
    """Everything one run produced."""
    artist_id: str
    artist_name: Optional[str] = None
    releases: List[Release] = field(default_factory=list)
    loaded_count: int = 0
    resolved_count: int = 0
    tracks: List[TrackRecord] = field(default_factory=list)
    playlist: Optional[PlaylistResult] = None

    @property
    def uris(self) -> List[str]:
        return [track.uri for track in self.tracks]


class CatalogPipeline:
    """Runs the stages strictly in sequence against one authorized client."""
    
    def __init__(
        self,
        client: SpotifyClient,
        throttle: Optional[ThrottlePolicy] = None,
        fetcher: Optional[ReleaseFetcher] = None,
        loader: Optional[TrackLoader] = None,
        resolver: Optional[DuplicateResolver] = None,
        alternate_filter: Optional[AlternateVersionFilter] = None,
        playlist_builder: Optional[PlaylistBuilder] = None
    ):
        self.client = client
        self.throttle = throttle or ThrottlePolicy()
        self.fetcher = fetcher or ReleaseFetcher(client, self.throttle)
        self.loader = loader or TrackLoader(client, self.throttle)
        self.resolver = resolver or DuplicateResolver()
        self.alternate_filter = alternate_filter or AlternateVersionFilter()
        self.playlist_builder = playlist_builder or PlaylistBuilder(client)
    
    def run(self, artist_id: str) -> PipelineResult:
        """
        Build the ordered, deduplicated track list for an artist.
        
        Raises:
            AuthorizationRequiredError: the client is not authorized; nothing was requested
            StageError: an upstream request failed; no partial result is returned
        """
        if not self.client.is_authorized():
            raise AuthorizationRequiredError(ERROR_MESSAGES["NOT_AUTHORIZED"])
        
        releases = self.fetcher.fetch_all_releases(artist_id)
        result = PipelineResult(artist_id=artist_id, releases=releases)
        if not releases:
            logger.warning(f"{ERROR_MESSAGES['NO_RELEASES']} ({artist_id})")
            return result
        
        result.artist_name = owner_artist_name(releases)
        if not result.artist_name:
            logger.warning(f"Releases for {artist_id} name no primary artist; nothing to load")
            return result
        releases = sort_by_release_date(releases)
        
        state = self.loader.load(releases, result.artist_name)
        releases = result.releases = list(state.releases)
        records = list(state.records)
        self.loader.enrich(records, state.track_ids)
        result.loaded_count = len(records)
        
        unique = self.resolver.resolve(records)
        result.resolved_count = len(unique)
        result.tracks = self.alternate_filter.filter_alternates(unique)
        
        logger.info(
            f"{result.artist_name}: {len(releases)} releases, {result.loaded_count} tracks, "
            f"{result.resolved_count} unique, {len(result.tracks)} after removing alternate versions"
        )
        return result
    
    def build_playlist(self, artist_id: str, follow: bool = True) -> PipelineResult:
        """Run the pipeline and publish the result as a playlist."""
        result = self.run(artist_id)
        if not result.tracks:
            return result
        result.playlist = self.playlist_builder.publish(
            artist_id, result.artist_name, result.tracks, follow=follow
        )
        return result
