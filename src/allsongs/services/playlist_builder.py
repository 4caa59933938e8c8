"""
Playlist builder module for publishing the resolved track list.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..clients.spotify import SpotifyClient
from ..core.config import PLAYLIST_CONFIG, SPOTIFY_CONFIG
from ..core.exceptions import AllSongsError, AuthorizationRequiredError, PlaylistPopulationError, StageError
from ..core.logger import get_logger
from ..models.tracks import TrackRecord
from ..utils.batching import chunked

logger = get_logger("services.playlist_builder")


@dataclass
class PlaylistResult:
    """Outcome of publishing a playlist."""
    playlist_id: str
    name: str
    url: Optional[str] = None
    track_count: int = 0
    chunk_count: int = 0
    followed: bool = False


class PlaylistBuilder:
    """Creates the playlist, fills it in chunks and follows the artist."""
    
    def __init__(self, client: SpotifyClient, chunk_size: Optional[int] = None):
        self.client = client
        self.chunk_size = chunk_size or SPOTIFY_CONFIG["PLAYLIST_CHUNK_SIZE"]
    
    def publish(
        self,
        artist_id: str,
        artist_name: str,
        tracks: Sequence[TrackRecord],
        follow: bool = True
    ) -> PlaylistResult:
        """
        Create "All <artist> songs" holding ``tracks`` in order.
        
        Raises:
            StageError: the playlist could not be created
            PlaylistPopulationError: a chunk failed; earlier chunks stay in the playlist
        """
        name = PLAYLIST_CONFIG["TITLE_TEMPLATE"].format(artist=artist_name)
        try:
            playlist = self.client.create_playlist(
                name,
                description=PLAYLIST_CONFIG["DESCRIPTION"],
                public=PLAYLIST_CONFIG["PUBLIC"]
            )
        except AuthorizationRequiredError:
            raise
        except AllSongsError as e:
            raise StageError("create playlist", name, str(e)) from e
        
        playlist_id = playlist["id"]
        logger.info(f"Created playlist '{name}' ({playlist_id})")
        
        uris = [track.uri for track in tracks]
        chunk_count = self.add_tracks(playlist_id, uris)
        
        followed = self.follow_artist(artist_id) if follow else False
        
        return PlaylistResult(
            playlist_id=playlist_id,
            name=name,
            url=(playlist.get("external_urls") or {}).get("spotify"),
            track_count=len(uris),
            chunk_count=chunk_count,
            followed=followed,
        )
    
    def add_tracks(self, playlist_id: str, uris: Sequence[str]) -> int:
        """Insert ``uris`` in chunks; returns the number of insertion calls made."""
        inserted = 0
        chunks: List[List[str]] = list(chunked(uris, self.chunk_size))
        for index, chunk in enumerate(chunks):
            try:
                self.client.add_tracks_to_playlist(playlist_id, chunk)
            except AllSongsError as e:
                logger.error(f"Error adding tracks to playlist: {e}")
                raise PlaylistPopulationError(playlist_id, index, inserted, str(e)) from e
            inserted += len(chunk)
            logger.debug(f"Added chunk {index + 1}/{len(chunks)} ({inserted}/{len(uris)} tracks)")
        return len(chunks)
    
    def follow_artist(self, artist_id: str) -> bool:
        """Follow the artist; failures are logged and otherwise ignored."""
        try:
            self.client.follow_artists([artist_id])
        except AllSongsError as e:
            logger.warning(f"Error following artist: {e}")
            return False
        return True
