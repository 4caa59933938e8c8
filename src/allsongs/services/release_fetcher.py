"""
Release fetcher module for listing an artist's whole catalog.
"""

from typing import List, Optional, Sequence

from ..clients.spotify import SpotifyClient
from ..core.config import SPOTIFY_CONFIG
from ..core.exceptions import AllSongsError, AuthorizationRequiredError, StageError
from ..core.logger import get_logger
from ..models.releases import Release, ReleaseGroup
from ..utils.throttle import ThrottlePolicy

logger = get_logger("services.release_fetcher")

STAGE_NAME = "fetch releases"


class ReleaseFetcher:
    """Pages through an artist's releases one release group at a time."""
    
    def __init__(
        self,
        client: SpotifyClient,
        throttle: Optional[ThrottlePolicy] = None,
        page_size: Optional[int] = None,
        groups: Sequence[str] = ReleaseGroup.FETCH_ORDER,
        max_pages: Optional[int] = None
    ):
        """
        Initialize release fetcher.
        
        Args:
            client: Authorized Spotify client
            throttle: Delay policy applied after every non-empty page
            page_size: Releases requested per page
            groups: Release groups to list, fetched in this order
            max_pages: Optional per-group page cap; exceeding it is an error
        """
        self.client = client
        self.throttle = throttle or ThrottlePolicy()
        self.page_size = page_size or SPOTIFY_CONFIG["PAGE_SIZE"]
        self.groups = tuple(groups)
        self.max_pages = max_pages
    
    def fetch_all_releases(self, artist_id: str) -> List[Release]:
        """
        Fetch every release of the artist across all release groups.
        
        Groups are fetched sequentially and each one restarts at offset 0.
        Results keep fetch order (group order, then page order); a release listed
        under two groups appears twice.
        """
        releases: List[Release] = []
        for group in self.groups:
            group_releases = self.fetch_group(artist_id, group)
            logger.info(f"Fetched {len(group_releases)} '{group}' releases for artist {artist_id}")
            releases.extend(group_releases)
        return releases
    
    def fetch_group(self, artist_id: str, group: str) -> List[Release]:
        """Fetch all pages of one release group until an empty page is returned."""
        releases: List[Release] = []
        offset = 0
        pages = 0
        
        while True:
            if self.max_pages is not None and pages >= self.max_pages:
                raise StageError(
                    STAGE_NAME,
                    f"artist {artist_id} ({group})",
                    f"no empty page after {pages} pages"
                )
            
            try:
                page = self.client.get_artist_albums(
                    artist_id, include_groups=group, limit=self.page_size, offset=offset
                )
            except AuthorizationRequiredError:
                raise
            except AllSongsError as e:
                raise StageError(
                    STAGE_NAME, f"artist {artist_id} ({group}, offset {offset})", str(e)
                ) from e
            pages += 1
            
            items = page.get("items") or []
            if not items:
                logger.debug(f"Empty page for '{group}' at offset {offset}")
                break
            
            for item in items:
                data = dict(item)
                # Fall back to the requested group if the listing omits it
                data.setdefault("album_group", group)
                releases.append(Release.from_api(data))
            
            offset += self.page_size
            self.throttle.wait()
        
        return releases


def sort_by_release_date(releases: Sequence[Release]) -> List[Release]:
    """
    Order releases by ascending release date.
    
    The sort is stable, so releases sharing a date keep fetch order.
    Undated releases go last.
    """
    return sorted(releases, key=lambda release: release.sort_key)


def owner_artist_name(releases: Sequence[Release]) -> Optional[str]:
    """Name of the artist primarily credited on the first fetched release."""
    for release in releases[:1]:
        if release.artists:
            return release.artists[0]
    return None
