"""
Tests for the catalog pipeline.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from conftest import album_detail, listing, track_detail, track_item
from allsongs.core.exceptions import APIError, AuthorizationRequiredError, StageError
from allsongs.services.pipeline import CatalogPipeline


@pytest.fixture
def catalog(fake_spotify):
    """An artist with an album, an earlier single and an even earlier feature."""
    return fake_spotify(
        listings={
            "album": [listing("album-1", "album", "2020-06-01")],
            "single": [listing("single-1", "single", "2019-11-15")],
            "appears_on": [listing("guest-1", "appears_on", "2018", artists=("Other Artist",))],
        },
        album_details={
            "album-1": album_detail("album-1", [
                track_item("a-song", "Song"),
                track_item("a-live", "Song (Live)"),
            ]),
            "single-1": album_detail("single-1", [track_item("s-song", "Song")], album_type="single"),
            "guest-1": album_detail("guest-1", [
                track_item("g-feat", "Feature", artists=("Other Artist", "Test Artist")),
                track_item("g-other", "Not Ours", artists=("Other Artist",)),
            ]),
        },
        track_details={
            "a-song": track_detail("a-song", "ISRC-SONG"),
            "s-song": track_detail("s-song", "ISRC-SONG"),
            "a-live": track_detail("a-live", "ISRC-LIVE"),
            "g-feat": track_detail("g-feat", "ISRC-FEAT"),
        },
    )


class TestCatalogPipeline:
    """Tests for CatalogPipeline."""
    
    def test_run_produces_resolved_filtered_tracks(self, catalog, zero_throttle):
        """Test run produces resolved filtered tracks."""
        result = CatalogPipeline(catalog, zero_throttle).run("artist-1")
        
        assert result.artist_name == "Test Artist"
        assert [r.id for r in result.releases] == ["guest-1", "single-1", "album-1"]
        assert result.loaded_count == 4
        assert result.resolved_count == 3
        assert [t.id for t in result.tracks] == ["g-feat", "a-song"]
        assert result.uris == ["spotify:track:g-feat", "spotify:track:a-song"]
    
    def test_unauthorized_client_makes_no_requests(self, catalog, zero_throttle):
        """Test unauthorized client makes no requests."""
        catalog.authorized = False
        
        with pytest.raises(AuthorizationRequiredError):
            CatalogPipeline(catalog, zero_throttle).run("artist-1")
        
        catalog.get_artist_albums.assert_not_called()
    
    def test_artist_without_releases(self, fake_spotify, zero_throttle):
        """Test artist without releases."""
        client = fake_spotify()
        
        result = CatalogPipeline(client, zero_throttle).build_playlist("artist-1")
        
        assert result.tracks == []
        assert result.playlist is None
        client.get_albums.assert_not_called()
        client.create_playlist.assert_not_called()
    
    def test_upstream_failure_returns_nothing(self, catalog, zero_throttle):
        """Test upstream failure returns nothing."""
        catalog.get_tracks.side_effect = APIError("server error", status_code=502)
        
        with pytest.raises(StageError):
            CatalogPipeline(catalog, zero_throttle).build_playlist("artist-1")
        
        catalog.create_playlist.assert_not_called()
    
    def test_build_playlist_publishes_tracks(self, catalog, zero_throttle):
        """Test build playlist publishes tracks."""
        result = CatalogPipeline(catalog, zero_throttle).build_playlist("artist-1")
        
        catalog.create_playlist.assert_called_once()
        catalog.add_tracks_to_playlist.assert_called_once_with(
            "playlist-1", ["spotify:track:g-feat", "spotify:track:a-song"]
        )
        catalog.follow_artists.assert_called_once_with(["artist-1"])
        assert result.playlist.track_count == 2
    
    def test_requests_are_throttled(self, catalog, zero_throttle):
        """Test requests are throttled."""
        CatalogPipeline(catalog, zero_throttle).run("artist-1")
        
        # 3 non-empty listing pages, 1 release batch, 1 track batch
        assert zero_throttle.waits == 5
    
    def test_releases_carry_their_track_ids(self, fake_spotify, zero_throttle):
        """Test fetched releases come back with their full track listing."""
        client = fake_spotify(
            listings={"album": [listing("album-1", "album", "2020-06-01")]},
            album_details={"album-1": album_detail("album-1", [
                track_item("t1", "One"),
                track_item("t2", "Two"),
            ])},
        )
        
        result = CatalogPipeline(client, zero_throttle).run("artist-1")
        
        assert result.releases[0].track_ids == ("t1", "t2")
    
    def test_enrichment_batches_loaded_track_ids(self, catalog, zero_throttle):
        """Test enrichment requests the ids collected while loading, once each."""
        CatalogPipeline(catalog, zero_throttle).run("artist-1")
        
        catalog.get_tracks.assert_called_once_with(["g-feat", "s-song", "a-song", "a-live"])
    
    def test_releases_without_artist_name_load_nothing(self, fake_spotify, zero_throttle):
        """Test a run stops when the first release names no artist."""
        nameless = track_item("t1", "Song")
        nameless["artists"] = [{}]
        client = fake_spotify(
            listings={"album": [listing("album-1", artists=())]},
            album_details={"album-1": album_detail("album-1", [nameless])},
        )
        
        result = CatalogPipeline(client, zero_throttle).build_playlist("artist-1")
        
        assert result.artist_name is None
        assert [r.id for r in result.releases] == ["album-1"]
        assert result.tracks == []
        client.get_albums.assert_not_called()
        client.create_playlist.assert_not_called()
