"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class FakeSpotify:
    """
    In-memory stand-in for SpotifyClient.
    
    Every endpoint is a Mock wrapping the fake data, so tests can assert on
    calls and inject failures through ``side_effect``.
    """
    
    def __init__(self, listings=None, album_details=None, track_details=None, authorized=True):
        self.listings = listings or {}
        self.album_details = album_details or {}
        self.track_details = track_details or {}
        self.authorized = authorized
        
        self.get_artist_albums = Mock(side_effect=self._artist_albums)
        self.get_albums = Mock(side_effect=lambda ids: [self.album_details.get(i) for i in ids])
        self.get_album_tracks = Mock(return_value={"items": [], "next": None})
        self.get_tracks = Mock(side_effect=lambda ids: [self.track_details.get(i) for i in ids])
        self.create_playlist = Mock(return_value={
            "id": "playlist-1",
            "external_urls": {"spotify": "https://open.spotify.com/playlist/playlist-1"},
        })
        self.add_tracks_to_playlist = Mock(return_value={"snapshot_id": "snap"})
        self.follow_artists = Mock(return_value=None)
    
    def is_authorized(self):
        return self.authorized
    
    def _artist_albums(self, artist_id, include_groups, limit, offset=0):
        items = self.listings.get(include_groups, [])
        return {"items": items[offset:offset + limit]}


def listing(album_id, group="album", release_date="2020-01-01", artists=("Test Artist",), album_type=None):
    """Simplified album object as listed under an artist."""
    return {
        "id": album_id,
        "name": f"Release {album_id}",
        "release_date": release_date,
        "release_date_precision": "day",
        "album_group": group,
        "album_type": album_type or (group if group != "appears_on" else "album"),
        "artists": [{"name": name} for name in artists],
    }


def track_item(track_id, name, artists=("Test Artist",), duration_ms=180000):
    """Simplified track object inside an album's track listing."""
    return {
        "id": track_id,
        "name": name,
        "uri": f"spotify:track:{track_id}",
        "duration_ms": duration_ms,
        "artists": [{"name": artist} for artist in artists],
    }


def album_detail(album_id, tracks, album_type="album"):
    """Full album object with its first page of tracks."""
    return {
        "id": album_id,
        "album_type": album_type,
        "tracks": {"items": list(tracks), "limit": 50, "offset": 0, "next": None},
    }


def track_detail(track_id, isrc, popularity=50):
    """Full track object."""
    return {"id": track_id, "external_ids": {"isrc": isrc}, "popularity": popularity}


@pytest.fixture
def fake_spotify():
    """Factory for FakeSpotify clients."""
    return FakeSpotify


@pytest.fixture
def zero_throttle():
    """Throttle policy that never sleeps but counts waits."""
    from allsongs.utils.throttle import ThrottlePolicy
    return ThrottlePolicy.none()


@pytest.fixture
def make_record():
    """Factory for TrackRecord instances with sensible defaults."""
    from allsongs.models.tracks import TrackRecord
    
    counter = {"n": 0}
    
    def _make(title="Song", release_type="album", external=False, isrc="ISRC1", **kwargs):
        counter["n"] += 1
        n = counter["n"]
        defaults = {
            "id": f"track-{n}",
            "uri": f"spotify:track:track-{n}",
            "release_id": f"release-{n}",
            "artists": ["Test Artist"],
            "duration_ms": 200000,
        }
        defaults.update(kwargs)
        return TrackRecord(
            title=title,
            release_type=release_type,
            external=external,
            isrc=isrc,
            **defaults
        )
    
    return _make
