"""
Tests for configuration module.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from allsongs.core.config import (
    PROJECT_NAME,
    PROJECT_VERSION,
    SPOTIFY_CONFIG,
    PLAYLIST_CONFIG,
    LOGGING_CONFIG,
    env_float,
)


def test_project_info():
    """Test project info."""
    assert PROJECT_NAME == "AllSongs"
    assert PROJECT_VERSION == "1.0.0"


def test_spotify_batch_limits():
    """Test spotify batch limits."""
    assert SPOTIFY_CONFIG["PAGE_SIZE"] == 49
    assert SPOTIFY_CONFIG["RELEASE_BATCH_SIZE"] == 20
    assert SPOTIFY_CONFIG["TRACK_BATCH_SIZE"] == 50
    assert SPOTIFY_CONFIG["PLAYLIST_CHUNK_SIZE"] == 100


def test_spotify_config():
    """Test spotify config."""
    assert SPOTIFY_CONFIG["BASE_URL"].startswith("https://")
    assert SPOTIFY_CONFIG["REQUEST_DELAY"] >= 0
    assert "user-follow-modify" in SPOTIFY_CONFIG["SCOPES"]


def test_playlist_title():
    """Test playlist title."""
    assert PLAYLIST_CONFIG["TITLE_TEMPLATE"].format(artist="Queen") == "All Queen songs"


def test_logging_config():
    """Test logging config."""
    assert "LEVEL" in LOGGING_CONFIG
    assert "FORMAT" in LOGGING_CONFIG


def test_env_float_parses_number(monkeypatch):
    """Test a numeric environment value is read as a float."""
    monkeypatch.setenv("ALLSONGS_TEST_DELAY", "0.25")
    assert env_float("ALLSONGS_TEST_DELAY", 1.0) == 0.25


def test_env_float_default_when_unset(monkeypatch):
    """Test the default is used when the variable is unset."""
    monkeypatch.delenv("ALLSONGS_TEST_DELAY", raising=False)
    assert env_float("ALLSONGS_TEST_DELAY", 1.0) == 1.0


def test_env_float_non_numeric_is_none(monkeypatch):
    """Test a non-numeric value is reported as None instead of raising."""
    monkeypatch.setenv("ALLSONGS_TEST_DELAY", "fast")
    assert env_float("ALLSONGS_TEST_DELAY", 1.0) is None
