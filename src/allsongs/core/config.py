"""
Configuration for AllSongs.
Contains all constants, settings, and global parameters.
"""

import os


def env_float(name, default):
    """Read a float from the environment; None if the value is not a number."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return None


# Project Information
PROJECT_NAME = "AllSongs"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Build a deduplicated playlist of every song an artist has released on Spotify"

# Spotify Web API Configuration
SPOTIFY_CONFIG = {
    "BASE_URL": "https://api.spotify.com/v1",
    "AUTH_URL": "https://accounts.spotify.com/authorize",
    "TOKEN_URL": "https://accounts.spotify.com/api/token",
    "CLIENT_ID": os.getenv("SPOTIFY_CLIENT_ID"),
    "CLIENT_SECRET": os.getenv("SPOTIFY_CLIENT_SECRET"),
    "REDIRECT_URI": os.getenv("SPOTIFY_REDIRECT_URI", "http://localhost:8888/callback"),
    "SCOPES": [
        "user-read-private",
        "user-read-email",
        "playlist-modify-public",
        "playlist-modify-private",
        "user-follow-modify",
    ],
    "TIMEOUT": 30,
    "REQUEST_DELAY": env_float("ALLSONGS_REQUEST_DELAY", 1.0),  # seconds after every request
    "PAGE_SIZE": 49,
    "RELEASE_BATCH_SIZE": 20,  # GET /albums accepts at most 20 ids
    "TRACK_BATCH_SIZE": 50,  # GET /tracks accepts at most 50 ids
    "PLAYLIST_CHUNK_SIZE": 100,  # POST /playlists/{id}/tracks accepts at most 100 uris
}

# Playlist Configuration
PLAYLIST_CONFIG = {
    "TITLE_TEMPLATE": "All {artist} songs",
    "DESCRIPTION": "All of the songs, excluding alternate versions (preferring latest album release)",
    "PUBLIC": True,
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.getenv("ALLSONGS_LOG_LEVEL", "INFO").upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error Messages
ERROR_MESSAGES = {
    "NOT_AUTHORIZED": "Spotify authorization required. Run 'allsongs login' first.",
    "NO_RELEASES": "No releases found for this artist.",
    "NO_TRACKS": "No tracks crediting this artist were found on its releases.",
    "NETWORK_ERROR": "Network error occurred.",
    "PLAYLIST_FAILED": "Error adding tracks to playlist.",
}

# Success Messages
SUCCESS_MESSAGES = {
    "PLAYLIST_CREATED": "Playlist created successfully.",
}
