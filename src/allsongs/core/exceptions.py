"""
Custom exceptions for AllSongs.
"""

from typing import Optional


class AllSongsError(Exception):
    """Base exception for AllSongs."""
    pass


class ConfigurationError(AllSongsError):
    """Exception raised when configuration is invalid."""
    pass


class APIError(AllSongsError):
    """Exception raised when API calls fail."""

    def __init__(self, message: str, status_code: Optional[int] = None, endpoint: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class AuthorizationRequiredError(APIError):
    """Exception raised when the client holds no valid access token."""
    pass


class NetworkError(AllSongsError, ConnectionError):
    """Exception raised when network operations fail."""
    pass


class StageError(AllSongsError):
    """
    Exception raised when a pipeline stage fails.

    Carries the stage name and the identifier (artist id or batch ids) that
    was being processed so the whole run can be retried.
    """

    def __init__(self, stage: str, identifier: str, message: str):
        super().__init__(f"{stage} failed for {identifier}: {message}")
        self.stage = stage
        self.identifier = identifier


class PlaylistPopulationError(AllSongsError):
    """Exception raised when a chunked playlist insertion fails part way."""

    def __init__(self, playlist_id: str, chunk_index: int, inserted: int, message: str):
        super().__init__(
            f"Adding chunk {chunk_index} to playlist {playlist_id} failed "
            f"after {inserted} tracks were inserted: {message}"
        )
        self.playlist_id = playlist_id
        self.chunk_index = chunk_index
        self.inserted = inserted
