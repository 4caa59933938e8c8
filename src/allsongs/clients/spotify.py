"""
Spotify Client Module
A thin client for the Spotify Web API endpoints the playlist builder needs.
"""

import base64
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from ..core.config import SPOTIFY_CONFIG
from ..core.exceptions import APIError, AuthorizationRequiredError, NetworkError
from ..core.logger import get_logger

logger = get_logger("clients.spotify")


class SpotifyClient:
    """Spotify Web API client holding a user access token."""
    
    def __init__(
        self,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None
    ):
        self.base_url = SPOTIFY_CONFIG["BASE_URL"]
        self.auth_url = SPOTIFY_CONFIG["AUTH_URL"]
        self.token_url = SPOTIFY_CONFIG["TOKEN_URL"]
        self.client_id = client_id or SPOTIFY_CONFIG["CLIENT_ID"]
        self.client_secret = client_secret or SPOTIFY_CONFIG["CLIENT_SECRET"]
        self.redirect_uri = redirect_uri or SPOTIFY_CONFIG["REDIRECT_URI"]
        self.timeout = timeout or SPOTIFY_CONFIG["TIMEOUT"]
        self.access_token = access_token
        self.refresh_token = refresh_token
        
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
    
    def is_authorized(self) -> bool:
        """Whether an access token is available."""
        return bool(self.access_token)
    
    def get_authorize_url(self, state: Optional[str] = None, show_dialog: bool = True) -> str:
        """Build the authorization-code URL the user must visit."""
        params = {
            "client_id": self.client_id,
            "response_type": "code",
            "redirect_uri": self.redirect_uri,
            "scope": " ".join(SPOTIFY_CONFIG["SCOPES"]),
            "show_dialog": "true" if show_dialog else "false",
        }
        if state:
            params["state"] = state
        return f"{self.auth_url}?{urlencode(params)}"
    
    def exchange_code(self, code: str) -> Dict[str, Any]:
        """Exchange an authorization code for access and refresh tokens."""
        token_data = self._token_request({
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
        })
        self.access_token = token_data.get("access_token")
        self.refresh_token = token_data.get("refresh_token", self.refresh_token)
        return token_data
    
    def refresh_access_token(self) -> Dict[str, Any]:
        """Obtain a new access token from the stored refresh token."""
        if not self.refresh_token:
            raise AuthorizationRequiredError("No refresh token available", endpoint=self.token_url)
        token_data = self._token_request({
            "grant_type": "refresh_token",
            "refresh_token": self.refresh_token,
        })
        self.access_token = token_data.get("access_token")
        self.refresh_token = token_data.get("refresh_token", self.refresh_token)
        return token_data
    
    def _token_request(self, data: Dict[str, str]) -> Dict[str, Any]:
        if not self.client_id or not self.client_secret:
            raise AuthorizationRequiredError(
                "Set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET environment variables.",
                endpoint=self.token_url
            )
        
        credentials = f"{self.client_id}:{self.client_secret}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()
        headers = {
            "Authorization": f"Basic {encoded_credentials}",
            "Content-Type": "application/x-www-form-urlencoded"
        }
        
        try:
            response = self.session.post(self.token_url, headers=headers, data=data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Token request failed: {e}") from e
        
        if response.status_code != 200:
            raise AuthorizationRequiredError(
                f"Token request rejected ({response.status_code}): {response.text}",
                status_code=response.status_code,
                endpoint=self.token_url
            )
        return response.json()
    
    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None
    ) -> Dict[str, Any]:
        """
        Send an authorized request and return the decoded body.
        
        Raises:
            AuthorizationRequiredError: no token, or the token was rejected (401)
            APIError: any other non-2xx response
            NetworkError: the request never completed
        """
        if not self.access_token:
            raise AuthorizationRequiredError("Spotify API authorization required", endpoint=path)
        
        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"Bearer {self.access_token}"}
        logger.debug(f"{method} {path} {params or ''}")
        
        try:
            response = self.session.request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e
        
        if response.status_code == 401:
            raise AuthorizationRequiredError(
                "Spotify access token is invalid or expired", status_code=401, endpoint=path
            )
        if not 200 <= response.status_code < 300:
            raise APIError(
                f"{method} {path} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
                endpoint=path
            )
        
        if not response.content:
            return {}
        return response.json()
    
    def get_artist_albums(
        self,
        artist_id: str,
        include_groups: str,
        limit: int,
        offset: int = 0
    ) -> Dict[str, Any]:
        """Get one page of an artist's releases for the given release groups."""
        return self._request("GET", f"/artists/{artist_id}/albums", params={
            "include_groups": include_groups,
            "limit": limit,
            "offset": offset,
        })
    
    def get_albums(self, album_ids: List[str]) -> List[Dict[str, Any]]:
        """Get full album objects, including their track listings (max 20 ids)."""
        data = self._request("GET", "/albums", params={"ids": ",".join(album_ids)})
        return data.get("albums", [])
    
    def get_album_tracks(self, album_id: str, limit: int = 50, offset: int = 0) -> Dict[str, Any]:
        """Get one page of an album's track listing."""
        return self._request("GET", f"/albums/{album_id}/tracks", params={
            "limit": limit,
            "offset": offset,
        })

    def get_tracks(self, track_ids: List[str]) -> List[Optional[Dict[str, Any]]]:
        """Get full track objects (max 50 ids). Unavailable tracks come back as None."""
        data = self._request("GET", "/tracks", params={"ids": ",".join(track_ids)})
        return data.get("tracks", [])
    
    def create_playlist(self, name: str, description: str = "", public: bool = True) -> Dict[str, Any]:
        """Create a playlist owned by the current user."""
        return self._request("POST", "/me/playlists", json={
            "name": name,
            "description": description,
            "public": public,
        })
    
    def add_tracks_to_playlist(self, playlist_id: str, uris: List[str]) -> Dict[str, Any]:
        """Append tracks to a playlist (max 100 uris)."""
        return self._request("POST", f"/playlists/{playlist_id}/tracks", json={"uris": uris})
    
    def follow_artists(self, artist_ids: List[str]) -> None:
        """Follow artists as the current user."""
        self._request("PUT", "/me/following", params={"type": "artist"}, json={"ids": artist_ids})
