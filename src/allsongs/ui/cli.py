"""
AllSongs CLI Module
Command-line interface for building "All <artist> songs" playlists.
"""

import argparse
import os
from typing import List, Optional

from ..clients.spotify import SpotifyClient
from ..core.config import PROJECT_NAME, PROJECT_VERSION, SPOTIFY_CONFIG, ERROR_MESSAGES, SUCCESS_MESSAGES
from ..core.exceptions import AllSongsError, AuthorizationRequiredError, PlaylistPopulationError
from ..core.logger import get_logger
from ..services.pipeline import CatalogPipeline
from ..utils.throttle import ThrottlePolicy
from .display import DisplayManager

logger = get_logger("ui.cli")


class AllSongsCLI:
    """Main CLI class for AllSongs."""
    
    def __init__(self, display_manager: Optional[DisplayManager] = None):
        self.display_manager = display_manager or DisplayManager()
    
    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} v{PROJECT_VERSION} - every song by an artist, once",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s login
  %(prog)s token AQD...code
  %(prog)s build 06HL4z0CvFAxyc27GXpf02 --dry-run
  %(prog)s build 06HL4z0CvFAxyc27GXpf02 --delay 0.5 --no-follow
            """
        )
        
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        
        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )
        
        subparsers.add_parser(
            'login',
            help='Print the Spotify authorization URL'
        )
        
        token_parser = subparsers.add_parser(
            'token',
            help='Exchange an authorization code for an access token'
        )
        token_parser.add_argument('code', help='Code from the authorization redirect')
        
        build_parser = subparsers.add_parser(
            'build',
            help='Collect every song by an artist and create a playlist'
        )
        build_parser.add_argument('artist_id', help='Spotify artist id')
        build_parser.add_argument(
            '--token',
            default=os.getenv("SPOTIFY_ACCESS_TOKEN"),
            help='Spotify access token (default: $SPOTIFY_ACCESS_TOKEN)'
        )
        build_parser.add_argument(
            '--delay',
            type=float,
            default=SPOTIFY_CONFIG["REQUEST_DELAY"],
            help='Seconds to wait after each request (default: %(default)s)'
        )
        build_parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List the tracks without creating a playlist'
        )
        build_parser.add_argument(
            '--no-follow',
            action='store_true',
            help='Do not follow the artist'
        )
        
        return parser
    
    def run(self, argv: Optional[List[str]] = None) -> int:
        """Parse arguments and dispatch; returns the process exit status."""
        args = self.create_parser().parse_args(argv)
        try:
            if args.mode == 'login':
                return self.handle_login()
            if args.mode == 'token':
                return self.handle_token(args.code)
            return self.handle_build(args)
        except AuthorizationRequiredError as e:
            logger.debug(f"Authorization failed: {e}")
            self.display_manager.print_error(ERROR_MESSAGES["NOT_AUTHORIZED"])
            return 1
        except PlaylistPopulationError as e:
            self.display_manager.print_error(f"{ERROR_MESSAGES['PLAYLIST_FAILED']} {e}")
            return 1
        except AllSongsError as e:
            self.display_manager.print_error(str(e))
            return 1
    
    def handle_login(self) -> int:
        client = SpotifyClient()
        self.display_manager.print_info("Open this URL and authorize the application:")
        self.display_manager.console.print(client.get_authorize_url(), soft_wrap=True)
        return 0
    
    def handle_token(self, code: str) -> int:
        client = SpotifyClient()
        token_data = client.exchange_code(code)
        self.display_manager.print_success("Authorized. Export the access token:")
        self.display_manager.console.print(
            f"export SPOTIFY_ACCESS_TOKEN={token_data.get('access_token')}", soft_wrap=True
        )
        return 0
    
    def handle_build(self, args: argparse.Namespace) -> int:
        console = self.display_manager.console
        pipeline = CatalogPipeline(SpotifyClient(access_token=args.token), ThrottlePolicy(args.delay))
        
        console.print()
        console.print(self.display_manager.create_header_panel(
            f"🎵 {PROJECT_NAME}",
            f"Collecting every song for artist {args.artist_id}"
        ))
        console.print()
        
        if args.dry_run:
            result = self.display_manager.show_loading_spinner(
                "Fetching catalog from Spotify...", pipeline.run, args.artist_id
            )
        else:
            result = self.display_manager.show_loading_spinner(
                "Fetching catalog and building playlist...",
                pipeline.build_playlist, args.artist_id, follow=not args.no_follow
            )
        
        if not result.tracks:
            message_key = "NO_TRACKS" if result.releases else "NO_RELEASES"
            self.display_manager.print_error(ERROR_MESSAGES[message_key])
            return 1
        
        self.display_manager.display_tracks(result.tracks)
        self.display_manager.display_summary(result)
        if result.playlist:
            self.display_manager.print_success(SUCCESS_MESSAGES["PLAYLIST_CREATED"])
        return 0
