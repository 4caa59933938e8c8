"""
Service layer for AllSongs.
"""

from .release_fetcher import ReleaseFetcher, sort_by_release_date
from .track_loader import TrackLoader, LoadState
from .duplicate_resolver import DuplicateResolver, resolve_duplicates
from .alternate_filter import AlternateVersionFilter, remove_alternate_versions
from .playlist_builder import PlaylistBuilder, PlaylistResult
from .pipeline import CatalogPipeline, PipelineResult

__all__ = [
    'ReleaseFetcher',
    'sort_by_release_date',
    'TrackLoader',
    'LoadState',
    'DuplicateResolver',
    'resolve_duplicates',
    'AlternateVersionFilter',
    'remove_alternate_versions',
    'PlaylistBuilder',
    'PlaylistResult',
    'CatalogPipeline',
    'PipelineResult',
]
