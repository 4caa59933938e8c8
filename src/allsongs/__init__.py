"""
AllSongs - build a playlist of every song an artist has released, once.
"""

from .core.config import PROJECT_VERSION as __version__
from .services.pipeline import CatalogPipeline, PipelineResult

__all__ = ['CatalogPipeline', 'PipelineResult', '__version__']
