"""
User interface modules for AllSongs.
"""

from .cli import AllSongsCLI
from .display import DisplayManager

__all__ = ['AllSongsCLI', 'DisplayManager']
