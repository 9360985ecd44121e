"""
Cross-cutting utilities for playlist-replay.

Contains:
- parsers: Input line parsing
- formatters: Playlist output formatting
"""

from .formatters import *
from .parsers import *

__all__ = [
    # From formatters
    'format_playlist',
    # From parsers
    'extract_quoted',
    'parse_action_list',
]
