"""Output formatting for playlists."""

from typing import Iterable


def format_playlist(songs: Iterable[str]) -> str:
    """
    Render songs as a bracketed list of double-quoted names.

    Names are written verbatim (no escaping).

    Example:
        ['A', 'C'] -> '["A", "C"]'
        [] -> '[]'
    """
    return "[" + ", ".join(f'"{song}"' for song in songs) + "]"


__all__ = ['format_playlist']
