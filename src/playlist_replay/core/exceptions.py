"""Exceptions raised by the input/output layer."""

from typing import Optional


class PlaylistReplayError(Exception):
    """Base exception for playlist-replay operations."""

    pass


class InputFormatError(PlaylistReplayError):
    """Raised when the input line is not a bracketed action list."""

    def __init__(self, line: str, message: Optional[str] = None):
        self.line = line
        super().__init__(message or f"Expected a bracketed action list, got: {line!r}")
