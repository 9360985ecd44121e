"""Allow running as `python -m playlist_replay`."""

from playlist_replay.cli import entry_point

entry_point()
