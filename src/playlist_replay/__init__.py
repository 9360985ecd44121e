"""playlist-replay: replay addSong()/undo() actions into a playlist."""

__version__ = "0.1.0"
