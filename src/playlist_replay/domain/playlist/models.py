"""
Playlist domain models.

Contains the command types understood by the interpreter, the interpreter
state, and the per-command trace record.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class AddSong:
    """Append a song to the playlist and remember it for undo."""

    name: str  # Literal text between the quotes, may be empty


@dataclass(frozen=True)
class Undo:
    """Revert the most recent AddSong that has not been undone yet."""


@dataclass(frozen=True)
class Unrecognized:
    """Any action text the interpreter does not understand (processed as a no-op)."""

    text: str


Command = Union[AddSong, Undo, Unrecognized]


# Effects reported by apply_command()
EFFECT_ADDED = "added"
EFFECT_REMOVED = "removed"
EFFECT_NOTHING_TO_UNDO = "nothing_to_undo"
EFFECT_MISSING = "missing"  # Undo named a song no longer in the playlist
EFFECT_IGNORED = "ignored"


@dataclass
class PlaylistState:
    """Mutable interpreter state for a single run.

    Attributes:
        songs: Current playlist, in insertion order (duplicates allowed)
        history: Names of added songs, most recent last
    """

    songs: list[str] = field(default_factory=list)
    history: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Step:
    """Snapshot of one processed command, produced by replay()."""

    index: int  # 1-based position in the input
    action: str  # Raw action text (or repr of a pre-parsed command)
    command: Command
    effect: str
    playlist_after: tuple[str, ...]
    history_depth: int
