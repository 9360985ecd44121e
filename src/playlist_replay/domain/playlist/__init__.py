"""Playlist domain - command interpreter with per-instance undo.

This domain handles:
- Recognizing addSong('<name>') / undo() actions
- Applying them to a playlist plus an undo history
- Step-by-step replay for tracing
"""

from .interpreter import (
    ADD_SONG_PREFIX,
    ADD_SONG_SUFFIX,
    UNDO_ACTION,
    apply_command,
    parse_action,
    process,
    replay,
)
from .models import (
    EFFECT_ADDED,
    EFFECT_IGNORED,
    EFFECT_MISSING,
    EFFECT_NOTHING_TO_UNDO,
    EFFECT_REMOVED,
    AddSong,
    Command,
    PlaylistState,
    Step,
    Undo,
    Unrecognized,
)

__all__ = [
    # Interpreter
    "ADD_SONG_PREFIX",
    "ADD_SONG_SUFFIX",
    "UNDO_ACTION",
    "apply_command",
    "parse_action",
    "process",
    "replay",
    # Models
    "AddSong",
    "Undo",
    "Unrecognized",
    "Command",
    "PlaylistState",
    "Step",
    "EFFECT_ADDED",
    "EFFECT_REMOVED",
    "EFFECT_NOTHING_TO_UNDO",
    "EFFECT_MISSING",
    "EFFECT_IGNORED",
]
