"""
Playlist command interpreter.

Applies addSong('<name>') / undo() actions, in order, to an empty playlist.
Undo removes the last occurrence of the most recently added (and not yet
undone) name, so duplicate names are tracked per added instance rather than
by playlist position.
"""

from typing import Iterable, Union

from loguru import logger

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

ADD_SONG_PREFIX = "addSong('"
ADD_SONG_SUFFIX = "')"
UNDO_ACTION = "undo()"

Action = Union[str, AddSong, Undo, Unrecognized]


def parse_action(text: str) -> Command:
    """
    Recognize a single action string.

    Matching is exact and case sensitive; surrounding whitespace is not trimmed.

    Args:
        text: Action text, e.g. "addSong('Song')" or "undo()"

    Returns:
        AddSong, Undo, or Unrecognized for anything else
    """
    if text == UNDO_ACTION:
        return Undo()

    if (
        len(text) >= len(ADD_SONG_PREFIX) + len(ADD_SONG_SUFFIX)
        and text.startswith(ADD_SONG_PREFIX)
        and text.endswith(ADD_SONG_SUFFIX)
    ):
        return AddSong(text[len(ADD_SONG_PREFIX):-len(ADD_SONG_SUFFIX)])

    return Unrecognized(text)


def _to_command(action: Action) -> Command:
    if isinstance(action, str):
        return parse_action(action)
    return action


def _remove_last_occurrence(songs: list[str], name: str) -> bool:
    """Remove the last element equal to name. Returns False if there is none."""
    for i in range(len(songs) - 1, -1, -1):
        if songs[i] == name:
            del songs[i]
            return True
    return False


def apply_command(state: PlaylistState, command: Command) -> str:
    """
    Apply one command to the interpreter state in place.

    Args:
        state: Playlist and undo history for the current run
        command: Parsed command

    Returns:
        Effect name describing what happened (see models.EFFECT_*)
    """
    if isinstance(command, AddSong):
        state.songs.append(command.name)
        state.history.append(command.name)
        return EFFECT_ADDED

    if isinstance(command, Undo):
        if not state.history:
            logger.debug("undo() with empty history, nothing to undo")
            return EFFECT_NOTHING_TO_UNDO

        name = state.history.pop()
        if _remove_last_occurrence(state.songs, name):
            return EFFECT_REMOVED

        logger.warning(f"undo() could not find '{name}' in playlist, skipping")
        return EFFECT_MISSING

    logger.debug(f"Ignoring unrecognized action: {command.text!r}")
    return EFFECT_IGNORED


def process(actions: Iterable[Action]) -> list[str]:
    """
    Run a sequence of actions and return the resulting playlist.

    Each call starts from an empty playlist and history; nothing is kept
    between calls.

    Args:
        actions: Action strings and/or already-parsed commands, in order

    Returns:
        Song names in playlist order

    Example:
        >>> process(["addSong('A')", "addSong('B')", "undo()"])
        ['A']
    """
    state = PlaylistState()
    count = 0
    for action in actions:
        apply_command(state, _to_command(action))
        count += 1

    logger.debug(f"Processed {count} actions -> {len(state.songs)} songs")
    return state.songs


def replay(actions: Iterable[Action]) -> list[Step]:
    """
    Run a sequence of actions, recording a Step after each one.

    The final step's playlist_after matches process() for the same input.

    Args:
        actions: Action strings and/or already-parsed commands, in order

    Returns:
        One Step per action
    """
    state = PlaylistState()
    steps: list[Step] = []
    for index, action in enumerate(actions, start=1):
        command = _to_command(action)
        effect = apply_command(state, command)
        steps.append(
            Step(
                index=index,
                action=action if isinstance(action, str) else repr(action),
                command=command,
                effect=effect,
                playlist_after=tuple(state.songs),
                history_depth=len(state.history),
            )
        )
    return steps
