"""
Input line parsing.

Turns the bracketed, comma-separated list of double-quoted actions into the
plain action strings the interpreter consumes.
"""

from typing import List

from playlist_replay.core.exceptions import InputFormatError


def extract_quoted(piece: str) -> str:
    """
    Return the text between the first and last double quote of piece.

    A piece without a pair of quotes is returned unchanged.

    Example:
        ' "addSong(\\'A\\')"' -> "addSong('A')"
    """
    first = piece.find('"')
    last = piece.rfind('"')
    if first == -1 or first == last:
        return piece
    return piece[first + 1:last]


def parse_action_list(line: str) -> List[str]:
    """
    Parse one input line into action strings.

    Args:
        line: e.g. '["addSong(\\'A\\')", "undo()"]' (trailing newline allowed)

    Returns:
        Action strings in input order; empty list for "[]"

    Raises:
        InputFormatError: If the line is not wrapped in square brackets
    """
    text = line.strip()
    if len(text) < 2 or not (text.startswith("[") and text.endswith("]")):
        raise InputFormatError(line)

    body = text[1:-1]
    if not body.strip():
        return []

    return [extract_quoted(piece) for piece in body.split(",")]


__all__ = ['extract_quoted', 'parse_action_list']
