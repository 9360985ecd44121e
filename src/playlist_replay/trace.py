"""
Step-by-step trace rendering with Rich.

Shows what every action did to the playlist. Rendered on the stderr console.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from playlist_replay.core.console import get_console
from playlist_replay.domain.playlist import (
    EFFECT_ADDED,
    EFFECT_IGNORED,
    EFFECT_MISSING,
    EFFECT_NOTHING_TO_UNDO,
    EFFECT_REMOVED,
    Step,
)
from playlist_replay.utils.formatters import format_playlist

EFFECT_STYLES = {
    EFFECT_ADDED: "green",
    EFFECT_REMOVED: "yellow",
    EFFECT_NOTHING_TO_UNDO: "dim",
    EFFECT_MISSING: "red",
    EFFECT_IGNORED: "dim italic",
}


def build_trace_table(steps: Sequence[Step], show_history: bool = True) -> Table:
    """
    Build a table with one row per processed action.

    Args:
        steps: Steps from replay()
        show_history: Include the undo history depth column

    Returns:
        Rich Table ready to print
    """
    table = Table(show_header=True, header_style="bold cyan", expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Action")
    table.add_column("Effect")
    table.add_column("Playlist")
    if show_history:
        table.add_column("History", justify="right")

    for step in steps:
        row = [
            str(step.index),
            Text(step.action),
            Text(step.effect, style=EFFECT_STYLES.get(step.effect, "white")),
            Text(format_playlist(step.playlist_after)),
        ]
        if show_history:
            row.append(str(step.history_depth))
        table.add_row(*row)

    return table


def render_trace(
    steps: Sequence[Step],
    show_history: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the trace table inside a panel."""
    console = console or get_console()
    if not steps:
        console.print(Text("No actions to replay", style="dim"))
        return

    console.print(
        Panel(
            build_trace_table(steps, show_history=show_history),
            title=f"Replay ({len(steps)} actions)",
            border_style="cyan",
        )
    )
