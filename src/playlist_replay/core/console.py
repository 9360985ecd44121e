"""Shared Rich Console.

Bound to stderr: stdout only ever holds the formatted playlist line.
"""

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich Console instance.

    Returns:
        Console: The global Rich Console instance (writes to stderr)
    """
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console
