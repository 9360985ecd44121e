"""
playlist-replay CLI - Entry point

Reads one bracketed action line, replays it, and prints the resulting
playlist in the same bracketed format.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from loguru import logger

from playlist_replay.core import config
from playlist_replay.core.exceptions import PlaylistReplayError
from playlist_replay.core.output import log, setup_loguru
from playlist_replay.domain import playlist
from playlist_replay.trace import render_trace
from playlist_replay.utils.formatters import format_playlist
from playlist_replay.utils.parsers import parse_action_list


def read_input_line(line: Optional[str], input_path: Optional[str], stdin: TextIO) -> str:
    """
    Pick the input line from the first available source.

    Priority: explicit line argument, then first line of input_path, then stdin.

    Args:
        line: Action list given on the command line
        input_path: File whose first line holds the action list
        stdin: Stream to read from when neither is given

    Returns:
        Raw input line (may include a trailing newline)
    """
    if line is not None:
        return line
    if input_path is not None:
        with open(input_path, encoding="utf-8") as f:
            return f.readline()
    return stdin.readline()


def run(
    raw_line: str,
    trace: bool = False,
    show_history: bool = True,
) -> str:
    """
    Parse, replay, and format one input line.

    Args:
        raw_line: Bracketed action list
        trace: Render a step table on stderr
        show_history: Include history depth in the step table

    Returns:
        Formatted playlist line

    Raises:
        InputFormatError: If raw_line is not a bracketed list
    """
    actions = parse_action_list(raw_line)
    logger.info(f"Parsed {len(actions)} actions")

    if trace:
        steps = playlist.replay(actions)
        render_trace(steps, show_history=show_history)
        songs = list(steps[-1].playlist_after) if steps else []
    else:
        songs = playlist.process(actions)

    logger.info(f"Final playlist has {len(songs)} songs")
    return format_playlist(songs)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="playlist-replay",
        description="Replay addSong()/undo() actions and print the resulting playlist",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Example:\n"
            "  echo '[\"addSong(\\'A\\')\", \"undo()\"]' | playlist-replay\n"
        ),
    )
    parser.add_argument(
        'line',
        nargs='?',
        help='Action list, e.g. ["addSong(\'A\')", "undo()"] (default: read from stdin)'
    )
    parser.add_argument(
        '--input', '-i',
        dest='input_path',
        metavar='FILE',
        help='Read the action list from the first line of FILE'
    )
    parser.add_argument(
        '--trace',
        action='store_true',
        help='Show a step-by-step table on stderr'
    )
    parser.add_argument(
        '--config',
        dest='config_path',
        metavar='PATH',
        help='Use this config.toml instead of the default location'
    )
    parser.add_argument(
        '--log-level',
        help='Override the configured log level (DEBUG, INFO, WARNING, ERROR)'
    )
    parser.add_argument(
        '--init-config',
        action='store_true',
        help='Write a default config.toml and exit'
    )
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Main entry point for the playlist-replay command.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config_path = Path(args.config_path).expanduser() if args.config_path else None

    if args.init_config:
        path, created = config.save_default_config(config_path)
        if created:
            log(f"Created default configuration at: {path}")
        else:
            log(f"Configuration already exists at: {path}")
        return 0

    current_config = config.load_config(config_path)
    level = (args.log_level or current_config.logging.level).upper()
    if level not in config.VALID_LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level}")

    setup_loguru(
        config.get_log_file_path(current_config),
        level=level,
        rotation=current_config.logging.rotation,
        retention=current_config.logging.retention,
        console_output=current_config.logging.console_output,
    )

    try:
        raw_line = read_input_line(args.line, args.input_path, stdin or sys.stdin)
        output = run(
            raw_line,
            trace=args.trace or current_config.trace.enabled,
            show_history=current_config.trace.show_history,
        )
    except PlaylistReplayError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        print(f"Error: cannot read input: {e}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Unexpected error")
        raise

    print(output, end="")
    return 0


def entry_point() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
