"""
Configuration management for playlist-replay
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/playlist-replay/playlist-replay.log)
    )
    rotation: str = "10 MB"  # Loguru rotation condition
    retention: int = 5  # Number of rotated files to keep
    console_output: bool = False  # Also log to stderr

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level}. "
                f"Valid levels are: {sorted(VALID_LOG_LEVELS)}"
            )
        if isinstance(self.retention, bool) or not isinstance(self.retention, int):
            raise ValueError(f"retention must be an integer, got {self.retention!r}")
        if self.retention < 0:
            raise ValueError(f"retention must be >= 0, got {self.retention}")
        if not isinstance(self.rotation, str):
            raise ValueError(f"rotation must be a string, got {self.rotation!r}")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a string, got {self.log_file!r}")
        if not isinstance(self.console_output, bool):
            raise ValueError(f"console_output must be true or false, got {self.console_output!r}")


@dataclass
class TraceConfig:
    """Configuration for the step-by-step trace table."""

    enabled: bool = False
    show_history: bool = True

    def validate(self) -> None:
        """Validate trace configuration values.

        Raises:
            ValueError: If a flag is not a boolean
        """
        for name in ("enabled", "show_history"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")


@dataclass
class Config:
    """Main configuration object."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    trace: TraceConfig = field(default_factory=TraceConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "playlist-replay"
    return Path.home() / ".config" / "playlist-replay"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "playlist-replay"
    return Path.home() / ".local" / "share" / "playlist-replay"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/playlist-replay (or ~/.config/playlist-replay)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honoring a custom [logging] log_file."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "playlist-replay.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# playlist-replay configuration

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "WARNING"

# Custom log file path (default: ~/.local/share/playlist-replay/playlist-replay.log)
# log_file = "/tmp/playlist-replay.log"

# Rotate the log file when it reaches this size
rotation = "10 MB"

# Number of rotated log files to keep
retention = 5

# Also write log messages to stderr
console_output = false

[trace]
# Print a step-by-step table of every action to stderr
enabled = false

# Include the undo history depth column in the trace table
show_history = true
"""


def _apply_env_overrides(config: Config) -> None:
    level = os.environ.get("PLAYLIST_REPLAY_LOG_LEVEL")
    if level:
        if level.upper() in VALID_LOG_LEVELS:
            config.logging.level = level.upper()
        else:
            logger.warning(f"Ignoring invalid PLAYLIST_REPLAY_LOG_LEVEL: {level}")
    log_file = os.environ.get("PLAYLIST_REPLAY_LOG_FILE")
    if log_file:
        config.logging.log_file = log_file


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - PLAYLIST_REPLAY_LOG_LEVEL
    - PLAYLIST_REPLAY_LOG_FILE

    Args:
        config_path: Explicit config file (default: get_config_path())

    Returns:
        Loaded configuration (defaults for anything missing or invalid)
    """
    # Load .env file from config directory if it exists
    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()
    config = Config()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            logger.warning(f"Could not read config {config_path}: {e}. Using defaults.")
            toml_data = {}

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            config.logging = LoggingConfig(
                level=str(logging_data.get("level", config.logging.level)).upper(),
                log_file=logging_data.get("log_file"),
                rotation=logging_data.get("rotation", config.logging.rotation),
                retention=logging_data.get("retention", config.logging.retention),
                console_output=logging_data.get(
                    "console_output", config.logging.console_output
                ),
            )
            try:
                config.logging.validate()
            except ValueError as e:
                logger.warning(f"Invalid logging configuration: {e}. Using defaults.")
                config.logging = LoggingConfig()

        if "trace" in toml_data:
            trace_data = toml_data["trace"]
            config.trace = TraceConfig(
                enabled=trace_data.get("enabled", config.trace.enabled),
                show_history=trace_data.get("show_history", config.trace.show_history),
            )
            try:
                config.trace.validate()
            except ValueError as e:
                logger.warning(f"Invalid trace configuration: {e}. Using defaults.")
                config.trace = TraceConfig()

    _apply_env_overrides(config)
    return config


def save_default_config(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """Write the default config file if it does not exist yet.

    Returns:
        (path, created) - created is False when the file was already there
    """
    config_path = config_path or get_config_dir() / "config.toml"
    if config_path.exists():
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(create_default_config())
    return config_path, True
