"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging (Loguru)
- Console management (Rich)
- Exceptions for the input/output layer
"""

# Configuration
from .config import (
    Config,
    LoggingConfig,
    TraceConfig,
    load_config,
    save_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    create_default_config,
)

# Logging
from .output import setup_loguru, log

# Console
from .console import get_console

# Exceptions
from .exceptions import PlaylistReplayError, InputFormatError

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "TraceConfig",
    "load_config",
    "save_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "create_default_config",
    # Logging
    "setup_loguru",
    "log",
    # Console
    "get_console",
    # Exceptions
    "PlaylistReplayError",
    "InputFormatError",
]
