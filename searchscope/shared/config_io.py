"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of SearchScopeConfig to/from TOML format.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

from searchscope.domain.config import SearchScopeConfig

CONFIG_DIR_NAME = ".searchscope"
CONFIG_FILE_NAME = "config.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/searchscope/config.toml or ~/.config/searchscope/config.toml
    - Windows: %APPDATA%/searchscope/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "searchscope" / CONFIG_FILE_NAME
        return Path.home() / ".config" / "searchscope" / CONFIG_FILE_NAME
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "searchscope" / CONFIG_FILE_NAME
        return Path.home() / ".config" / "searchscope" / CONFIG_FILE_NAME


def get_folder_config_path(folder: Path) -> Path:
    """Get the path of the config file scoped to a folder (may not exist)."""
    return folder / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def config_to_data(config: SearchScopeConfig) -> dict[str, Any]:
    """Convert a SearchScopeConfig to a TOML-ready dictionary."""
    return {
        "search": {
            "use_ripgrep": config.search.use_ripgrep,
            "use_ignore_files": config.search.use_ignore_files,
            "use_global_ignore_files": config.search.use_global_ignore_files,
            "follow_symlinks": config.search.follow_symlinks,
            "exclude": dict(config.search.exclude),
        },
        "files": {
            "encoding": config.files.encoding,
            "exclude": dict(config.files.exclude),
        },
        "editor": {
            "word_separators": config.editor.word_separators,
        },
    }


def save_config(config: SearchScopeConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: SearchScopeConfig to save
        path: Destination path for config.toml
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(config_to_data(config), f)
