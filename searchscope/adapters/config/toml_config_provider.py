"""TOML-based configuration provider.

Loads configuration for a folder from <folder>/.searchscope/config.toml
with global config fallback.

Config loading priority (highest to lowest):
1. Folder: <folder>/.searchscope/config.toml
2. Global: ~/.config/searchscope/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from searchscope.domain.config import SearchScopeConfig
from searchscope.shared.config_io import (
    get_folder_config_path,
    get_global_config_path,
    load_config_data,
)

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Implements config cascade:
    1. Load global config if present
    2. Load folder config if a folder is given and it has one
    3. Folder values override global values (key-level merge per section)
    4. Missing values fall back to built-in defaults

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, folder: Path | None = None) -> SearchScopeConfig:
        """Load configuration with global fallback.

        Args:
            folder: Folder whose .searchscope/config.toml applies, or None
                for global configuration only.

        Returns:
            SearchScopeConfig instance with merged values or defaults
        """
        config = SearchScopeConfig.default()

        global_path = get_global_config_path()
        if global_path.exists():
            try:
                global_data = load_config_data(global_path)
                config = SearchScopeConfig.from_partial(config, global_data)
                logger.debug("Loaded global config from %s", global_path)
            except (FileNotFoundError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to parse global config at %s: %s. Ignoring global config.",
                    global_path,
                    e,
                )

        if folder is None:
            return config

        local_path = get_folder_config_path(folder)
        if local_path.exists():
            try:
                local_data = load_config_data(local_path)
                config = SearchScopeConfig.from_partial(config, local_data)
                logger.debug("Loaded folder config from %s", local_path)
            except (FileNotFoundError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to parse %s: %s. Using global/default configuration.",
                    local_path,
                    e,
                )

        return config
