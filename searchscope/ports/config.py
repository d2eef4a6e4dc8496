"""Configuration provider port.

Defines the interface for looking up configuration scoped to a folder.
"""

from pathlib import Path
from typing import Protocol

from searchscope.domain.config import SearchScopeConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, folder: Path | None = None) -> SearchScopeConfig:
        """Load configuration that applies to a folder.

        Args:
            folder: Folder to scope the lookup to, or None for the global
                configuration.

        Returns:
            SearchScopeConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
