"""Factory classes for query builder and adapter instantiation.

This module centralizes the wiring of the query builder to its
collaborators, keeping the CLI layer free from direct adapter imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from searchscope.core.query.query_builder import QueryBuilder


class ConfigFactory:
    """Factory for creating configuration-related instances."""

    def create_config_provider(self):
        """Create a TomlConfigProvider instance.

        Returns:
            TomlConfigProvider instance.
        """
        from searchscope.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class QueryBuilderFactory:
    """Factory for creating a QueryBuilder over local adapters.

    Args:
        folders: Workspace root folders, in order.
    """

    def __init__(self, folders: list[Path]) -> None:
        self._folders = folders

    def create_query_builder(self) -> QueryBuilder:
        """Create a QueryBuilder using TOML config, a static workspace and
        the local environment.

        Returns:
            QueryBuilder instance.
        """
        from searchscope.adapters.env.local import LocalEnvironment
        from searchscope.adapters.workspace.static_workspace import StaticWorkspaceProvider
        from searchscope.core.query.query_builder import QueryBuilder

        return QueryBuilder(
            config_provider=ConfigFactory().create_config_provider(),
            workspace_provider=StaticWorkspaceProvider.from_paths(self._folders),
            environment=LocalEnvironment(),
        )
