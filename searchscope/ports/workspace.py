"""Workspace port.

Defines the interface for reading the set of open root folders.
"""

from typing import Protocol

from searchscope.domain.workspace import Workspace


class WorkspaceProvider(Protocol):
    """Protocol for reading the current workspace."""

    def snapshot(self) -> Workspace:
        """Return the workspace state as of this call.

        Returns:
            NoWorkspace, SingleFolder or MultiFolder.
        """
        ...
