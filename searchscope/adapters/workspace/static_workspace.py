"""Static workspace adapter.

Implements the WorkspaceProvider port over a fixed list of folders, as
given on the command line or by an embedding application.
"""

from pathlib import Path

from searchscope.core.path_utils import normalize_location
from searchscope.domain.workspace import Workspace, WorkspaceFolder, workspace_from_folders


class StaticWorkspaceProvider:
    """Workspace provider backed by a fixed, ordered list of root folders.

    Args:
        folders: Root folders in display order.
    """

    def __init__(self, folders: list[WorkspaceFolder]) -> None:
        self._folders = list(folders)

    @classmethod
    def from_paths(cls, paths: list[Path]) -> "StaticWorkspaceProvider":
        """Create a provider from folder paths, naming each after its basename.

        Args:
            paths: Folder paths; relative paths are made absolute and
                ".." segments are collapsed.

        Returns:
            StaticWorkspaceProvider over the given folders.
        """
        return cls([WorkspaceFolder.from_path(normalize_location(path)) for path in paths])

    def snapshot(self) -> Workspace:
        """Return the workspace state for the configured folders."""
        return workspace_from_folders(self._folders)
