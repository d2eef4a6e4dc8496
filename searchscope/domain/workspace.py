"""Workspace snapshot models.

A workspace is one of three states: nothing open, a single root folder,
or several named root folders. Relative search paths resolve differently
in each state, so the state is modeled as an explicit tagged union.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorkspaceFolder:
    """A root folder of the workspace.

    Attributes:
        name: Display name used by ./name anchors in multi-folder workspaces.
        path: Absolute location of the folder.

    Raises:
        ValueError: If name is empty or path is not absolute.
    """

    name: str
    path: Path

    def __post_init__(self) -> None:
        """Validate folder data after initialization."""
        if not self.name:
            raise ValueError("WorkspaceFolder name cannot be empty")
        if not self.path.is_absolute():
            raise ValueError(f"WorkspaceFolder path must be absolute, got {self.path}")

    @classmethod
    def from_path(cls, path: Path, name: str | None = None) -> "WorkspaceFolder":
        """Create a folder named after its basename unless a name is given."""
        return cls(name=name or path.name or str(path), path=path)


@dataclass(frozen=True)
class NoWorkspace:
    """No folder is open; search path anchors are meaningless."""

    @property
    def folders(self) -> tuple[WorkspaceFolder, ...]:
        return ()


@dataclass(frozen=True)
class SingleFolder:
    """Exactly one root folder is open."""

    folder: WorkspaceFolder

    @property
    def folders(self) -> tuple[WorkspaceFolder, ...]:
        return (self.folder,)


@dataclass(frozen=True)
class MultiFolder:
    """Several root folders are open, addressed by name.

    Raises:
        ValueError: If fewer than two folders are given.
    """

    folders: tuple[WorkspaceFolder, ...]

    def __post_init__(self) -> None:
        """Validate folder count after initialization."""
        if len(self.folders) < 2:
            raise ValueError(
                f"MultiFolder requires at least 2 folders, got {len(self.folders)}"
            )

    def folders_named(self, name: str) -> list[WorkspaceFolder]:
        """Return every folder whose name is exactly `name`, in order."""
        return [folder for folder in self.folders if folder.name == name]


Workspace = NoWorkspace | SingleFolder | MultiFolder


def workspace_from_folders(folders: list[WorkspaceFolder]) -> Workspace:
    """Pick the workspace state matching the number of folders.

    Args:
        folders: Ordered root folders.

    Returns:
        NoWorkspace, SingleFolder or MultiFolder.
    """
    if not folders:
        return NoWorkspace()
    if len(folders) == 1:
        return SingleFolder(folders[0])
    return MultiFolder(tuple(folders))
