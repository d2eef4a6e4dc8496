"""Resolution of search path anchors against the workspace.

Turns anchors like "./src", "/abs/dir" or "./app/lib/**/*.ts" into
absolute root locations, each paired with the glob that applies under it.
Resolution is a pure function of the anchors and a workspace snapshot.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from searchscope.core.patterns.globs import split_glob_from_path
from searchscope.domain.entities import SearchPathPattern
from searchscope.domain.workspace import MultiFolder, NoWorkspace, SingleFolder, Workspace

logger = logging.getLogger(__name__)

_NAMED_ROOT = re.compile(r"^\.[/\\]([^/\\]+)([/\\].+)?")
_WORKSPACE_ROOT = frozenset({"./", ".\\"})


@dataclass(frozen=True)
class NamedRootNotFound:
    """A ./name anchor referenced a folder that is not open.

    Attributes:
        root_name: The folder name from the anchor.
        search_path: The anchor as typed.
    """

    root_name: str
    search_path: str


@dataclass(frozen=True)
class SearchPathResolution:
    """Outcome of resolving a list of anchors.

    Either every anchor resolved (failure is None) or resolution stopped at
    the first anchor naming a missing root folder.

    Attributes:
        patterns: Deduplicated resolved anchors, in input order.
        failure: The named-root failure, if any.
    """

    patterns: list[SearchPathPattern] = field(default_factory=list)
    failure: NamedRootNotFound | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def expand_search_path_patterns(
    search_paths: list[str],
    workspace: Workspace,
) -> SearchPathResolution:
    """Resolve anchors into absolute locations with optional glob tails.

    Args:
        search_paths: Anchor segments (absolute, ./ or ../ prefixed).
        workspace: Snapshot of the open root folders.

    Returns:
        SearchPathResolution. Locations reached by more than one anchor are
        kept once, with the tail of the first anchor that reached them.
    """
    if isinstance(workspace, NoWorkspace) or not search_paths:
        if search_paths:
            logger.debug("No workspace open, ignoring search paths: %s", search_paths)
        return SearchPathResolution()

    resolved: list[SearchPathPattern] = []
    for search_path in search_paths:
        path_portion, glob_portion = split_glob_from_path(search_path)
        roots = expand_absolute_search_paths(path_portion, workspace)
        if isinstance(roots, NamedRootNotFound):
            return SearchPathResolution(failure=roots)
        resolved.extend(SearchPathPattern(search_path=root, pattern=glob_portion) for root in roots)

    return SearchPathResolution(patterns=_unique_by_location(resolved))


def expand_absolute_search_paths(
    search_path: str,
    workspace: Workspace,
) -> list[Path] | NamedRootNotFound:
    """Expand the path portion of one anchor into absolute locations.

    Args:
        search_path: Path portion of an anchor, without its glob tail.
        workspace: Snapshot of the open root folders.

    Returns:
        Zero or more absolute locations, or NamedRootNotFound when a ./name
        anchor in a multi-folder workspace names no open folder.
    """
    if os.path.isabs(search_path):
        return [Path(os.path.normpath(search_path))]

    if isinstance(workspace, SingleFolder):
        if search_path in _WORKSPACE_ROOT:
            # The single root is searched anyway
            return []
        return [_join(workspace.folder.path, search_path)]

    if isinstance(workspace, MultiFolder):
        if search_path in _WORKSPACE_ROOT:
            return []
        match = _NAMED_ROOT.match(search_path)
        if not match:
            logger.debug("Ignoring malformed search path %r", search_path)
            return []
        root_name, remainder = match.group(1), match.group(2)
        matching_roots = workspace.folders_named(root_name)
        if not matching_roots:
            return NamedRootNotFound(root_name=root_name, search_path=search_path)
        return [
            _join(root.path, remainder) if remainder else root.path
            for root in matching_roots
        ]

    return []


def _join(root: Path, relative: str) -> Path:
    relative = relative.replace("\\", "/").lstrip("/")
    return Path(os.path.normpath(os.path.join(root, relative)))


def _unique_by_location(patterns: list[SearchPathPattern]) -> list[SearchPathPattern]:
    seen: set[str] = set()
    unique: list[SearchPathPattern] = []
    for pattern in patterns:
        key = str(pattern.search_path)
        if key in seen:
            logger.debug("Dropping duplicate search path %s", key)
            continue
        seen.add(key)
        unique.append(pattern)
    return unique
