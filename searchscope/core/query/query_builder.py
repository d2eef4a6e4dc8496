"""Query builder turning search UI input into backend queries.

Splits the include/exclude boxes into search path anchors and glob
expressions, resolves anchors against the workspace, and assembles
per-folder queries with each folder's configured excludes and ignore
settings.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from searchscope.core.patterns.globs import (
    expand_global_glob,
    normalize_glob_segment,
    partition_segments,
)
from searchscope.core.patterns.search_paths import expand_search_path_patterns
from searchscope.core.patterns.splitter import split_glob_pattern, untildify
from searchscope.core.query.content import resolve_case_sensitive, resolve_multiline
from searchscope.core.query.matching import path_included_in_query
from searchscope.domain.config import SearchScopeConfig
from searchscope.domain.entities import (
    ContentPattern,
    FileQuery,
    FolderQuery,
    ParsedSearchPaths,
    PreviewOptions,
    SearchPathPattern,
    SearchQuery,
    TextQuery,
)
from searchscope.domain.exceptions import NamedRootNotFoundError
from searchscope.domain.expressions import PatternExpression
from searchscope.domain.workspace import Workspace
from searchscope.ports.config import ConfigProvider
from searchscope.ports.environment import Environment
from searchscope.ports.workspace import WorkspaceProvider

logger = logging.getLogger(__name__)


@dataclass
class CommonQueryOptions:
    """Options shared by text and file queries.

    Attributes:
        include_pattern: Raw "files to include" string.
        exclude_pattern: Raw "files to exclude" string.
        extra_file_resources: Files outside the workspace folders to search.
        max_results: Result cap.
        disregard_ignore_files: Override the folder's use_ignore_files.
        disregard_global_ignore_files: Override use_global_ignore_files.
        disregard_exclude_settings: Skip the folder's configured excludes.
        ignore_symlinks: Override the folder's follow_symlinks.
    """

    include_pattern: str | None = None
    exclude_pattern: str | None = None
    extra_file_resources: list[Path] | None = None
    max_results: int | None = None
    disregard_ignore_files: bool | None = None
    disregard_global_ignore_files: bool | None = None
    disregard_exclude_settings: bool = False
    ignore_symlinks: bool | None = None


@dataclass
class TextQueryOptions(CommonQueryOptions):
    """Options for text queries."""

    preview_options: PreviewOptions | None = None
    file_encoding: str | None = None
    max_file_size: int | None = None


@dataclass
class FileQueryOptions(CommonQueryOptions):
    """Options for file name queries."""

    file_pattern: str | None = None
    exists: bool | None = None
    sort_by_score: bool | None = None
    cache_key: str | None = None


class QueryBuilder:
    """Builds text and file queries from raw search UI input.

    Each call reads a fresh workspace snapshot and fresh folder
    configuration; the builder itself holds no per-query state.
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        workspace_provider: WorkspaceProvider,
        environment: Environment,
    ) -> None:
        """Initialize query builder.

        Args:
            config_provider: Per-folder configuration lookup.
            workspace_provider: Source of workspace snapshots.
            environment: Source of the user's home directory.
        """
        self.config_provider = config_provider
        self.workspace_provider = workspace_provider
        self.environment = environment

    def text(
        self,
        content_pattern: ContentPattern,
        folder_resources: list[Path] | None = None,
        options: TextQueryOptions | None = None,
    ) -> TextQuery:
        """Build a query for file contents.

        Args:
            content_pattern: What to search for. Not modified.
            folder_resources: Folders to search unless anchors override them.
            options: Include/exclude strings and overrides.

        Returns:
            TextQuery with smart case and multiline resolved.

        Raises:
            NamedRootNotFoundError: If an anchor names a missing root folder.
        """
        options = options or TextQueryOptions()
        content_pattern = replace(
            content_pattern,
            is_case_sensitive=resolve_case_sensitive(
                content_pattern.pattern,
                content_pattern.is_case_sensitive,
                content_pattern.is_smart_case,
                content_pattern.is_reg_exp,
            ),
            is_multiline=resolve_multiline(
                content_pattern.pattern,
                content_pattern.is_multiline,
                content_pattern.is_reg_exp,
            ),
            word_separators=self.config_provider.load().editor.word_separators,
        )

        common = self._common_query(folder_resources, options)
        return TextQuery(
            **vars(common),
            content_pattern=content_pattern,
            preview_options=options.preview_options,
            file_encoding=options.file_encoding,
            max_file_size=options.max_file_size,
        )

    def file(
        self,
        folder_resources: list[Path] | None = None,
        options: FileQueryOptions | None = None,
    ) -> FileQuery:
        """Build a query for file names.

        Args:
            folder_resources: Folders to search unless anchors override them.
            options: Include/exclude strings, file pattern and overrides.

        Returns:
            FileQuery with a trimmed file pattern.

        Raises:
            NamedRootNotFoundError: If an anchor names a missing root folder.
        """
        options = options or FileQueryOptions()
        common = self._common_query(folder_resources, options)
        return FileQuery(
            **vars(common),
            file_pattern=options.file_pattern.strip() if options.file_pattern else options.file_pattern,
            exists=options.exists,
            sort_by_score=options.sort_by_score,
            cache_key=options.cache_key,
        )

    def parse_search_paths(
        self,
        pattern: str | None,
        workspace: Workspace | None = None,
    ) -> ParsedSearchPaths:
        """Split an include string into search path anchors and glob patterns.

        Glob segments are expanded from "foo" to "**/foo/**" and "**/foo".

        Args:
            pattern: Raw include string.
            workspace: Snapshot to resolve against; read fresh when None.

        Returns:
            ParsedSearchPaths; each field is None when empty.

        Raises:
            NamedRootNotFoundError: If an anchor names a missing root folder.
        """
        if workspace is None:
            workspace = self.workspace_provider.snapshot()

        user_home = self.environment.user_home
        segments = [untildify(segment, user_home) for segment in split_glob_pattern(pattern)]
        search_path_segments, expr_segments = partition_segments(segments)

        expanded: list[str] = []
        for segment in expr_segments:
            expanded.extend(expand_global_glob(normalize_glob_segment(segment)))

        resolution = expand_search_path_patterns(search_path_segments, workspace)
        if resolution.failure is not None:
            raise NamedRootNotFoundError(resolution.failure.root_name)

        return ParsedSearchPaths(
            search_paths=resolution.patterns or None,
            pattern=PatternExpression.from_patterns(expanded),
        )

    def parse_exclude_pattern(
        self,
        pattern: str | None,
        workspace: Workspace | None = None,
    ) -> PatternExpression | None:
        """Parse an exclude string into a single expression.

        Glob segments are expanded as for includes; each anchor becomes a
        literal absolute pattern (its location joined with its glob tail).

        Args:
            pattern: Raw exclude string.
            workspace: Snapshot to resolve against; read fresh when None.

        Returns:
            Combined exclude expression, or None when nothing was excluded.

        Raises:
            NamedRootNotFoundError: If an anchor names a missing root folder.
        """
        parsed = self.parse_search_paths(pattern, workspace)
        anchor_patterns = [
            str(search_path.search_path / search_path.pattern)
            if search_path.pattern
            else str(search_path.search_path)
            for search_path in parsed.search_paths or []
        ]
        return PatternExpression.merge(
            parsed.pattern,
            PatternExpression.from_patterns(anchor_patterns),
        )

    def folder_query_for_root(self, folder: Path, options: CommonQueryOptions) -> FolderQuery:
        """Build the query for an explicitly requested folder.

        Each ignore/symlink flag comes from options when set, otherwise
        from the folder's configuration.
        """
        folder_config = self.config_provider.load(folder)
        return FolderQuery(
            folder=folder,
            exclude_pattern=self._excludes_for_folder(folder_config, options),
            file_encoding=folder_config.files.encoding,
            disregard_ignore_files=_override(
                options.disregard_ignore_files, not folder_config.search.use_ignore_files
            ),
            disregard_global_ignore_files=_override(
                options.disregard_global_ignore_files,
                not folder_config.search.use_global_ignore_files,
            ),
            ignore_symlinks=_override(
                options.ignore_symlinks, not folder_config.search.follow_symlinks
            ),
        )

    def folder_query_for_search_path(self, search_path: SearchPathPattern) -> FolderQuery:
        """Build the query for a folder selected by a search path anchor."""
        folder_config = self.config_provider.load(search_path.search_path)
        include_pattern = (
            PatternExpression.from_patterns([search_path.pattern]) if search_path.pattern else None
        )
        return FolderQuery(
            folder=search_path.search_path,
            include_pattern=include_pattern,
            file_encoding=folder_config.files.encoding,
        )

    def _common_query(
        self,
        folder_resources: list[Path] | None,
        options: CommonQueryOptions,
    ) -> SearchQuery:
        workspace = self.workspace_provider.snapshot()
        parsed = self.parse_search_paths(options.include_pattern, workspace)
        exclude_pattern = self.parse_exclude_pattern(options.exclude_pattern, workspace)

        folder_queries = [self.folder_query_for_root(folder, options) for folder in folder_resources or []]
        using_search_paths = bool(parsed.search_paths)
        if parsed.search_paths:
            root_excludes = merge_excludes_from_folder_queries(folder_queries)
            folder_queries = [self.folder_query_for_search_path(sp) for sp in parsed.search_paths]
            exclude_pattern = PatternExpression.merge(exclude_pattern, root_excludes)
            logger.debug(
                "Search paths replace %d folder(s) with %d anchor(s)",
                len(folder_resources or []),
                len(folder_queries),
            )

        use_ripgrep = not folder_resources or all(
            self.config_provider.load(folder).search.use_ripgrep for folder in folder_resources
        )

        query = SearchQuery(
            folder_queries=folder_queries,
            using_search_paths=using_search_paths,
            include_pattern=parsed.pattern,
            exclude_pattern=exclude_pattern,
            max_results=options.max_results,
            use_ripgrep=use_ripgrep,
        )

        # Extra files don't belong to a folder, so only the global patterns apply
        if options.extra_file_resources:
            extra_files = [
                extra for extra in options.extra_file_resources if path_included_in_query(query, extra)
            ]
            query = replace(query, extra_file_resources=extra_files or None)

        return query

    def _excludes_for_folder(
        self,
        folder_config: SearchScopeConfig,
        options: CommonQueryOptions,
    ) -> PatternExpression | None:
        if options.disregard_exclude_settings:
            return None
        return folder_config.excludes()


def merge_excludes_from_folder_queries(
    folder_queries: list[FolderQuery],
) -> PatternExpression | None:
    """Merge every folder's exclude pattern, rebased onto the folder.

    Args:
        folder_queries: Folder queries about to be replaced.

    Returns:
        Absolute exclude patterns of all folders, or None if there are none.
    """
    merged: PatternExpression | None = None
    for folder_query in folder_queries:
        if folder_query.exclude_pattern:
            merged = PatternExpression.merge(
                merged,
                absolute_expression(folder_query.exclude_pattern, folder_query.folder),
            )
    return merged


def absolute_expression(expression: PatternExpression, root: Path) -> PatternExpression | None:
    """Rebase relative patterns onto root; absolute patterns are dropped."""
    return PatternExpression.from_patterns(
        str(root / pattern) for pattern in expression if not Path(pattern).is_absolute()
    )


def _override(option: bool | None, default: bool) -> bool:
    return option if option is not None else default
