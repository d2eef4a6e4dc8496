"""Domain entities for search query construction.

Core domain models describing a search query as handed to a search
backend. These are pure Python dataclasses with no dependencies on
infrastructure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from searchscope.domain.expressions import PatternExpression


class QueryType(str, Enum):
    """Kind of search a query describes."""

    FILE = "file"
    TEXT = "text"


@dataclass(frozen=True)
class SearchPathPattern:
    """A resolved search path anchor.

    Attributes:
        search_path: Absolute location to search under.
        pattern: Glob applied under search_path, or None for everything.
    """

    search_path: Path
    pattern: str | None = None


@dataclass(frozen=True)
class ParsedSearchPaths:
    """Result of parsing one include/exclude string.

    Attributes:
        search_paths: Resolved anchors, or None if the input had none.
        pattern: Expression built from the glob segments, or None.
    """

    search_paths: list[SearchPathPattern] | None = None
    pattern: PatternExpression | None = None


@dataclass(frozen=True)
class FolderQuery:
    """What to search in one root folder.

    Attributes:
        folder: Absolute folder location.
        include_pattern: Globs a file must match, relative to the folder.
        exclude_pattern: Globs excluded within the folder.
        file_encoding: Encoding to read files with.
        disregard_ignore_files: Ignore .gitignore and similar files.
        disregard_global_ignore_files: Ignore the global gitignore.
        ignore_symlinks: Do not follow symlinks.
    """

    folder: Path
    include_pattern: PatternExpression | None = None
    exclude_pattern: PatternExpression | None = None
    file_encoding: str | None = None
    disregard_ignore_files: bool | None = None
    disregard_global_ignore_files: bool | None = None
    ignore_symlinks: bool | None = None


@dataclass
class ContentPattern:
    """Text to search for and how to interpret it.

    Attributes:
        pattern: The search text or regular expression source.
        is_reg_exp: Interpret pattern as a regular expression.
        is_case_sensitive: Match case exactly.
        is_smart_case: Turn on case sensitivity when pattern has uppercase.
        is_word_match: Match whole words only.
        is_multiline: Pattern may match across lines.
        word_separators: Characters that delimit words.

    Raises:
        ValueError: If pattern is empty.
    """

    pattern: str
    is_reg_exp: bool = False
    is_case_sensitive: bool = False
    is_smart_case: bool = False
    is_word_match: bool = False
    is_multiline: bool = False
    word_separators: str | None = None

    def __post_init__(self) -> None:
        """Validate content pattern after initialization."""
        if not self.pattern:
            raise ValueError("Content pattern cannot be empty")


@dataclass(frozen=True)
class PreviewOptions:
    """How much surrounding text a text search result should carry.

    Raises:
        ValueError: If a limit is not positive.
    """

    match_lines: int = 1
    chars_per_line: int = 1000

    def __post_init__(self) -> None:
        """Validate preview options after initialization."""
        if self.match_lines <= 0:
            raise ValueError(f"match_lines must be positive, got {self.match_lines}")
        if self.chars_per_line <= 0:
            raise ValueError(f"chars_per_line must be positive, got {self.chars_per_line}")


@dataclass(frozen=True, kw_only=True)
class SearchQuery:
    """Properties shared by every query.

    Attributes:
        folder_queries: Folders to search, in order.
        using_search_paths: Folders came from search path anchors, so the
            backend should not apply its default excludes.
        include_pattern: Globs a file must match.
        exclude_pattern: Globs excluded from every folder.
        extra_file_resources: Files outside any folder to search, or None.
        max_results: Result cap, or None for no cap.
        use_ripgrep: Every folder allows the ripgrep backend.
    """

    folder_queries: list[FolderQuery] = field(default_factory=list)
    using_search_paths: bool = False
    include_pattern: PatternExpression | None = None
    exclude_pattern: PatternExpression | None = None
    extra_file_resources: list[Path] | None = None
    max_results: int | None = None
    use_ripgrep: bool = True


@dataclass(frozen=True, kw_only=True)
class TextQuery(SearchQuery):
    """Query for file contents."""

    type: QueryType = QueryType.TEXT
    content_pattern: ContentPattern
    preview_options: PreviewOptions | None = None
    file_encoding: str | None = None
    max_file_size: int | None = None


@dataclass(frozen=True, kw_only=True)
class FileQuery(SearchQuery):
    """Query for file names."""

    type: QueryType = QueryType.FILE
    file_pattern: str | None = None
    exists: bool | None = None
    sort_by_score: bool | None = None
    cache_key: str | None = None
