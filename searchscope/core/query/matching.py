"""Matching of individual paths against an assembled query.

Used to decide whether files outside every searched folder still pass
the query's include/exclude patterns.
"""

from pathlib import Path

from wcmatch import glob

from searchscope.domain.entities import SearchQuery
from searchscope.domain.expressions import PatternExpression

GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.DOTGLOB


def expression_matches(expression: PatternExpression, path: str | Path) -> bool:
    """Check if any pattern of the expression matches a path.

    Args:
        expression: Patterns to try.
        path: Absolute or relative path, matched as-is.

    Returns:
        True if at least one pattern matches.
    """
    return glob.globmatch(Path(path).as_posix(), list(expression.patterns), flags=GLOB_FLAGS)


def path_included_in_query(query: SearchQuery, path: Path) -> bool:
    """Check if a file would be searched by a query.

    A file passes when the exclude pattern does not match it, the include
    pattern (if any) does, and, when search paths are in use, it lies in
    one of the searched folders and matches that folder's include pattern
    relative to the folder.

    Args:
        query: Assembled query.
        path: Absolute file path.

    Returns:
        True if the file passes the query's filters.
    """
    if query.exclude_pattern and expression_matches(query.exclude_pattern, path):
        return False

    if query.include_pattern and not expression_matches(query.include_pattern, path):
        return False

    if query.using_search_paths:
        return any(
            _included_in_folder(folder_query.folder, folder_query.include_pattern, path)
            for folder_query in query.folder_queries
        )

    return True


def _included_in_folder(
    folder: Path,
    include_pattern: PatternExpression | None,
    path: Path,
) -> bool:
    if not path.is_relative_to(folder):
        return False
    if include_pattern is None:
        return True
    return expression_matches(include_pattern, path.relative_to(folder))
