"""Classification and normalization of pattern segments.

A segment is either a search path anchor (an absolute path, or a path
starting with ./ or ../) or a glob expression matched anywhere in a
folder tree.
"""

import os
import re

_RELATIVE_ANCHOR = re.compile(r"^\.\.?[/\\]")
_GLOB_CHAR = re.compile(r"[*{}()\[\]?]")
_LAST_SEPARATOR = re.compile(r"[/\\][^/\\]*$")
_NESTED_GLOBSTAR = re.compile(r"\*\*/\*\*")


def is_search_path(segment: str) -> bool:
    """Check if a segment is a search path anchor rather than a glob.

    Args:
        segment: Trimmed, tilde-expanded segment.

    Returns:
        True for absolute paths and ./, ../, .\\, ..\\ prefixed paths.
    """
    return os.path.isabs(segment) or bool(_RELATIVE_ANCHOR.match(segment))


def partition_segments(segments: list[str]) -> tuple[list[str], list[str]]:
    """Split segments into (search paths, glob expressions).

    Relative order is kept within each group.
    """
    search_paths: list[str] = []
    expressions: list[str] = []
    for segment in segments:
        if is_search_path(segment):
            search_paths.append(segment)
        else:
            expressions.append(segment)
    return search_paths, expressions


def normalize_glob_segment(segment: str) -> str:
    """Turn extension shorthand into a glob: ".js" becomes "*.js"."""
    if segment.startswith("."):
        return "*" + segment
    return segment


def expand_global_glob(pattern: str) -> list[str]:
    """Expand a glob so it matches at any depth, as a file or a folder.

    The two forms are returned separately instead of as {a,b} because
    ripgrep cannot handle nested brace groups.

    Args:
        pattern: Glob expression, e.g. "foo" or "src/**/test".

    Returns:
        ["**/<pattern>/**", "**/<pattern>"] with "**/**" collapsed to "**".
    """
    patterns = [f"**/{pattern}/**", f"**/{pattern}"]
    return [_collapse_globstars(p) for p in patterns]


def _collapse_globstars(pattern: str) -> str:
    # A single substitution pass can leave "**/**" behind for "**/**/**".
    while _NESTED_GLOBSTAR.search(pattern):
        pattern = _NESTED_GLOBSTAR.sub("**", pattern)
    return pattern


def split_glob_from_path(search_path: str) -> tuple[str, str | None]:
    """Split an anchor into the literal path and the glob applied under it.

    The split happens at the last separator before the first glob
    character: "./src/**/test" becomes ("./src", "**/test").

    Args:
        search_path: Anchor segment.

    Returns:
        (path_portion, glob_portion). glob_portion is None when the anchor
        has no glob character or no separator precedes it.
    """
    glob_char = _GLOB_CHAR.search(search_path)
    if glob_char:
        prefix = search_path[: glob_char.start()]
        last_separator = _LAST_SEPARATOR.search(prefix)
        if last_separator:
            path_portion = search_path[: last_separator.start()]
            if not re.search(r"[/\\]", path_portion):
                # The only separator was the one we split on: '', '.' or 'C:'
                path_portion += "/"
            return path_portion, search_path[last_separator.start() + 1 :]

    return search_path, None
