"""JSON serialization for assembled queries.

Produces the wire form handed to a search backend: pattern expressions
become {pattern: true} objects, paths become strings and absent values
are omitted.
"""

import json
from pathlib import Path
from typing import Any

from searchscope.domain.entities import (
    ContentPattern,
    FileQuery,
    FolderQuery,
    ParsedSearchPaths,
    PreviewOptions,
    SearchQuery,
    TextQuery,
)
from searchscope.domain.expressions import PatternExpression


class JsonQueryFormatter:
    """Handles JSON serialization of queries and parse results."""

    @staticmethod
    def serialize_query(query: SearchQuery) -> dict[str, Any]:
        """Serialize a text or file query.

        Args:
            query: Assembled query.

        Returns:
            Dictionary suitable for JSON serialization, camelCase keys.
        """
        data: dict[str, Any] = {
            "folderQueries": [
                JsonQueryFormatter.serialize_folder_query(fq) for fq in query.folder_queries
            ],
            "usingSearchPaths": query.using_search_paths,
            "includePattern": _expression(query.include_pattern),
            "excludePattern": _expression(query.exclude_pattern),
            "extraFileResources": _paths(query.extra_file_resources),
            "maxResults": query.max_results,
            "useRipgrep": query.use_ripgrep,
        }
        if isinstance(query, TextQuery):
            data.update(
                {
                    "type": query.type.value,
                    "contentPattern": _content_pattern(query.content_pattern),
                    "previewOptions": _preview_options(query.preview_options),
                    "fileEncoding": query.file_encoding,
                    "maxFileSize": query.max_file_size,
                }
            )
        elif isinstance(query, FileQuery):
            data.update(
                {
                    "type": query.type.value,
                    "filePattern": query.file_pattern,
                    "exists": query.exists,
                    "sortByScore": query.sort_by_score,
                    "cacheKey": query.cache_key,
                }
            )
        return _drop_none(data)

    @staticmethod
    def serialize_folder_query(folder_query: FolderQuery) -> dict[str, Any]:
        """Serialize one folder query."""
        return _drop_none(
            {
                "folder": str(folder_query.folder),
                "includePattern": _expression(folder_query.include_pattern),
                "excludePattern": _expression(folder_query.exclude_pattern),
                "fileEncoding": folder_query.file_encoding,
                "disregardIgnoreFiles": folder_query.disregard_ignore_files,
                "disregardGlobalIgnoreFiles": folder_query.disregard_global_ignore_files,
                "ignoreSymlinks": folder_query.ignore_symlinks,
            }
        )

    @staticmethod
    def serialize_search_paths(parsed: ParsedSearchPaths) -> dict[str, Any]:
        """Serialize the result of parsing an include string."""
        search_paths = None
        if parsed.search_paths:
            search_paths = [
                _drop_none({"searchPath": str(sp.search_path), "pattern": sp.pattern})
                for sp in parsed.search_paths
            ]
        return _drop_none({"searchPaths": search_paths, "pattern": _expression(parsed.pattern)})

    @staticmethod
    def format(data: dict[str, Any] | None) -> str:
        """Format serialized data as indented JSON."""
        return json.dumps(data, indent=2)


def _expression(expression: PatternExpression | None) -> dict[str, bool] | None:
    return expression.to_dict() if expression is not None else None


def _paths(paths: list[Path] | None) -> list[str] | None:
    return [str(p) for p in paths] if paths is not None else None


def _content_pattern(pattern: ContentPattern) -> dict[str, Any]:
    return _drop_none(
        {
            "pattern": pattern.pattern,
            "isRegExp": pattern.is_reg_exp,
            "isCaseSensitive": pattern.is_case_sensitive,
            "isWordMatch": pattern.is_word_match,
            "isMultiline": pattern.is_multiline,
            "wordSeparators": pattern.word_separators,
        }
    )


def _preview_options(options: PreviewOptions | None) -> dict[str, int] | None:
    if options is None:
        return None
    return {"matchLines": options.match_lines, "charsPerLine": options.chars_per_line}


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}
