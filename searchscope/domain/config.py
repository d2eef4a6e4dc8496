"""Config domain models for searchscope.

Configuration is stored per folder in .searchscope/config.toml (with a
global fallback) and describes how a folder should be searched: ignore
file handling, symlinks, exclude globs and file encoding.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from searchscope.domain.expressions import PatternExpression

DEFAULT_WORD_SEPARATORS = "`~!@#$%^&*()-=+[{]}\\|;:'\",.<>/?"


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for search behavior in a folder.

    Attributes:
        use_ripgrep: Whether the backend may use ripgrep for this folder.
        use_ignore_files: Respect .gitignore and similar files.
        use_global_ignore_files: Respect the global gitignore.
        follow_symlinks: Follow symlinks while walking the folder.
        exclude: Glob patterns excluded from search, mapped to enabled flags.
    """

    use_ripgrep: bool = True
    use_ignore_files: bool = True
    use_global_ignore_files: bool = False
    follow_symlinks: bool = True
    exclude: dict[str, bool] = field(
        default_factory=lambda: {
            "**/node_modules": True,
            "**/bower_components": True,
        }
    )


@dataclass(frozen=True)
class FilesConfig:
    """Configuration for files in a folder.

    Attributes:
        encoding: Default file encoding.
        exclude: Glob patterns hidden everywhere, mapped to enabled flags.

    Raises:
        ValueError: If encoding is empty.
    """

    encoding: str = "utf8"
    exclude: dict[str, bool] = field(
        default_factory=lambda: {
            "**/.git": True,
            "**/.svn": True,
            "**/.hg": True,
            "**/CVS": True,
            "**/.DS_Store": True,
        }
    )

    def __post_init__(self) -> None:
        """Validate files config after initialization."""
        if not self.encoding:
            raise ValueError("encoding cannot be empty")


@dataclass(frozen=True)
class EditorConfig:
    """Configuration borrowed from the editor.

    Attributes:
        word_separators: Characters that delimit words for whole-word search.
    """

    word_separators: str = DEFAULT_WORD_SEPARATORS


@dataclass(frozen=True)
class SearchScopeConfig:
    """Complete searchscope configuration for one folder.

    Attributes:
        search: Search configuration
        files: Files configuration
        editor: Editor configuration
    """

    search: SearchConfig = field(default_factory=SearchConfig)
    files: FilesConfig = field(default_factory=FilesConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)

    @staticmethod
    def default() -> "SearchScopeConfig":
        """Create a config with all default values."""
        return SearchScopeConfig(
            search=SearchConfig(),
            files=FilesConfig(),
            editor=EditorConfig(),
        )

    @staticmethod
    def from_partial(base: "SearchScopeConfig", data: dict[str, Any]) -> "SearchScopeConfig":
        """Overlay raw config data onto a base config.

        Each section present in `data` overrides only the keys it sets;
        validation runs again on every rebuilt section.

        Args:
            base: Config to start from.
            data: Raw config data keyed by section name.

        Returns:
            New SearchScopeConfig with overrides applied.

        Raises:
            ValueError: If a section is not a table, a key is unknown, or a
                value fails validation.
        """
        sections: dict[str, Any] = {}
        for section_field in fields(SearchScopeConfig):
            section_data = data.get(section_field.name)
            if section_data is None:
                continue
            if not isinstance(section_data, dict):
                raise ValueError(f"[{section_field.name}] must be a table")
            current = getattr(base, section_field.name)
            known = {f.name for f in fields(current)}
            unknown = set(section_data) - known
            if unknown:
                raise ValueError(
                    f"Unknown key(s) in [{section_field.name}]: {', '.join(sorted(unknown))}"
                )
            sections[section_field.name] = replace(current, **section_data)
        return replace(base, **sections)

    def excludes(self) -> PatternExpression | None:
        """Combined exclude expression: files.exclude overlaid by search.exclude.

        A search.exclude entry set to false disables the same files.exclude
        entry.
        """
        merged = {**self.files.exclude, **self.search.exclude}
        return PatternExpression.from_mapping(merged)
