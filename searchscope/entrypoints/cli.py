"""searchscope CLI entrypoint.

Command-line interface for building search queries from include/exclude
pattern strings.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from searchscope.core.query.query_builder import QueryBuilder

from searchscope.core.errors import SearchScopeCliError, config_exists_error
from searchscope.core.path_utils import normalize_location
from searchscope.core.presentation.json_formatter import JsonQueryFormatter
from searchscope.domain.entities import ContentPattern
from searchscope.domain.exceptions import SearchScopeDomainError
from searchscope.version import __version__


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    Domain errors are converted to SearchScopeCliError with their hint;
    SearchScopeCliError is re-raised to use its built-in formatting.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SearchScopeCliError:
                raise
            except SearchScopeDomainError as e:
                raise SearchScopeCliError(e.message, hint=e.hint) from e
            except ValueError as e:
                ctx = click.get_current_context()
                if (ctx.obj or {}).get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise SearchScopeCliError(
                    f"Invalid input for {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _normalized(paths: tuple[Path, ...]) -> list[Path]:
    return [normalize_location(path) for path in paths]


def _create_query_builder(folders: list[Path]) -> QueryBuilder:
    """Create a query builder for the given workspace folders."""
    from searchscope.adapters.factory import QueryBuilderFactory

    return QueryBuilderFactory(folders).create_query_builder()


def common_query_options(func):
    """Attach the options shared by the text and files commands."""
    options = [
        click.option(
            "--folder",
            "-f",
            "folders",
            multiple=True,
            type=click.Path(file_okay=False, path_type=Path),
            help="Workspace root folder (repeatable).",
        ),
        click.option("--include", "-i", default=None, help="Files to include, comma-separated."),
        click.option("--exclude", "-e", default=None, help="Files to exclude, comma-separated."),
        click.option(
            "--extra-file",
            "extra_files",
            multiple=True,
            type=click.Path(dir_okay=False, path_type=Path),
            help="File outside the workspace folders to search (repeatable).",
        ),
        click.option("--max-results", type=int, default=None, help="Maximum number of results."),
        click.option(
            "--no-ignore-files",
            is_flag=True,
            help="Disregard .gitignore and similar files.",
        ),
        click.option(
            "--no-exclude-settings",
            is_flag=True,
            help="Disregard exclude patterns from folder configuration.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="searchscope")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """searchscope - Build search queries from include/exclude patterns.

    Patterns starting with ./ or ../, or absolute paths, select folders to
    search; everything else is a glob matched at any depth.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("pattern", type=str)
@common_query_options
@click.option("--regex", "-r", "is_reg_exp", is_flag=True, help="Treat PATTERN as a regex.")
@click.option("--case-sensitive", "-c", is_flag=True, help="Match case exactly.")
@click.option("--smart-case", "-S", is_flag=True, help="Case sensitive if PATTERN has uppercase.")
@click.option("--word", "-w", is_flag=True, help="Match whole words only.")
@click.option("--multiline", is_flag=True, help="Allow matches across lines.")
@click.option("--encoding", default=None, help="File encoding to search with.")
@click.pass_context
@handle_cli_errors("text")
def text(
    ctx: click.Context,
    pattern: str,
    folders: tuple[Path, ...],
    include: str | None,
    exclude: str | None,
    extra_files: tuple[Path, ...],
    max_results: int | None,
    no_ignore_files: bool,
    no_exclude_settings: bool,
    is_reg_exp: bool,
    case_sensitive: bool,
    smart_case: bool,
    word: bool,
    multiline: bool,
    encoding: str | None,
) -> None:
    """Print the text query for PATTERN as JSON."""
    from searchscope.core.query.query_builder import TextQueryOptions

    folder_paths = _normalized(folders)
    builder = _create_query_builder(folder_paths)
    query = builder.text(
        ContentPattern(
            pattern=pattern,
            is_reg_exp=is_reg_exp,
            is_case_sensitive=case_sensitive,
            is_smart_case=smart_case,
            is_word_match=word,
            is_multiline=multiline,
        ),
        folder_paths,
        TextQueryOptions(
            include_pattern=include,
            exclude_pattern=exclude,
            extra_file_resources=_normalized(extra_files) or None,
            max_results=max_results,
            disregard_ignore_files=True if no_ignore_files else None,
            disregard_exclude_settings=no_exclude_settings,
            file_encoding=encoding,
        ),
    )
    click.echo(JsonQueryFormatter.format(JsonQueryFormatter.serialize_query(query)))


@cli.command()
@click.argument("file_pattern", type=str, required=False, default=None)
@common_query_options
@click.option("--sort-by-score", is_flag=True, help="Rank results by fuzzy score.")
@click.pass_context
@handle_cli_errors("files")
def files(
    ctx: click.Context,
    file_pattern: str | None,
    folders: tuple[Path, ...],
    include: str | None,
    exclude: str | None,
    extra_files: tuple[Path, ...],
    max_results: int | None,
    no_ignore_files: bool,
    no_exclude_settings: bool,
    sort_by_score: bool,
) -> None:
    """Print the file name query for FILE_PATTERN as JSON."""
    from searchscope.core.query.query_builder import FileQueryOptions

    folder_paths = _normalized(folders)
    builder = _create_query_builder(folder_paths)
    query = builder.file(
        folder_paths,
        FileQueryOptions(
            include_pattern=include,
            exclude_pattern=exclude,
            extra_file_resources=_normalized(extra_files) or None,
            max_results=max_results,
            disregard_ignore_files=True if no_ignore_files else None,
            disregard_exclude_settings=no_exclude_settings,
            file_pattern=file_pattern,
            sort_by_score=sort_by_score or None,
        ),
    )
    click.echo(JsonQueryFormatter.format(JsonQueryFormatter.serialize_query(query)))


@cli.command()
@click.argument("pattern", type=str)
@click.option(
    "--folder",
    "-f",
    "folders",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Workspace root folder (repeatable).",
)
@click.option("--exclude", "as_exclude", is_flag=True, help="Parse PATTERN as an exclude string.")
@click.pass_context
@handle_cli_errors("parse")
def parse(
    ctx: click.Context,
    pattern: str,
    folders: tuple[Path, ...],
    as_exclude: bool,
) -> None:
    """Show how PATTERN splits into search paths and globs."""
    builder = _create_query_builder(_normalized(folders))
    if as_exclude:
        expression = builder.parse_exclude_pattern(pattern)
        click.echo(JsonQueryFormatter.format(expression.to_dict() if expression else None))
        return

    parsed = builder.parse_search_paths(pattern)
    click.echo(JsonQueryFormatter.format(JsonQueryFormatter.serialize_search_paths(parsed)))


@cli.command()
@click.argument(
    "folder",
    type=click.Path(file_okay=False, path_type=Path),
    required=False,
    default=Path("."),
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
@handle_cli_errors("init")
def init(ctx: click.Context, folder: Path, force: bool) -> None:
    """Write a default .searchscope/config.toml in FOLDER."""
    from searchscope.domain.config import SearchScopeConfig
    from searchscope.shared.config_io import get_folder_config_path, save_config

    config_path = get_folder_config_path(normalize_location(folder))
    if config_path.exists() and not force:
        config_exists_error(str(config_path))

    save_config(SearchScopeConfig.default(), config_path)
    click.echo(f"Created {config_path}")


if __name__ == "__main__":
    cli()
