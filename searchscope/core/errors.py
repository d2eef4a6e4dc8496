"""CLI error handling with actionable hints.

Provides consistent error formatting for all searchscope CLI commands.
"""

from typing import NoReturn

import click


class SearchScopeCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise SearchScopeCliError(
            "No folder in workspace with name: app",
            hint="Use ./<folder name>/... with the name of an open root folder",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize the error with message and optional hint.

        Args:
            message: The primary error message.
            hint: Optional actionable suggestion for the user.
        """
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present.

        Returns:
            Formatted error message, with hint on a new line if provided.
        """
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def config_exists_error(path: str) -> NoReturn:
    """Raise error when init would overwrite an existing config.

    Args:
        path: The existing config file.

    Raises:
        SearchScopeCliError: Always raises with --force hint.
    """
    raise SearchScopeCliError(
        f"Config already exists at {path}",
        hint="Use --force to overwrite it",
    )
