"""Domain exceptions for searchscope.

These exceptions represent definite user mistakes in search input. They
should be caught at the application boundary (CLI, API) and converted to
appropriate user-facing error messages.
"""


class SearchScopeDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class NamedRootNotFoundError(SearchScopeDomainError):
    """Raised when a ./name anchor names no open workspace folder.

    Attributes:
        root_name: The folder name the user referenced.
    """

    def __init__(self, root_name: str) -> None:
        super().__init__(
            f"No folder in workspace with name: {root_name}",
            hint="Use ./<folder name>/... with the name of an open root folder",
        )
        self.root_name = root_name
