"""Environment port.

Defines the interface for user environment values needed while parsing.
"""

from typing import Protocol


class Environment(Protocol):
    """Protocol for environment lookups."""

    @property
    def user_home(self) -> str:
        """Home directory used to expand a leading ~ in search paths."""
        ...
