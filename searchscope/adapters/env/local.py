"""Local environment adapter.

Implements the Environment port using the current user's home directory.
"""

from pathlib import Path


class LocalEnvironment:
    """Environment of the running process."""

    @property
    def user_home(self) -> str:
        """Home directory of the current user."""
        return str(Path.home())
