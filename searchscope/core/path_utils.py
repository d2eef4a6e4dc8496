"""Path normalization utilities for folder and file arguments."""

import os
from pathlib import Path


def normalize_location(path: Path) -> Path:
    """Make a path absolute and collapse "." and ".." segments.

    Symlinks are not resolved, so the result is the same lexical form that
    search path anchors resolve to.

    Args:
        path: Absolute or cwd-relative path.

    Returns:
        Normalized absolute path.
    """
    return Path(os.path.normpath(path.absolute()))
