"""Splitting of raw include/exclude strings into segments.

Users type several patterns into one box separated by commas. Commas
inside glob brace groups ({a,b}) and character classes ([,]) belong to
the glob and must not split it.
"""

import re

_TILDE_PREFIX = re.compile(r"^~(?=$|[/\\])")


def split_glob_aware(pattern: str | None, split_char: str = ",") -> list[str]:
    """Split a string on `split_char` outside brace groups and brackets.

    Args:
        pattern: Raw string, possibly None or empty.
        split_char: Single separator character.

    Returns:
        Raw pieces in order, untrimmed. Empty input yields [].
    """
    if not pattern:
        return []

    segments: list[str] = []
    brace_depth = 0
    in_brackets = False
    current: list[str] = []

    for char in pattern:
        if char == split_char and brace_depth == 0 and not in_brackets:
            segments.append("".join(current))
            current = []
            continue
        if char == "{":
            brace_depth += 1
        elif char == "}" and brace_depth > 0:
            brace_depth -= 1
        elif char == "[":
            in_brackets = True
        elif char == "]":
            in_brackets = False
        current.append(char)

    if current:
        segments.append("".join(current))
    return segments


def split_glob_pattern(pattern: str | None) -> list[str]:
    """Split a comma-separated pattern string into trimmed, non-empty segments.

    Args:
        pattern: Raw string as typed by the user.

    Returns:
        Segments in input order.
    """
    segments = (segment.strip() for segment in split_glob_aware(pattern, ","))
    return [segment for segment in segments if segment]


def untildify(path: str, user_home: str | None) -> str:
    """Replace a leading ~ with the user's home directory.

    Only `~` on its own or followed by a separator is expanded; `~user`
    forms are left alone.

    Args:
        path: Segment to expand.
        user_home: Home directory, or None/empty to skip expansion.

    Returns:
        The expanded segment.
    """
    if not user_home:
        return path
    return _TILDE_PREFIX.sub(lambda _: user_home, path, count=1)
