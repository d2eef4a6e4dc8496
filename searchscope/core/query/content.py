"""Heuristics applied to the text being searched for."""

import re

_ESCAPED_CHAR = re.compile(r"\\.")


def contains_uppercase_character(target: str, ignore_escaped_chars: bool = False) -> bool:
    """Check if a string has any uppercase character.

    Args:
        target: String to inspect.
        ignore_escaped_chars: Skip backslash escapes such as \\W or \\S.

    Returns:
        True if lowercasing the string would change it.
    """
    if not target:
        return False
    if ignore_escaped_chars:
        target = _ESCAPED_CHAR.sub("", target)
    return target.lower() != target


def is_multiline_regex_source(source: str) -> bool:
    """Check if a regex source can match across lines.

    Only the \\n, \\r and \\W escapes are treated as line-spanning.
    """
    index = 0
    length = len(source)
    while index < length:
        if source[index] == "\\":
            index += 1
            if index >= length:
                break
            if source[index] in ("n", "r", "W"):
                return True
        index += 1
    return False


def resolve_case_sensitive(
    pattern: str,
    is_case_sensitive: bool,
    is_smart_case: bool,
    is_reg_exp: bool,
) -> bool:
    """Apply smart case for backends that don't support it natively.

    With smart case, any uppercase character makes the search case
    sensitive. In a regex, escaped characters don't count.
    """
    if is_smart_case and contains_uppercase_character(pattern, ignore_escaped_chars=is_reg_exp):
        return True
    return is_case_sensitive


def resolve_multiline(pattern: str, is_multiline: bool, is_reg_exp: bool) -> bool:
    """A pattern is multiline if flagged so or if its regex source spans lines."""
    if is_multiline:
        return True
    return is_reg_exp and is_multiline_regex_source(pattern)
