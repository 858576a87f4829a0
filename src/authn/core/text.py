"""Text helpers for type identifiers

Small, total string functions used when parsing and displaying
provider identifiers. None of them raise for string or None input.
"""

from typing import Optional

# Maximum length of a type identifier after cleaning
LENGTH_TYPE = 64

# Characters that never belong in a type identifier
_UNSAFE_CHARS = frozenset("`\"'<>{}[]|;$*?")


def clean_type(s: Optional[str]) -> str:
    """Remove invalid characters from a type identifier and clip it.

    Control characters and shell/markup punctuation are dropped, surrounding
    whitespace is stripped and the result is clipped to LENGTH_TYPE characters.
    Slashes, backslashes, dashes, underscores and inner spaces are kept.

    Args:
        s: Raw identifier, may be None

    Returns:
        Cleaned identifier (possibly empty)
    """
    if not s:
        return ""

    s = "".join(c for c in s if ord(c) > 31 and ord(c) != 127 and c not in _UNSAFE_CHARS)
    s = s.strip()

    if len(s) > LENGTH_TYPE:
        s = s[:LENGTH_TYPE].rstrip()

    return s


def clean_type_lower(s: Optional[str]) -> str:
    """Lower-case a type identifier, then clean it with clean_type()"""
    if not s:
        return ""
    return clean_type(s.lower())


def upper_first(s: Optional[str]) -> str:
    """Upper-case the first character, leave the rest unchanged"""
    if not s:
        return ""
    return s[0].upper() + s[1:]
