"""Text processing utilities for Corchete.

Example:
    >>> from corchete.utils.text import unescape_backslashes
    >>> unescape_backslashes(r"say \\"hi\\"")
    'say "hi"'
"""

from __future__ import annotations

import re

# Non-breaking space and zero-width space, as typed by rich-text editors
_EDITOR_SPACES = re.compile("[\u00a0\u200b]+")

_BACKSLASH_ESCAPE = re.compile(r"\\(x[0-9A-Fa-f]{1,2}|[0-7]{1,3}|[\s\S])")

_CONTROL_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "v": "\v",
    "b": "\b",
    "f": "\f",
}


def collapse_spaces(text: str) -> str:
    """Replace runs of non-breaking and zero-width spaces with one space."""
    return _EDITOR_SPACES.sub(" ", text)


def _replace_escape(match: re.Match[str]) -> str:
    seq = match.group(1)
    if seq in _CONTROL_ESCAPES:
        return _CONTROL_ESCAPES[seq]
    if len(seq) > 1 and seq[0] == "x":
        return chr(int(seq[1:], 16))
    if seq[0] in "01234567":
        return chr(int(seq, 8) & 0xFF)
    return seq


def unescape_backslashes(text: str) -> str:
    """Resolve C-style backslash escapes.

    Recognized sequences:
    - ``\\n \\t \\r \\a \\v \\b \\f``: control characters
    - ``\\xHH``: one or two hex digits
    - ``\\ooo``: one to three octal digits (wrapped to a single byte)
    - ``\\c``: any other character stands for itself

    A backslash at the very end of the text is kept as-is.

    Args:
        text: Raw text

    Returns:
        Text with escapes resolved

    Examples:
        >>> unescape_backslashes(r"a\\tb")
        'a\\tb'
        >>> unescape_backslashes(r"\\x41\\102")
        'AB'
    """
    if "\\" not in text:
        return text
    return _BACKSLASH_ESCAPE.sub(_replace_escape, text)
