"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from corchete.charsets import NAME_CONTINUATION

    if char in NAME_CONTINUATION:  # O(1) lookup
        ...
"""

import string

# ASCII word characters, the \w class without Unicode semantics
WORD_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")

# A tag name must not be directly followed by one of these, so that a
# registered "foo" never matches inside "[foobar]" or "[foo-bar]"
NAME_CONTINUATION: frozenset[str] = WORD_CHARS | frozenset("-")

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
SLASH = "/"
