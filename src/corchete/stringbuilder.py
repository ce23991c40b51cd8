"""StringBuilder for O(n) string accumulation.

A rewrite pass emits the literal text between matches and one replacement
per match. Appending to a list and joining once keeps the pass O(n) total
instead of O(n²) for repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each rewrite pass.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("Hello, ")
            >>> sb.append("[b]")
            >>> sb.build()
            'Hello, [b]'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def clear(self) -> None:
        """Clear all accumulated content."""
        self._parts.clear()

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
