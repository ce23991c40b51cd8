"""Tag grammar built from the registered tag names.

A TagGrammar is the compiled form of the registry's tag set: the names in
alternation order, indexed by first character, plus the closing-tag string
for each name. The matcher (corchete.matcher) walks content with it.

Grammar, at each ``[`` in the content:

1. ``[`` plus an optional second ``[`` (leading escape marker)
2. a registered name, not followed by an ASCII word character or ``-``
3. the attribute span, up to the first ``]``
4. ``/]`` (self-closing), or ``]`` optionally followed by content and the
   first later ``[/name]``
5. an optional ``]`` (trailing escape marker)

Names are matched literally, so a name containing ``.`` or ``*`` has no
pattern meaning. When several names match at one position the first in
registration order wins.

Thread Safety:
TagGrammar is immutable after creation. Safe to share.
"""

from __future__ import annotations

from collections.abc import Iterable

from corchete.charsets import NAME_CONTINUATION


class TagGrammar:
    """Immutable matching grammar for one tag set.

    Use build_grammar() to create instances.
    """

    __slots__ = ("_names", "_by_first_char", "_closing_tags")

    def __init__(self, names: tuple[str, ...]) -> None:
        self._names = names
        by_first_char: dict[str, list[str]] = {}
        for name in names:
            by_first_char.setdefault(name[0], []).append(name)
        self._by_first_char = {ch: tuple(group) for ch, group in by_first_char.items()}
        self._closing_tags = {name: f"[/{name}]" for name in names}

    @property
    def names(self) -> tuple[str, ...]:
        """Tag names in alternation (registration) order."""
        return self._names

    def match_name(self, content: str, pos: int) -> str | None:
        """Return the tag name starting at ``pos``, if any.

        Args:
            content: Text being scanned
            pos: Index just past the opening bracket(s)

        Returns:
            The first registered name found at ``pos`` that is not directly
            followed by a word character or hyphen, else None
        """
        if pos >= len(content):
            return None
        candidates = self._by_first_char.get(content[pos])
        if candidates is None:
            return None
        for name in candidates:
            if not content.startswith(name, pos):
                continue
            after = pos + len(name)
            if after < len(content) and content[after] in NAME_CONTINUATION:
                continue
            return name
        return None

    def closing_tag(self, name: str) -> str:
        """Return the closing tag ``[/name]`` for a registered name."""
        return self._closing_tags[name]

    def __contains__(self, name: object) -> bool:
        return name in self._closing_tags

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)

    def __repr__(self) -> str:
        return f"TagGrammar({self._names!r})"


EMPTY_GRAMMAR = TagGrammar(())


def build_grammar(names: Iterable[str]) -> TagGrammar:
    """Build the matching grammar for a set of tag names.

    Args:
        names: Tag names in registration order. Empty names are skipped and
            duplicates keep their first position.

    Returns:
        TagGrammar for those names
    """
    ordered = tuple(dict.fromkeys(name for name in names if name))
    if not ordered:
        return EMPTY_GRAMMAR
    return TagGrammar(ordered)
