"""Tag matcher: finds shortcode occurrences and decomposes them.

The scan is a forward walk over ``[`` positions. Every lookahead the grammar
needs ("where is the next ``]``", "where is the next ``[/name]``") goes
through a memoized finder, so a full scan stays linear in the content length
even on input such as ten thousand unclosed ``[name`` openers.

Matches are leftmost and non-overlapping: after a match the scan resumes at
its end.

Thread Safety:
Scanners are local to each call. ShortcodeMatch is immutable.

Example:
    >>> grammar = build_grammar(["b"])
    >>> [m.tag_name for m in find_all(grammar, "[b]x[/b] and [b/]")]
    ['b', 'b']

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from corchete.charsets import CLOSE_BRACKET, OPEN_BRACKET, SLASH
from corchete.grammar import TagGrammar
from corchete.stringbuilder import StringBuilder


@dataclass(frozen=True, slots=True)
class ShortcodeMatch:
    """One tag occurrence found in content.

    Attributes:
        leading_escape: An extra ``[`` precedes the tag
        tag_name: Registered name that matched
        raw_attributes: Unparsed attribute span
        self_closing: Tag ended with ``/]``
        inner_content: Enclosed content, or None when no ``[/name]`` followed
        trailing_escape: An extra ``]`` follows the tag
        start: Index of the first matched character
        end: Index just past the last matched character
        text: The matched slice of content

    """

    leading_escape: bool
    tag_name: str
    raw_attributes: str
    self_closing: bool
    inner_content: str | None
    trailing_escape: bool
    start: int
    end: int
    text: str

    @property
    def escaped(self) -> bool:
        """Both escape markers present: ``[[tag]]`` renders literally."""
        return self.leading_escape and self.trailing_escape

    @property
    def unescaped_text(self) -> str:
        """The literal an escaped match renders as.

        ``[[tag]x[/tag]]`` drops its outer bracket pair. When both the
        opening and the closing tag are doubled (``[[tag]]x[[/tag]]``) the
        spare brackets land at the edges of the enclosed content, and
        those are dropped as well.
        """
        inner = self.inner_content
        if inner is None or len(inner) < 2 or inner[0] != CLOSE_BRACKET or inner[-1] != OPEN_BRACKET:
            return self.text[1:-1]
        body = len(self.opening_marker) + len(self.tag_name) + len(self.raw_attributes) + 2
        return self.text[1:body] + inner[1:-1] + self.text[body + len(inner) : -1]

    @property
    def opening_marker(self) -> str:
        return OPEN_BRACKET if self.leading_escape else ""

    @property
    def closing_marker(self) -> str:
        return CLOSE_BRACKET if self.trailing_escape else ""


class _NextOccurrence:
    """Memoized ``str.find`` for one needle over one source.

    Remembers that no occurrence starts in ``[_from, _found)`` so repeated
    queries from nearby positions never rescan the same stretch.
    """

    __slots__ = ("_source", "_needle", "_from", "_found")

    def __init__(self, source: str, needle: str) -> None:
        self._source = source
        self._needle = needle
        self._from = -1
        self._found = -1

    def find(self, pos: int) -> int:
        """Index of the first occurrence starting at or after ``pos``, or -1."""
        if self._from == -1 or (self._found != -1 and pos > self._found):
            self._from = pos
            self._found = self._source.find(self._needle, pos)
            return self._found

        if pos >= self._from:
            return self._found

        # pos sits before the known-free stretch: only the gap needs a look
        hit = self._source.find(self._needle, pos, self._from + len(self._needle) - 1)
        self._from = pos
        if hit != -1:
            self._found = hit
        return self._found


class _Scanner:
    """Single-use scanner over one piece of content."""

    __slots__ = ("_grammar", "_content", "_close_bracket", "_closers")

    def __init__(self, grammar: TagGrammar, content: str) -> None:
        self._grammar = grammar
        self._content = content
        self._close_bracket = _NextOccurrence(content, CLOSE_BRACKET)
        self._closers: dict[str, _NextOccurrence] = {}

    def scan(self) -> Iterator[ShortcodeMatch]:
        content = self._content
        pos = content.find(OPEN_BRACKET)
        while pos != -1:
            match = self._match_at(pos)
            if match is None:
                pos = content.find(OPEN_BRACKET, pos + 1)
            else:
                yield match
                pos = content.find(OPEN_BRACKET, match.end)

    def _match_at(self, start: int) -> ShortcodeMatch | None:
        if self._content.startswith(OPEN_BRACKET, start + 1):
            match = self._match_tag(start, leading_escape=True)
            if match is not None:
                return match
        return self._match_tag(start, leading_escape=False)

    def _match_tag(self, start: int, *, leading_escape: bool) -> ShortcodeMatch | None:
        content = self._content
        name_pos = start + (2 if leading_escape else 1)
        name = self._grammar.match_name(content, name_pos)
        if name is None:
            return None

        attrs_start = name_pos + len(name)
        close = self._close_bracket.find(attrs_start)
        if close == -1:
            return None

        inner_content = None
        end = close + 1
        self_closing = close > attrs_start and content[close - 1] == SLASH
        if self_closing:
            raw_attributes = content[attrs_start : close - 1]
        else:
            raw_attributes = content[attrs_start:close]
            closer = self._closer(name).find(end)
            if closer != -1:
                inner_content = content[end:closer]
                end = closer + len(self._grammar.closing_tag(name))

        trailing_escape = content.startswith(CLOSE_BRACKET, end)
        if trailing_escape:
            end += 1

        return ShortcodeMatch(
            leading_escape=leading_escape,
            tag_name=name,
            raw_attributes=raw_attributes,
            self_closing=self_closing,
            inner_content=inner_content,
            trailing_escape=trailing_escape,
            start=start,
            end=end,
            text=content[start:end],
        )

    def _closer(self, name: str) -> _NextOccurrence:
        finder = self._closers.get(name)
        if finder is None:
            finder = _NextOccurrence(self._content, self._grammar.closing_tag(name))
            self._closers[name] = finder
        return finder


def iter_matches(grammar: TagGrammar, content: str) -> Iterator[ShortcodeMatch]:
    """Lazily yield tag occurrences in left-to-right order."""
    if not grammar or OPEN_BRACKET not in content:
        return iter(())
    return _Scanner(grammar, content).scan()


def find_all(grammar: TagGrammar, content: str) -> list[ShortcodeMatch]:
    """Return every tag occurrence in content, left to right, non-overlapping."""
    return list(iter_matches(grammar, content))


def substitute(
    grammar: TagGrammar,
    content: str,
    transform: Callable[[ShortcodeMatch], str],
) -> str:
    """Run one rewrite pass over content.

    Args:
        grammar: Grammar to match with
        content: Text to rewrite
        transform: Called once per match, in order; returns the replacement

    Returns:
        Content with every match replaced and all other text untouched
    """
    sb = StringBuilder()
    last_end = 0
    matched = False
    for match in iter_matches(grammar, content):
        sb.append(content[last_end : match.start])
        sb.append(transform(match))
        last_end = match.end
        matched = True
    if not matched:
        return content
    sb.append(content[last_end:])
    return sb.build()
