"""Attribute parsing for shortcode tags.

The attribute span of ``[tag type="info" bold]`` is ``type="info" bold``.
It holds named pairs and bare positional tokens side by side, so the parse
result keeps both parts explicitly.

Recognized tokens, in precedence order:
- ``key="value"``
- ``key='value'``
- ``key=value`` (value ends at whitespace)
- ``"value"`` (positional)
- ``value`` (positional, any run of non-whitespace)

Thread Safety:
ShortcodeAttributes is a frozen dataclass with a read-only named part;
parse_attributes is pure.

Example:
    >>> attrs = parse_attributes('type="info" bold')
    >>> attrs["type"], attrs[0]
    ('info', 'bold')

"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from corchete.utils.text import collapse_spaces, unescape_backslashes

_ATTRIBUTE_TOKEN = re.compile(
    r"""
        (\w+) \s* = \s* "([^"]*)" (?:\s|$)
    |   (\w+) \s* = \s* '([^']*)' (?:\s|$)
    |   (\w+) \s* = \s* ([^\s'"]+) (?:\s|$)
    |   "([^"]*)" (?:\s|$)
    |   (\S+) (?:\s|$)
    """,
    flags=re.ASCII | re.VERBOSE,
)


@dataclass(frozen=True, slots=True)
class ShortcodeAttributes:
    """Attributes of one tag occurrence.

    Attributes:
        named: Lower-cased attribute name -> value
        positional: Bare tokens in the order they appeared

    Indexing with a string reads ``named``; indexing with an int reads
    ``positional``. Iteration and ``len()`` cover the named part only.
    ``named`` is a read-only view, so one instance can be handed to any
    number of handlers.
    """

    named: Mapping[str, str] = field(default_factory=dict)
    positional: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "named", MappingProxyType(dict(self.named)))
        object.__setattr__(self, "positional", tuple(self.positional))

    def get(self, key: str | int, default: str | None = None) -> str | None:
        """Return a named (str key) or positional (int key) value, or default."""
        try:
            return self[key]
        except (KeyError, IndexError):
            return default

    def has_flag(self, flag: str) -> bool:
        """Check whether a bare token such as ``bold`` was given."""
        return flag in self.positional

    def as_dict(self) -> dict[str | int, str]:
        """Flatten into a single dict, positional values keyed by index."""
        flat: dict[str | int, str] = dict(enumerate(self.positional))
        flat.update(self.named)
        return flat

    def __getitem__(self, key: str | int) -> str:
        if isinstance(key, int):
            return self.positional[key]
        return self.named[key]

    def __contains__(self, key: object) -> bool:
        return key in self.named

    def __iter__(self) -> Iterator[str]:
        return iter(self.named)

    def __len__(self) -> int:
        return len(self.named)

    def __bool__(self) -> bool:
        return bool(self.named) or bool(self.positional)


EMPTY_ATTRIBUTES = ShortcodeAttributes()


def parse_attributes(text: str) -> ShortcodeAttributes:
    """Parse an attribute span into named and positional values.

    Non-breaking and zero-width spaces count as ordinary whitespace.
    Values have backslash escapes resolved. A repeated key keeps its last
    value. An empty standalone ``""`` contributes nothing.

    Args:
        text: Raw attribute span (everything between the tag name and ``]``)

    Returns:
        ShortcodeAttributes; empty (and falsy) when no token is recognized
    """
    if not text or text.isspace():
        return EMPTY_ATTRIBUTES

    named: dict[str, str] = {}
    positional: list[str] = []

    for m in _ATTRIBUTE_TOKEN.finditer(collapse_spaces(text)):
        if m.group(1) is not None:
            named[m.group(1).lower()] = unescape_backslashes(m.group(2))
        elif m.group(3) is not None:
            named[m.group(3).lower()] = unescape_backslashes(m.group(4))
        elif m.group(5) is not None:
            named[m.group(5).lower()] = unescape_backslashes(m.group(6))
        elif m.group(7) is not None:
            if m.group(7):
                positional.append(unescape_backslashes(m.group(7)))
        elif m.group(8) is not None:
            positional.append(unescape_backslashes(m.group(8)))

    if not named and not positional:
        return EMPTY_ATTRIBUTES
    return ShortcodeAttributes(named=named, positional=tuple(positional))
