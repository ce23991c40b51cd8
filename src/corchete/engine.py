"""Shortcodes engine: registration, expansion, stripping and detection.

Expansion is a fixed-point rewrite. Each pass replaces every tag occurrence
with its handler's output; handler output may contain new tags, so passes
repeat until no tag is left or MAX_PASSES passes have run. Reaching the
ceiling is not an error: whatever remains is returned as-is.

Thread Safety:
A Shortcodes instance owns a mutable registry. Confine it to one thread or
serialize registration and expansion behind an external lock. Handlers may
call back into the same instance (expand, strip, contains) while a pass is
running; pass state lives on the call stack.

Example:
    >>> engine = Shortcodes()
    >>> @engine.shortcode("quote")
    ... def quote(attrs, content, tag, resolve):
    ...     return (content or "").upper()
    >>> engine.expand("[quote]hi[/quote]")
    'HI'

"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from corchete.attributes import ShortcodeAttributes, parse_attributes
from corchete.charsets import OPEN_BRACKET
from corchete.config import DEFAULT_CONFIG, EngineConfig
from corchete.hooks import FilterHooks
from corchete.matcher import ShortcodeMatch, find_all, iter_matches, substitute
from corchete.protocol import ShortcodeHandler
from corchete.registry import TagRegistry
from corchete.resolver import AttributeResolver
from corchete.stringbuilder import StringBuilder
from corchete.utils.logger import get_logger

logger = get_logger(__name__)

MAX_PASSES = 10
"""Ceiling on expansion passes per expand() call."""

# (text, literal): literal runs came from escaped tags and are never rescanned
_Run = tuple[str, bool]


class Shortcodes:
    """Shortcode engine bound to one tag registry.

    Args:
        hooks: Optional filter collaborator for attribute resolution
        config: Engine configuration (defaults to EngineConfig())

    """

    __slots__ = ("_registry", "_resolver", "_config")

    def __init__(
        self,
        hooks: FilterHooks | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._registry = TagRegistry(strict=self._config.strict_registration)
        self._resolver = AttributeResolver(hooks, self._config)

    # ------------------------------------------------------------ registration

    def register(self, tag: str, handler: ShortcodeHandler) -> bool:
        """Bind handler to tag (last registration wins).

        Returns:
            True if stored, False if the handler was not callable with
            (attributes, content, tag, resolve)
        """
        return self._registry.register(tag, handler)

    def shortcode(self, *tags: str) -> Callable[[ShortcodeHandler], ShortcodeHandler]:
        """Decorator that registers a function for one or more tags.

        Usage::

            @engine.shortcode("note", "warning")
            def admonition(attrs, content, tag, resolve):
                return f'<div class="{tag}">{content or ""}</div>'
        """
        if not tags:
            msg = "At least one tag name must be provided"
            raise ValueError(msg)

        def decorator(handler: ShortcodeHandler) -> ShortcodeHandler:
            for tag in tags:
                self._registry.register(tag, handler)
            return handler

        return decorator

    def unregister(self, tag: str) -> None:
        """Remove the handler for tag, if any."""
        self._registry.unregister(tag)

    def clear(self) -> None:
        """Remove every handler."""
        self._registry.clear()

    def exists(self, tag: str) -> bool:
        """Check if tag has a handler."""
        return self._registry.exists(tag)

    @property
    def registry(self) -> TagRegistry:
        return self._registry

    @property
    def names(self) -> tuple[str, ...]:
        """Registered tag names in registration order."""
        return self._registry.names

    # ----------------------------------------------------------------- queries

    def find_all(self, content: str) -> list[ShortcodeMatch]:
        """Return every top-level tag occurrence in content."""
        return find_all(self._registry.grammar, content)

    def contains_any(self, content: str) -> bool:
        """Check whether content holds any registered tag."""
        if OPEN_BRACKET not in content:
            return False
        return next(iter_matches(self._registry.grammar, content), None) is not None

    def contains(self, content: str, tag: str) -> bool:
        """Check whether content holds tag, at top level or nested.

        Enclosed content of every occurrence is searched too, so a tag
        inside another tag's body counts.
        """
        if OPEN_BRACKET not in content:
            return False
        if not self._registry.exists(tag):
            return False
        return self._contains_nested(content, tag)

    def _contains_nested(self, content: str, tag: str) -> bool:
        for match in self._matches(content):
            if match.tag_name == tag:
                return True
            if match.inner_content and self._contains_nested(match.inner_content, tag):
                return True
        return False

    def _matches(self, content: str) -> Iterator[ShortcodeMatch]:
        if OPEN_BRACKET not in content:
            return iter(())
        return iter_matches(self._registry.grammar, content)

    # -------------------------------------------------------------- transforms

    def expand(self, content: str) -> str:
        """Replace every tag with its handler's output.

        Runs up to MAX_PASSES rewrite passes so that tags produced by
        handlers are expanded too. Text unescaped from ``[[tag]]`` is
        final for this call and never reaches a handler. It also bounds
        later passes: an opener produced on one side of it cannot pair
        with a closing tag on the other side. Handler exceptions propagate.
        """
        if not self._registry:
            return content

        runs: list[_Run] = [(content, False)]
        passes = 0
        while True:
            runs = self._expand_pass(runs)
            passes += 1
            if not any(not literal and self.contains_any(text) for text, literal in runs):
                break
            if passes >= MAX_PASSES:
                logger.debug("Shortcode expansion stopped at pass limit (%d)", MAX_PASSES)
                break
        return "".join(text for text, _ in runs)

    def _expand_pass(self, runs: list[_Run]) -> list[_Run]:
        """Rewrite every open run once; escaped matches become literal runs."""
        grammar = self._registry.grammar
        out: list[_Run] = []
        sb = StringBuilder()
        for text, literal in runs:
            if literal:
                _flush(sb, out)
                out.append((text, True))
                continue
            last_end = 0
            for match in iter_matches(grammar, text):
                sb.append(text[last_end : match.start])
                last_end = match.end
                if match.escaped:
                    _flush(sb, out)
                    out.append((match.unescaped_text, True))
                else:
                    sb.append(self._dispatch(match))
            sb.append(text[last_end:])
        _flush(sb, out)
        return out

    def strip(self, content: str) -> str:
        """Remove every tag, its attributes and its enclosed content.

        Escaped tags (``[[tag]]``) lose one bracket pair instead. A single
        pass; tags revealed by stripping are left alone.
        """
        if not self._registry:
            return content
        return substitute(self._registry.grammar, content, _strip_match)

    def resolve(
        self,
        schema: Mapping[str, Any],
        user_attrs: ShortcodeAttributes | Mapping[str, Any] | None,
        tag_name: str | None = None,
    ) -> dict[str, Any]:
        """Merge user attributes into a schema (see AttributeResolver.resolve)."""
        return self._resolver.resolve(schema, user_attrs, tag_name)

    def _dispatch(self, match: ShortcodeMatch) -> str:
        handler = self._registry.get(match.tag_name)
        if handler is None:
            # Unregistered by a handler earlier in this pass
            logger.debug("Shortcode %r no longer registered; left as text", match.tag_name)
            return match.text

        output = handler(
            parse_attributes(match.raw_attributes),
            match.inner_content,
            match.tag_name,
            self.resolve,
        )
        if output is None:
            output = ""
        elif not isinstance(output, str):
            output = str(output)
        return match.opening_marker + output + match.closing_marker

    # ------------------------------------------------------------------ dunder

    def __contains__(self, tag: object) -> bool:
        return tag in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"Shortcodes(tags={self._registry.names!r})"


def _strip_match(match: ShortcodeMatch) -> str:
    if match.escaped:
        return match.unescaped_text
    return match.opening_marker + match.closing_marker


def _flush(sb: StringBuilder, runs: list[_Run]) -> None:
    if sb:
        runs.append((sb.build(), False))
        sb.clear()
