"""Tag registry for handler lookup and registration.

The registry maps tag names to their handlers. There is exactly one handler
per tag: registering a name again replaces the previous handler.

The matching grammar is derived from the registered names. It is built
lazily, cached, and dropped on every mutation, so a scan always sees the tag
set as it is when the scan begins.

Thread Safety:
TagRegistry is mutable and not synchronized. Confine an instance to one
thread, or serialize mutation and scanning behind an external lock.

Example:
    >>> registry = TagRegistry()
    >>> registry.register("b", lambda attrs, content, tag, resolve: f"<b>{content}</b>")
    True
    >>> registry.grammar.names
    ('b',)

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from corchete.errors import RegistrationError
from corchete.grammar import TagGrammar, build_grammar
from corchete.protocol import accepts_handler_arguments
from corchete.utils.logger import get_logger

if TYPE_CHECKING:
    from corchete.protocol import ShortcodeHandler

logger = get_logger(__name__)


class TagRegistry:
    """Mutable registry of shortcode handlers.

    Args:
        strict: Raise RegistrationError for rejected handlers instead of
            ignoring them
    """

    __slots__ = ("_handlers", "_grammar", "_strict")

    def __init__(self, *, strict: bool = False) -> None:
        """Initialize empty registry."""
        self._handlers: dict[str, ShortcodeHandler] = {}
        self._grammar: TagGrammar | None = None
        self._strict = strict

    def register(self, tag: str, handler: ShortcodeHandler) -> bool:
        """Bind handler to tag, replacing any previous binding.

        Args:
            tag: Tag name (case-sensitive)
            handler: Callable accepting (attributes, content, tag, resolve)

        Returns:
            True if the handler was stored, False if it was rejected

        Raises:
            RegistrationError: If rejected and the registry is strict
        """
        if not tag:
            return self._reject(tag, "tag name must not be empty")
        if not accepts_handler_arguments(handler):
            return self._reject(
                tag,
                f"{type(handler).__name__} is not callable as "
                "(attributes, content, tag, resolve)",
            )

        self._handlers[tag] = handler
        self._grammar = None
        logger.debug("Registered shortcode: %s", tag)
        return True

    def unregister(self, tag: str) -> None:
        """Remove the binding for tag, if any."""
        if self._handlers.pop(tag, None) is not None:
            self._grammar = None

    def clear(self) -> None:
        """Remove all bindings."""
        self._handlers.clear()
        self._grammar = None

    def exists(self, tag: str) -> bool:
        """Check if tag is registered."""
        return tag in self._handlers

    def get(self, tag: str) -> ShortcodeHandler | None:
        """Get handler for tag.

        Returns:
            Handler if registered, None otherwise
        """
        return self._handlers.get(tag)

    @property
    def names(self) -> tuple[str, ...]:
        """Registered tag names in registration order."""
        return tuple(self._handlers)

    @property
    def grammar(self) -> TagGrammar:
        """Matching grammar for the current tag set (cached until mutation)."""
        if self._grammar is None:
            self._grammar = build_grammar(self._handlers)
        return self._grammar

    def _reject(self, tag: str, reason: str) -> bool:
        if self._strict:
            raise RegistrationError(tag, reason)
        logger.debug("Ignored shortcode registration for %r: %s", tag, reason)
        return False

    def __contains__(self, tag: object) -> bool:
        """Support 'tag in registry' syntax."""
        return tag in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        """Number of registered tags."""
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)
