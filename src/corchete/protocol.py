"""ShortcodeHandler protocol for tag handlers.

A handler is any callable taking the four handler arguments and returning
the replacement text for one tag occurrence.

Example:
    >>> def quote(attrs, content, tag, resolve):
    ...     opts = resolve({"cite": ""}, attrs, tag)
    ...     return f'<blockquote cite="{opts["cite"]}">{content or ""}</blockquote>'
    >>> engine.register("quote", quote)

"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from corchete.attributes import ShortcodeAttributes

AttributeResolverFn = Callable[..., dict[str, Any]]
"""Signature of the resolver passed to handlers: (schema, user_attrs, tag_name=None)."""


@runtime_checkable
class ShortcodeHandler(Protocol):
    """Protocol for shortcode handler callables.

    Args passed on every call:
        attributes: Parsed attributes of the occurrence
        content: Enclosed content, or None for the self-closing / bare form
        tag: The tag name that matched (one handler may serve several tags)
        resolve: The engine's attribute resolver, for normalizing options

    Returns:
        Replacement text. None is treated as the empty string.

    Nested shortcodes inside ``content`` are passed through verbatim; a
    handler that wants them expanded calls the engine again itself.
    """

    def __call__(
        self,
        attributes: ShortcodeAttributes,
        content: str | None,
        tag: str,
        resolve: AttributeResolverFn,
    ) -> str | None: ...


def accepts_handler_arguments(handler: object) -> bool:
    """Check that handler can be called with the four handler arguments.

    Callables whose signature cannot be introspected (some builtins and
    extension types) are accepted on trust.
    """
    if not callable(handler):
        return False
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(None, None, "", None)
    except TypeError:
        return False
    return True
