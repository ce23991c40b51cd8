"""Filter hook collaborator used during attribute resolution.

Corchete does not ship a hook dispatcher. An application that has one
(priority ordering, enable/disable, recursion guards) adapts it to the
single ``apply`` entry point below and injects it into Shortcodes.

The resolver calls ``apply("shortcode_atts_<tag>", result, schema, user_attrs)``
once per resolution that names a tag, and uses whatever comes back.

Example:
    >>> class MyHooks:
    ...     def apply(self, name, value, *args):
    ...         if name == "shortcode_atts_button":
    ...             value["size"] = value["size"].upper()
    ...         return value
    >>> engine = Shortcodes(hooks=MyHooks())

"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FilterHooks(Protocol):
    """Protocol for a named filter pipeline."""

    def apply(self, name: str, value: Any, *args: Any) -> Any:
        """Run ``value`` through the filters registered under ``name``.

        Args:
            name: Filter name
            value: Value to filter
            *args: Extra context passed to each filter

        Returns:
            The filtered value (may be ``value`` itself)
        """
        ...


class NullHooks:
    """Hook collaborator that filters nothing."""

    __slots__ = ()

    def apply(self, name: str, value: Any, *args: Any) -> Any:
        return value


NULL_HOOKS = NullHooks()
