"""Attribute schema resolution for shortcode handlers.

Handlers declare the attributes they support as a schema and let the
resolver merge the user's attributes into it:

    >>> schema = {
    ...     "color": AttributeRule("red|green|blue", "red"),
    ...     "flag": AttributeRule("boolean", False),
    ...     "title": "",
    ... }
    >>> resolver.resolve(schema, {"color": "purple", "flag": "yes"})
    {'color': 'red', 'flag': True, 'title': ''}

Schema entries are either a bare default (any user value accepted) or a
validation pair ``(rule, default)`` with a string rule. The rule ``"boolean"`` accepts
1/0/yes/no/true/false in any case and coerces to bool; any other rule is a
regular expression searched in the raw value. Keys not in the schema are
dropped.

"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, NamedTuple

from corchete.attributes import ShortcodeAttributes
from corchete.config import DEFAULT_CONFIG, EngineConfig
from corchete.errors import SchemaError
from corchete.hooks import NULL_HOOKS, FilterHooks
from corchete.utils.logger import get_logger

logger = get_logger(__name__)

BOOLEAN_RULE = "boolean"

_TRUE_LITERALS = frozenset({"1", "yes", "true", "on"})
_BOOLEAN_LITERAL = re.compile(r"1|0|yes|no|true|false", re.IGNORECASE)


class AttributeRule(NamedTuple):
    """Validation pair for one schema entry.

    Attributes:
        rule: ``"boolean"`` or a regular expression searched in the value
        default: Used when the attribute is missing or fails the rule
    """

    rule: str
    default: Any


def coerce_boolean(value: Any) -> bool:
    """Coerce a value to bool the way attribute flags read.

    Strings are true when they spell 1/yes/true/on (any case, surrounding
    whitespace ignored); everything else is false. Non-strings use bool().
    """
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_LITERALS
    return bool(value)


def _is_rule_pair(entry: Any) -> bool:
    # Any other tuple or list is an ordinary default value
    return isinstance(entry, (tuple, list)) and len(entry) == 2 and isinstance(entry[0], str)


@lru_cache(maxsize=256)
def _compile_rule(rule: str) -> re.Pattern[str]:
    return re.compile(rule)


class AttributeResolver:
    """Merges user attributes into a caller-declared schema.

    Args:
        hooks: Filter collaborator consulted when a tag name is given
        config: Engine configuration (strict_schema is honoured)
    """

    __slots__ = ("_hooks", "_config")

    def __init__(
        self,
        hooks: FilterHooks | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._hooks = hooks if hooks is not None else NULL_HOOKS
        self._config = config or DEFAULT_CONFIG

    def resolve(
        self,
        schema: Mapping[str, Any],
        user_attrs: ShortcodeAttributes | Mapping[str, Any] | None,
        tag_name: str | None = None,
    ) -> dict[str, Any]:
        """Combine user attributes with the schema.

        Args:
            schema: Attribute name -> default, or -> (rule, default)
            user_attrs: Attributes as parsed from the tag (the named part
                is used), any mapping, or None
            tag_name: When given, the result is passed through the
                ``shortcode_atts_<tag_name>`` filter

        Returns:
            One entry per schema key, in schema order (unless a filter
            returns something else)

        Raises:
            SchemaError: If a rule is not a valid pattern and strict_schema is set
        """
        supplied = self._named(user_attrs)
        out: dict[str, Any] = {}

        for name, entry in schema.items():
            if _is_rule_pair(entry):
                rule, default = entry
                if name in supplied:
                    out[name] = self._validate(name, rule, supplied[name], default)
                else:
                    out[name] = default
            elif name in supplied:
                out[name] = supplied[name]
            else:
                out[name] = entry

        if tag_name is not None:
            out = self._hooks.apply(f"shortcode_atts_{tag_name}", out, schema, user_attrs)
        return out

    __call__ = resolve

    def _validate(self, name: str, rule: str, value: Any, default: Any) -> Any:
        raw = "" if value is None else str(value)

        if rule == BOOLEAN_RULE:
            if _BOOLEAN_LITERAL.fullmatch(raw.strip()):
                return coerce_boolean(raw)
            return coerce_boolean(default)

        try:
            pattern = _compile_rule(rule)
        except re.error as e:
            if self._config.strict_schema:
                raise SchemaError(name, rule, f"invalid pattern: {e}") from e
            logger.warning("Invalid validation rule %r for attribute %r: %s", rule, name, e)
            return default

        if pattern.search(raw):
            return value
        return default

    @staticmethod
    def _named(user_attrs: ShortcodeAttributes | Mapping[str, Any] | None) -> Mapping[str, Any]:
        if user_attrs is None:
            return {}
        if isinstance(user_attrs, ShortcodeAttributes):
            return user_attrs.named
        return user_attrs
