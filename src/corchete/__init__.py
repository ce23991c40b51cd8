"""
Corchete: Bracket Shortcodes for Plain-Text Content

Expands WordPress-style shortcodes such as ``[tag attr="v"]content[/tag]``
through a registry of Python handlers. Linear-time tag scanning, explicit
attribute model, zero runtime dependencies.

Quick Start:
    >>> from corchete import Shortcodes
    >>> engine = Shortcodes()
    >>> engine.register("b", lambda attrs, content, tag, resolve: f"<b>{content}</b>")
    True
    >>> engine.expand("Say [b]hello[/b]")
    'Say <b>hello</b>'

    >>> # Doubled brackets escape a tag
    >>> engine.expand("[[b]]literal[[/b]]")
    '[b]literal[/b]'

Attribute Schemas:
    >>> from corchete import AttributeRule
    >>>
    >>> @engine.shortcode("button")
    ... def button(attrs, content, tag, resolve):
    ...     opts = resolve(
    ...         {"color": AttributeRule("red|green|blue", "red"), "outline": AttributeRule("boolean", False)},
    ...         attrs,
    ...         tag,
    ...     )
    ...     return f'<a class="btn-{opts["color"]}">{content}</a>'

Installation:
    pip install corchete
"""

from corchete.attributes import ShortcodeAttributes, parse_attributes
from corchete.config import EngineConfig
from corchete.engine import MAX_PASSES, Shortcodes
from corchete.errors import CorcheteError, RegistrationError, SchemaError
from corchete.grammar import TagGrammar, build_grammar
from corchete.hooks import FilterHooks, NullHooks
from corchete.matcher import ShortcodeMatch, find_all, substitute
from corchete.protocol import AttributeResolverFn, ShortcodeHandler
from corchete.registry import TagRegistry
from corchete.resolver import AttributeResolver, AttributeRule, coerce_boolean

__version__ = "0.1.0"

__all__ = [
    # Engine
    "MAX_PASSES",
    "Shortcodes",
    "EngineConfig",
    # Registry and handlers
    "TagRegistry",
    "ShortcodeHandler",
    "AttributeResolverFn",
    # Matching
    "TagGrammar",
    "build_grammar",
    "ShortcodeMatch",
    "find_all",
    "substitute",
    # Attributes
    "ShortcodeAttributes",
    "parse_attributes",
    "AttributeResolver",
    "AttributeRule",
    "coerce_boolean",
    # Hooks
    "FilterHooks",
    "NullHooks",
    # Errors
    "CorcheteError",
    "RegistrationError",
    "SchemaError",
    # Version
    "__version__",
]
