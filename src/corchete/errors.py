"""Exception classes for Corchete.

The engine degrades gracefully by default: malformed markup stays literal
text and bad registrations are ignored. These exceptions are only raised
when an EngineConfig strict flag asks for them.
"""

from __future__ import annotations


class CorcheteError(Exception):
    """Base exception for all Corchete errors.

    Subclass this for specific error categories.
    """

    pass


class RegistrationError(CorcheteError):
    """A handler was rejected at registration time.

    Raised instead of silently ignoring the registration when
    ``EngineConfig.strict_registration`` is enabled.
    """

    def __init__(self, tag: str, message: str) -> None:
        """Initialize registration error.

        Args:
            tag: Shortcode tag the registration targeted
            message: Why the handler was rejected
        """
        self.tag = tag
        super().__init__(f"Shortcode '{tag}': {message}")


class SchemaError(CorcheteError):
    """An attribute schema entry carries an unusable validation rule.

    Raised instead of falling back to the default when
    ``EngineConfig.strict_schema`` is enabled.
    """

    def __init__(self, key: str, rule: str, message: str) -> None:
        """Initialize schema error.

        Args:
            key: Attribute name whose rule failed
            rule: The offending validation pattern
            message: Description of the failure
        """
        self.key = key
        self.rule = rule
        super().__init__(f"Attribute '{key}' rule {rule!r}: {message}")
