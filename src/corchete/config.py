"""Engine configuration for Corchete.

Configuration is a frozen dataclass handed to a Shortcodes instance at
construction. The expansion pass ceiling is deliberately not part of it;
see corchete.engine.MAX_PASSES.

Usage:
    >>> from corchete import EngineConfig, Shortcodes
    >>> engine = Shortcodes(config=EngineConfig(strict_registration=True))

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine configuration.

    Attributes:
        strict_registration: Raise RegistrationError for handlers that are not
            callable with the handler signature (default: ignore them)
        strict_schema: Raise SchemaError for validation rules that are not
            valid regular expressions (default: fall back to the default value)

    """

    strict_registration: bool = False
    strict_schema: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EngineConfig":
        """Create EngineConfig from dictionary.

        Only includes keys that are valid EngineConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = EngineConfig.from_dict({
            ...     "strict_schema": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_schema
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: EngineConfig = EngineConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
]
