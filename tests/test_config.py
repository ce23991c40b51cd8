"""Tests for EngineConfig."""

import pytest

from corchete import EngineConfig, Shortcodes
from corchete.config import DEFAULT_CONFIG


class TestEngineConfigDataclass:
    """Test EngineConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config is lenient everywhere."""
        config = EngineConfig()
        assert config.strict_registration is False
        assert config.strict_schema is False

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = EngineConfig()
        with pytest.raises(AttributeError):
            config.strict_schema = True  # type: ignore[misc]

    def test_default_singleton_matches_fresh_instance(self) -> None:
        assert DEFAULT_CONFIG == EngineConfig()


class TestEngineConfigFromDict:
    """Test EngineConfig.from_dict()."""

    def test_known_keys(self) -> None:
        config = EngineConfig.from_dict({"strict_registration": True, "strict_schema": True})
        assert config.strict_registration is True
        assert config.strict_schema is True

    def test_unknown_keys_ignored(self) -> None:
        config = EngineConfig.from_dict({"strict_schema": True, "max_passes": 50})
        assert config.strict_schema is True
        assert not hasattr(config, "max_passes")

    def test_empty_dict_gives_defaults(self) -> None:
        assert EngineConfig.from_dict({}) == EngineConfig()


class TestEngineUsesConfig:
    """The engine wires its config into registry and resolver."""

    def test_engine_defaults_to_lenient(self) -> None:
        engine = Shortcodes()
        assert engine.register("x", "not callable") is False  # type: ignore[arg-type]

    def test_engine_passes_strict_registration_to_registry(self) -> None:
        from corchete import RegistrationError

        engine = Shortcodes(config=EngineConfig(strict_registration=True))
        with pytest.raises(RegistrationError):
            engine.register("x", "not callable")  # type: ignore[arg-type]
