"""Tests for the tag registry and its grammar cache."""

import pytest

from corchete import Shortcodes, TagRegistry


def _upper(attrs, content, tag, resolve):
    return (content or "").upper()


def _const(attrs, content, tag, resolve):
    return "X"


class TestTagRegistry:
    """Tests for TagRegistry bindings."""

    def test_empty_registry(self) -> None:
        registry = TagRegistry()
        assert len(registry) == 0
        assert not registry
        assert registry.names == ()

    def test_register_and_exists(self) -> None:
        registry = TagRegistry()
        assert registry.register("quote", _upper) is True
        assert registry.exists("quote")
        assert "quote" in registry
        assert registry.get("quote") is _upper

    def test_names_are_case_sensitive(self) -> None:
        registry = TagRegistry()
        registry.register("Quote", _upper)
        assert registry.exists("Quote")
        assert not registry.exists("quote")

    def test_last_registration_wins(self) -> None:
        registry = TagRegistry()
        registry.register("t", _upper)
        registry.register("t", _const)
        assert registry.get("t") is _const
        assert len(registry) == 1

    def test_reregistration_keeps_position(self) -> None:
        registry = TagRegistry()
        registry.register("a", _const)
        registry.register("b", _const)
        registry.register("a", _upper)
        assert registry.names == ("a", "b")

    def test_unregister(self) -> None:
        registry = TagRegistry()
        registry.register("t", _const)
        registry.unregister("t")
        assert not registry.exists("t")
        assert registry.get("t") is None

    def test_unregister_missing_is_noop(self) -> None:
        registry = TagRegistry()
        registry.register("t", _const)
        registry.unregister("other")
        assert registry.names == ("t",)

    def test_clear(self) -> None:
        registry = TagRegistry()
        registry.register("a", _const)
        registry.register("b", _const)
        registry.clear()
        assert len(registry) == 0
        assert list(registry) == []

    def test_accepts_callable_objects(self) -> None:
        class Handler:
            def __call__(self, attrs, content, tag, resolve):
                return "obj"

        registry = TagRegistry()
        assert registry.register("obj", Handler()) is True

    def test_accepts_handlers_with_extra_defaults(self) -> None:
        def handler(attrs, content, tag, resolve, extra=None):
            return ""

        assert TagRegistry().register("t", handler) is True

    def test_accepts_varargs_handlers(self) -> None:
        assert TagRegistry().register("t", lambda *args: "") is True


class TestGrammarCache:
    """The cached grammar always reflects current registry contents."""

    def test_grammar_is_cached(self) -> None:
        registry = TagRegistry()
        registry.register("a", _const)
        assert registry.grammar is registry.grammar

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda r: r.register("b", _const),
            lambda r: r.unregister("a"),
            lambda r: r.clear(),
        ],
    )
    def test_mutation_invalidates(self, mutate) -> None:
        registry = TagRegistry()
        registry.register("a", _const)
        before = registry.grammar
        mutate(registry)
        after = registry.grammar
        assert after is not before
        assert after.names == registry.names

    def test_noop_unregister_keeps_cache(self) -> None:
        registry = TagRegistry()
        registry.register("a", _const)
        before = registry.grammar
        registry.unregister("missing")
        assert registry.grammar is before

    def test_engine_sees_new_tags_immediately(self) -> None:
        engine = Shortcodes()
        engine.register("a", _const)
        assert engine.expand("[a][b]") == "X[b]"
        engine.register("b", _const)
        assert engine.expand("[a][b]") == "XX"
        engine.unregister("a")
        assert engine.expand("[a][b]") == "[a]X"


class TestEngineRegistration:
    """Registration surface on the Shortcodes facade."""

    def test_exists_and_contains(self) -> None:
        engine = Shortcodes()
        engine.register("b", _const)
        assert engine.exists("b")
        assert "b" in engine
        assert len(engine) == 1
        assert engine.names == ("b",)

    def test_shortcode_decorator_registers_all_tags(self) -> None:
        engine = Shortcodes()

        @engine.shortcode("note", "warning")
        def admonition(attrs, content, tag, resolve):
            return f"<{tag}>{content}</{tag}>"

        assert engine.names == ("note", "warning")
        assert engine.expand("[warning]hey[/warning]") == "<warning>hey</warning>"
        # decorator returns the function unchanged
        assert admonition(None, "x", "note", None) == "<note>x</note>"

    def test_shortcode_decorator_requires_a_tag(self) -> None:
        with pytest.raises(ValueError, match="At least one tag"):
            Shortcodes().shortcode()

    def test_clear_disables_expansion(self) -> None:
        engine = Shortcodes()
        engine.register("b", _const)
        engine.clear()
        assert engine.expand("[b/]") == "[b/]"
        assert engine.strip("[b/]") == "[b/]"

    def test_repr_lists_tags(self) -> None:
        engine = Shortcodes()
        engine.register("b", _const)
        assert repr(engine) == "Shortcodes(tags=('b',))"
