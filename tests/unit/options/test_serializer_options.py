#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for serializer options."""
from dataclasses import FrozenInstanceError

import pytest

from chatmd.components import TextComponent
from chatmd.exceptions import RendererRegistrationError, ValidationError
from chatmd.options import ComponentSerializerOptions, MarkdownSerializerOptions
from chatmd.parsers import Parser
from chatmd.parsers.discord import create_simple_markdown_rules
from chatmd.renderers import ComponentRenderer, DefaultComponentRenderer, DefaultEscapingRenderer, NodeRenderer


class NoopRenderer(NodeRenderer[TextComponent]):
    def render(self, render_to, node, options, render_with_children):
        return None


class CustomDefaultRenderer(DefaultComponentRenderer[TextComponent]):
    pass


@pytest.mark.unit
class TestMarkdownSerializerOptions:
    """Test options of the component to markdown direction."""

    def test_defaults(self) -> None:
        """Test the default values."""
        options = MarkdownSerializerOptions.defaults()

        assert options.embed_links is False
        assert options.escape_markdown is True
        assert options.strip_legacy_formatting is True
        assert options.keybind_provider is not None
        assert options.translation_provider is not None
        assert options.max_depth == 64

    def test_frozen(self) -> None:
        """Test options cannot be mutated."""
        options = MarkdownSerializerOptions()

        with pytest.raises(FrozenInstanceError):
            options.embed_links = True  # type: ignore[misc]

    def test_with_methods_return_copies(self) -> None:
        """Test with-methods leave the original untouched."""
        options = MarkdownSerializerOptions.defaults()
        updated = options.with_embed_links(True).with_escape_markdown(False).with_strip_legacy_formatting(False)

        assert updated.embed_links is True
        assert updated.escape_markdown is False
        assert updated.strip_legacy_formatting is False
        assert options.embed_links is False
        assert options.escape_markdown is True

    def test_unchanged_value_returns_same_instance(self) -> None:
        """Test setting a field to its current value returns the same options."""
        options = MarkdownSerializerOptions.defaults()

        assert options.with_embed_links(False) is options
        assert options.with_keybind_provider(options.keybind_provider) is options
        assert options.with_max_depth(64) is options

    def test_providers(self) -> None:
        """Test providers can be replaced and removed."""
        provider = lambda component: "x"  # noqa: E731
        options = MarkdownSerializerOptions.defaults().with_keybind_provider(provider).with_translation_provider(None)

        assert options.keybind_provider is provider
        assert options.translation_provider is None

    def test_default_providers_resolve_text(self) -> None:
        """Test the default providers read the component contents."""
        options = MarkdownSerializerOptions.defaults()

        assert options.keybind_provider(TextComponent.keybind("key.jump")) == "key.jump"
        assert options.translation_provider(TextComponent.translatable("a.b", fallback="Hi")) == "Hi"
        assert options.translation_provider(TextComponent.translatable("a.b")) == "a.b"

    @pytest.mark.parametrize("max_depth", [0, -1])
    def test_invalid_max_depth(self, max_depth: int) -> None:
        """Test non-positive depth limits are rejected."""
        with pytest.raises(ValueError, match="max_depth"):
            MarkdownSerializerOptions(max_depth=max_depth)

        with pytest.raises(ValueError):
            MarkdownSerializerOptions().with_max_depth(max_depth)


@pytest.mark.unit
class TestComponentSerializerOptions:
    """Test options of the markdown to component direction."""

    def test_defaults(self) -> None:
        """Test the default values."""
        options = ComponentSerializerOptions.defaults()

        assert options.renderers == ()
        assert options.debugging_enabled is False
        assert isinstance(options.parser, Parser)
        assert [rule.name for rule in options.rules][-1] == "text"

    def test_escape_defaults_have_no_mentions(self) -> None:
        """Test the escape grammar leaves mentions to the text rule."""
        names = {rule.name for rule in ComponentSerializerOptions.escape_defaults().rules}
        default_names = {rule.name for rule in ComponentSerializerOptions.defaults().rules}

        assert {"bold", "code_block", "spoiler", "quote", "text"} <= names
        assert not names & {"emoji_mention", "channel_mention", "user_mention", "role_mention"}
        assert "user_mention" in default_names

    def test_default_instances_are_independent(self) -> None:
        """Test registering on one instance does not affect another."""
        renderer = NoopRenderer()
        first = ComponentSerializerOptions.defaults().add_renderer(renderer)

        assert ComponentSerializerOptions.defaults().renderers == ()
        assert ComponentSerializerOptions.escape_defaults().renderers == ()
        assert first.renderers == (renderer,)

    def test_add_renderer_order(self) -> None:
        """Test renderers are appended or inserted at an index."""
        first, second, third = NoopRenderer(), NoopRenderer(), NoopRenderer()
        options = ComponentSerializerOptions().add_renderer(first).add_renderer(second).add_renderer(third, index=0)

        assert options.renderers == (third, first, second)

    def test_add_duplicate_renderer(self) -> None:
        """Test the same renderer cannot be registered twice."""
        renderer = NoopRenderer()
        options = ComponentSerializerOptions().add_renderer(renderer)

        with pytest.raises(RendererRegistrationError) as exc_info:
            options.add_renderer(renderer)
        assert exc_info.value.renderer is renderer

    @pytest.mark.parametrize(
        "renderer",
        [DefaultEscapingRenderer(), DefaultComponentRenderer(tree=None)],
        ids=["escaping", "component"],
    )
    def test_add_reserved_renderer(self, renderer: NodeRenderer) -> None:
        """Test the built-in default renderers cannot be registered."""
        with pytest.raises(RendererRegistrationError):
            ComponentSerializerOptions().add_renderer(renderer)

    def test_subclass_of_default_renderer_allowed(self) -> None:
        """Test subclasses of the default renderer may be registered."""
        renderer = CustomDefaultRenderer(tree=None)

        assert ComponentSerializerOptions().add_renderer(renderer).renderers == (renderer,)

    def test_invalid_chain_in_constructor(self) -> None:
        """Test the renderer chain is validated at construction."""
        renderer = NoopRenderer()

        with pytest.raises(RendererRegistrationError):
            ComponentSerializerOptions(renderers=(renderer, renderer))

    def test_remove_renderer(self) -> None:
        """Test renderers can be removed and unknown ones are rejected."""
        renderer = ComponentRenderer(tree=None)
        options = ComponentSerializerOptions().add_renderer(renderer)

        assert options.remove_renderer(renderer).renderers == ()
        with pytest.raises(RendererRegistrationError):
            ComponentSerializerOptions().remove_renderer(renderer)

    def test_registration_error_is_validation_error(self) -> None:
        """Test registration errors belong to the validation hierarchy."""
        with pytest.raises(ValidationError):
            ComponentSerializerOptions().remove_renderer(NoopRenderer())

    def test_with_methods(self) -> None:
        """Test with-methods for parser, rules and debugging."""
        parser = Parser()
        rules = create_simple_markdown_rules()
        options = ComponentSerializerOptions().with_parser(parser).with_rules(rules).with_debugging_enabled(True)

        assert options.parser is parser
        assert options.rules == tuple(rules)
        assert options.debugging_enabled is True
        assert options.with_debugging_enabled(True) is options
