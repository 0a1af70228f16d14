#  Copyright (c) 2025 Tom Villani, Ph.D.

# chatmd/options/components.py
"""Configuration options for markdown-to-component serialization and escaping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from chatmd.exceptions import RendererRegistrationError
from chatmd.options.base import BaseSerializerOptions
from chatmd.parsers.base import Parser, Rule
from chatmd.parsers.discord import create_all_rules_for_discord, create_simple_markdown_rules, create_style_rules
from chatmd.renderers.base import NodeRenderer
from chatmd.renderers.components import DefaultComponentRenderer
from chatmd.renderers.escaping import DefaultEscapingRenderer

# Always last in their mode's chain, never registered explicitly
RESERVED_RENDERER_TYPES = (DefaultComponentRenderer, DefaultEscapingRenderer)


def _check_registrable(renderer: NodeRenderer[Any], registered: Sequence[NodeRenderer[Any]]) -> None:
    if type(renderer) in RESERVED_RENDERER_TYPES:
        raise RendererRegistrationError(
            f"{type(renderer).__name__} is the built-in fallback and cannot be registered", renderer=renderer
        )
    if renderer in registered:
        raise RendererRegistrationError(f"Renderer {renderer!r} is already registered", renderer=renderer)


def escape_rules() -> tuple[Rule, ...]:
    """Return the grammar used for escaping: formatting, code, spoilers, quotes and text."""
    return (
        *create_simple_markdown_rules(include_text_rule=False),
        *create_style_rules(),
        *create_simple_markdown_rules(include_text_rule=True)[-1:],
    )


@dataclass(frozen=True)
class ComponentSerializerOptions(BaseSerializerOptions):
    """Configuration options for turning Discord markdown into components or escaped text.

    Parameters
    ----------
    parser : Parser, default Parser()
        Parser applied to the message and to quote and spoiler content
    rules : tuple of Rule, default full Discord grammar
        Grammar rules in priority order
    renderers : tuple of NodeRenderer, default ()
        Renderers tried before the built-in default renderer
    debugging_enabled : bool, default False
        Log every parser rule match at DEBUG level
    max_depth : int, default 64
        Maximum markdown nesting depth

    Raises
    ------
    RendererRegistrationError
        If ``renderers`` holds the same renderer twice or a built-in default
        renderer

    Examples
    --------
        >>> options = ComponentSerializerOptions.defaults().add_renderer(MyRenderer(), index=0)

    """

    parser: Parser = field(
        default_factory=Parser,
        metadata={"help": "Parser producing the markdown AST", "importance": "advanced"},
    )
    rules: tuple[Rule, ...] = field(
        default_factory=lambda: tuple(create_all_rules_for_discord(include_text_rule=True)),
        metadata={"help": "Grammar rules in priority order", "importance": "advanced"},
    )
    renderers: tuple[NodeRenderer[Any], ...] = field(
        default=(),
        metadata={"help": "Renderers tried before the default renderer", "importance": "core"},
    )
    debugging_enabled: bool = field(
        default=False,
        metadata={"help": "Log parser rule matches at DEBUG level", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate depth and renderer chain.

        Raises
        ------
        ValueError
            If max_depth is not positive
        RendererRegistrationError
            If the renderer chain is invalid

        """
        super().__post_init__()
        for index, renderer in enumerate(self.renderers):
            _check_registrable(renderer, self.renderers[:index])

    @classmethod
    def defaults(cls) -> ComponentSerializerOptions:
        """Create options for rendering markdown into components."""
        return cls()

    @classmethod
    def escape_defaults(cls) -> ComponentSerializerOptions:
        """Create options for escaping markdown, without mention rules."""
        return cls(rules=escape_rules())

    def with_parser(self, parser: Parser) -> ComponentSerializerOptions:
        """Return options using a different parser."""
        return self._with("parser", parser)

    def with_rules(self, rules: Sequence[Rule]) -> ComponentSerializerOptions:
        """Return options using a different grammar."""
        return self._with("rules", rules if isinstance(rules, tuple) else tuple(rules))

    def with_debugging_enabled(self, debugging_enabled: bool) -> ComponentSerializerOptions:
        """Return options with parser debug logging turned on or off."""
        return self._with("debugging_enabled", debugging_enabled)

    def add_renderer(self, renderer: NodeRenderer[Any], index: Optional[int] = None) -> ComponentSerializerOptions:
        """Return options with ``renderer`` added to the chain.

        Parameters
        ----------
        renderer : NodeRenderer
            Renderer to add
        index : int or None, default None
            Position in the chain, None to append

        Raises
        ------
        RendererRegistrationError
            If the renderer is already registered or is a built-in default
            renderer

        """
        _check_registrable(renderer, self.renderers)
        renderers = list(self.renderers)
        if index is None:
            renderers.append(renderer)
        else:
            renderers.insert(index, renderer)
        return self.create_updated(renderers=tuple(renderers))

    def remove_renderer(self, renderer: NodeRenderer[Any]) -> ComponentSerializerOptions:
        """Return options with ``renderer`` removed from the chain.

        Raises
        ------
        RendererRegistrationError
            If the renderer is not registered

        """
        if renderer not in self.renderers:
            raise RendererRegistrationError(f"Renderer {renderer!r} is not registered", renderer=renderer)
        return self.create_updated(renderers=tuple(r for r in self.renderers if r is not renderer))
