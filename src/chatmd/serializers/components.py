#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/serializers/components.py
"""Serialize Discord markdown to styled component trees or escaped text.

Both outputs share one pipeline: parse the message, merge adjacent text
nodes, then render every node through the renderer chain of the options
followed by the default renderer of the output mode.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from chatmd.ast.nodes import Node
from chatmd.ast.transforms import flatten_text_nodes
from chatmd.components.adapter import ComponentTreeAdapter
from chatmd.exceptions import NestingDepthError, RenderingError
from chatmd.options.components import ComponentSerializerOptions
from chatmd.renderers.base import NodeRenderer
from chatmd.renderers.components import DefaultComponentRenderer
from chatmd.renderers.escaping import DefaultEscapingRenderer
from chatmd.tree import TreeAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class _RenderTarget(Generic[R]):
    """Accumulator operations of one output mode."""

    def __init__(
        self,
        default_renderer: NodeRenderer[R],
        derive: Callable[[R], R],
        append: Callable[[R, R], R],
    ):
        self.default_renderer = default_renderer
        self.derive = derive
        self.append = append


class ComponentSerializer(Generic[T]):
    """Serializer from Discord markdown to component trees.

    Parameters
    ----------
    tree : TreeAdapter or None, default None
        Adapter for the tree type, ComponentTreeAdapter when None
    options : ComponentSerializerOptions or None, default None
        Default options for :meth:`serialize`
    escape_options : ComponentSerializerOptions or None, default None
        Default options for :meth:`escape_markdown`

    Examples
    --------
        >>> component = ComponentSerializer().serialize("**bold** text")
        >>> component.plain_text()
        'bold text'

    """

    def __init__(
        self,
        tree: Optional[TreeAdapter[T]] = None,
        options: Optional[ComponentSerializerOptions] = None,
        escape_options: Optional[ComponentSerializerOptions] = None,
    ):
        """Initialize the serializer."""
        self.tree: TreeAdapter[Any] = tree if tree is not None else ComponentTreeAdapter()
        self.options = options if options is not None else ComponentSerializerOptions.defaults()
        self.escape_options = escape_options if escape_options is not None else ComponentSerializerOptions.escape_defaults()

        self._tree_target: _RenderTarget[Any] = _RenderTarget(
            DefaultComponentRenderer(self.tree),
            lambda parent: self.tree.create_empty(style_from=parent),
            self.tree.append,
        )
        self._string_target: _RenderTarget[str] = _RenderTarget(
            DefaultEscapingRenderer(),
            lambda parent: "",
            lambda result, child: result + child,
        )

    def serialize(self, message: str, options: Optional[ComponentSerializerOptions] = None) -> T:
        """Render a markdown message into a component tree.

        Parameters
        ----------
        message : str
            Discord markdown
        options : ComponentSerializerOptions or None, default None
            Options for this call, the serializer's options when None

        Returns
        -------
        T
            An empty root node holding one child per top-level markdown node

        Raises
        ------
        ParsingError
            If the grammar cannot tokenize the message
        NestingDepthError
            If the markdown is nested deeper than ``options.max_depth``

        """
        options = options if options is not None else self.options
        root = self.tree.create_empty()
        for node in self._parse(message, options):
            root = self.tree.append(root, self._render(node, self.tree.create_empty(), options, self._tree_target, 1))
        return root

    def escape_markdown(self, message: str, options: Optional[ComponentSerializerOptions] = None) -> str:
        """Escape every markdown construct of a message.

        The whole message should be passed, since markers split across calls
        are not recognized.

        Parameters
        ----------
        message : str
            Discord markdown
        options : ComponentSerializerOptions or None, default None
            Options for this call, the serializer's escape options when None

        Returns
        -------
        str
            The message with its markdown backslash-escaped

        """
        options = options if options is not None else self.escape_options
        return "".join(self._render(node, "", options, self._string_target, 1) for node in self._parse(message, options))

    def _parse(self, message: str, options: ComponentSerializerOptions) -> list[Node]:
        nodes = options.parser.parse(message, None, options.rules, options.debugging_enabled)
        return flatten_text_nodes(nodes)

    def _render(
        self,
        node: Node,
        parent: R,
        options: ComponentSerializerOptions,
        target: _RenderTarget[R],
        depth: int,
    ) -> R:
        if depth > options.max_depth:
            raise NestingDepthError(depth, options.max_depth)

        render_to = target.derive(parent)

        def render_with_children(other: Node) -> R:
            return self._render(other, render_to, options, target, depth + 1)

        output: Optional[R] = None
        renderer: NodeRenderer[R] = target.default_renderer
        for candidate in options.renderers:
            output = candidate.render(render_to, node, options, render_with_children)
            if output is not None:
                renderer = candidate
                break
        if output is None:
            output = renderer.render(render_to, node, options, render_with_children)
            if output is None:
                raise RenderingError(f"{type(renderer).__name__} returned no result for {type(node).__name__}")
        logger.debug("Rendered %s with %s", type(node).__name__, type(renderer).__name__)

        for child in node.children:
            output = target.append(output, self._render(child, output, options, target, depth + 1))

        after = renderer.render_after_children(output, node, options, render_with_children)
        return after if after is not None else output
