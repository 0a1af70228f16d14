#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/renderers/base.py
"""Base classes for AST node renderers.

Rendering a parsed message walks the AST and asks an ordered chain of
:class:`NodeRenderer` objects to render each node. A renderer returns None
to pass the node on to the next renderer; the built-in default renderer of
the output mode always comes last and handles every node.

For every node the serializer:

1. derives a fresh accumulator (an empty component inheriting the parent's
   style, or an empty string in escape mode)
2. calls ``render`` on each renderer until one returns a result
3. renders each child and appends it to that result
4. calls ``render_after_children`` on the same renderer; a non-None return
   value replaces the result

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from chatmd.ast.nodes import Node
from chatmd.ast.transforms import flatten_text_nodes

if TYPE_CHECKING:
    from chatmd.options.components import ComponentSerializerOptions

R = TypeVar("R")

# Renders a node, with its children, under the node currently being rendered
RenderWithChildren = Callable[[Node], R]


class NodeRenderer(ABC, Generic[R]):
    """Renders AST nodes into results of type ``R``.

    ``R`` is the component type in tree mode and ``str`` in escape mode.

    Examples
    --------
    A renderer turning user mentions into player names:

        >>> class PlayerMentionRenderer(NodeRenderer[TextComponent]):
        ...     def render(self, render_to, node, options, render_with_children):
        ...         if not _is_user_mention(node):
        ...             return None
        ...         return render_to.append(TextComponent.literal(players[node.styles[0].extra["id"]]))

    """

    @abstractmethod
    def render(
        self,
        render_to: R,
        node: Node,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[R],
    ) -> Optional[R]:
        """Render ``node`` onto ``render_to``.

        Parameters
        ----------
        render_to : R
            Fresh accumulator for this node
        node : Node
            Node to render; its children are rendered afterwards by the caller
        options : ComponentSerializerOptions
            Options of the current serialization
        render_with_children : callable
            Renders another node, including its children, at this position

        Returns
        -------
        R or None
            The rendered result, or None when this renderer does not handle
            the node

        """

    def render_after_children(
        self,
        render_to: R,
        node: Node,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[R],
    ) -> Optional[R]:
        """Post-process the result once the children of ``node`` are appended.

        Returns None by default, which keeps the result unchanged.
        """
        return None


def parse_and_render(
    source: str,
    state: Any,
    options: ComponentSerializerOptions,
    render_with_children: RenderWithChildren[R],
) -> list[R]:
    """Parse nested markdown source and render each top-level node.

    Quote and spoiler content is raw source; renderers call this to run it
    through the same parse, flatten and render steps as the whole message.

    Parameters
    ----------
    source : str
        Markdown source to parse
    state : Any
        Parse mode, e.g. ``QuoteState(True)`` for quote content
    options : ComponentSerializerOptions
        Options of the current serialization
    render_with_children : callable
        The render function received by the calling renderer

    Returns
    -------
    list
        Rendered results in source order

    """
    nodes = options.parser.parse(source, state, options.rules, options.debugging_enabled)
    return [render_with_children(node) for node in flatten_text_nodes(nodes)]
