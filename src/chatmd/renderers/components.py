#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/renderers/components.py
"""Renderers building styled text trees from the markdown AST.

:class:`ComponentRenderer` dispatches every style tag of a node to a hook
method. Subclasses override hooks to change how a single construct is
rendered; a hook returning None makes the renderer decline the whole node so
the next renderer in the chain gets it.

:class:`DefaultComponentRenderer` is the always-last fallback of tree mode.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, TypeVar

from chatmd.ast.nodes import Node, StyleNode, StyleType, TextNode, TextStyle
from chatmd.constants import (
    CODE_COLOR,
    QUOTE_PREFIX,
    QUOTE_PREFIX_COLOR,
    SPOILER_COLOR,
    SPOILER_MASK_CHAR,
)
from chatmd.parsers.discord import QuoteState
from chatmd.renderers.base import NodeRenderer, RenderWithChildren, parse_and_render
from chatmd.tree import ContentKind, TextFormat, TreeAdapter

if TYPE_CHECKING:
    from chatmd.options.components import ComponentSerializerOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ComponentRenderer(NodeRenderer[T]):
    """Tree mode renderer mapping style tags to overridable hooks.

    Text nodes become literal tree nodes carrying the inherited style. Nodes
    that are neither text nor style nodes are returned unchanged.

    Parameters
    ----------
    tree : TreeAdapter
        Capability interface used to build tree nodes

    """

    def __init__(self, tree: TreeAdapter[T]):
        """Initialize the renderer with a tree adapter."""
        self.tree = tree

    def render(
        self,
        render_to: T,
        node: Node,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[T],
    ) -> Optional[T]:
        """Render a text node or every style tag of a style node."""
        if isinstance(node, TextNode):
            return self.text(render_to, node.content)
        if not isinstance(node, StyleNode):
            return render_to

        result: Optional[T] = render_to
        for style in list(node.styles):
            result = self._render_style(result, node, style, options, render_with_children)
            if result is None:
                return None
        return result

    def _render_style(
        self,
        render_to: T,
        node: StyleNode,
        style: TextStyle,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[T],
    ) -> Optional[T]:
        extra = style.extra
        kind = style.type

        if kind is StyleType.STRIKETHROUGH:
            return self.strikethrough(render_to)
        if kind is StyleType.UNDERLINE:
            return self.underline(render_to)
        if kind is StyleType.ITALICS:
            return self.italics(render_to)
        if kind is StyleType.BOLD:
            return self.bold(render_to)
        if kind is StyleType.CODE_STRING or kind is StyleType.CODE_BLOCK:
            result = self.code_string(render_to) if kind is StyleType.CODE_STRING else self.code_block(render_to)
            # Code content is literal, no further markdown handling below it
            if result is not None:
                node.styles.remove(style)
            return result
        if kind is StyleType.QUOTE:
            return self._render_quote(render_to, extra.get("content", ""), options, render_with_children)
        if kind is StyleType.SPOILER:
            content = self._collect(parse_and_render(extra.get("content", ""), None, options, render_with_children))
            return self.append_spoiler(render_to, content)
        if kind is StyleType.MENTION_EMOJI:
            return self.append_emoji_mention(render_to, extra.get("name", ""), extra.get("id", ""))
        if kind is StyleType.MENTION_CHANNEL:
            return self.append_channel_mention(render_to, extra.get("id", ""))
        if kind is StyleType.MENTION_USER:
            return self.append_user_mention(render_to, extra.get("id", ""))
        if kind is StyleType.MENTION_ROLE:
            return self.append_role_mention(render_to, extra.get("id", ""))

        logger.debug("Ignoring unsupported style %s", kind)
        return render_to

    def _render_quote(
        self,
        render_to: T,
        source: str,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[T],
    ) -> Optional[T]:
        content = self._collect(parse_and_render(source, QuoteState(in_quote=True), options, render_with_children))
        # The first line is prefixed by append_quote, later lines here
        content = self._prefix_lines(content, render_to)
        if content is None:
            return None
        return self.append_quote(render_to, content)

    def _prefix_lines(self, node: T, render_to: T) -> Optional[T]:
        children = []
        for child in self.tree.children(node):
            prefixed = self._prefix_lines(child, render_to)
            if prefixed is None:
                return None
            children.append(prefixed)
        node = self.tree.replace_children(node, children)

        text = self.tree.literal_text(node) if self.tree.content_kind(node) is ContentKind.LITERAL else ""
        if "\n" not in text:
            return node

        # Split the literal into lines under an empty node carrying its style
        lines = self.tree.create_empty(style_from=node)
        for index, line in enumerate(text.split("\n")):
            if index:
                prefix = self.quote_prefix(render_to)
                if prefix is None:
                    return None
                lines = self.tree.append(lines, self.tree.create_literal("\n", style_from=node))
                lines = self.tree.append(lines, prefix)
            if line:
                lines = self.tree.append(lines, self.tree.create_literal(line, style_from=node))
        for child in children:
            lines = self.tree.append(lines, child)
        return lines

    def _collect(self, rendered: Sequence[T]) -> T:
        content = self.tree.create_empty()
        for part in rendered:
            content = self.tree.append(content, part)
        return content

    # Hooks

    def text(self, render_to: T, content: str) -> Optional[T]:
        """Render literal text."""
        return self.tree.create_literal(content, style_from=render_to)

    def strikethrough(self, render_to: T) -> Optional[T]:
        """Render ``render_to`` struck through."""
        return None

    def underline(self, render_to: T) -> Optional[T]:
        """Render ``render_to`` underlined."""
        return None

    def italics(self, render_to: T) -> Optional[T]:
        """Render ``render_to`` in italics."""
        return None

    def bold(self, render_to: T) -> Optional[T]:
        """Render ``render_to`` in bold."""
        return None

    def code_string(self, render_to: T) -> Optional[T]:
        """Render ``render_to`` as inline code."""
        return None

    def code_block(self, render_to: T) -> Optional[T]:
        """Render ``render_to`` as a code block."""
        return None

    def append_spoiler(self, render_to: T, content: T) -> Optional[T]:
        """Append a spoiler hiding the already rendered ``content``."""
        return None

    def quote_prefix(self, render_to: T) -> Optional[T]:
        """Create the decoration shown at the start of every quote line."""
        return None

    def append_quote(self, render_to: T, content: T) -> Optional[T]:
        """Append a rendered quote.

        Every line of ``content`` after the first already starts with a
        :meth:`quote_prefix`; the first line does not.
        """
        return None

    def append_emoji_mention(self, render_to: T, name: str, emoji_id: str) -> Optional[T]:
        """Append a custom emoji."""
        return None

    def append_channel_mention(self, render_to: T, channel_id: str) -> Optional[T]:
        """Append a channel mention."""
        return None

    def append_user_mention(self, render_to: T, user_id: str) -> Optional[T]:
        """Append a user mention."""
        return None

    def append_role_mention(self, render_to: T, role_id: str) -> Optional[T]:
        """Append a role mention."""
        return None


class DefaultComponentRenderer(ComponentRenderer[T]):
    """The built-in tree mode renderer.

    - inline formats set the matching style flag
    - inline code and code blocks are colored dark gray
    - each quote line is prefixed with a bold dark gray ``"| "``
    - spoilers are masked with one ``▌`` per hidden character and show the
      hidden content when hovered
    - mentions are kept as text: ``:name:``, ``<#id>``, ``<@id>``, ``<@&id>``

    It never declines a node. Options reject instances of exactly this class,
    since the serializer always appends it to the chain; subclasses may be
    registered.
    """

    def strikethrough(self, render_to: T) -> T:
        return self.tree.apply_format(render_to, TextFormat.STRIKETHROUGH)

    def underline(self, render_to: T) -> T:
        return self.tree.apply_format(render_to, TextFormat.UNDERLINE)

    def italics(self, render_to: T) -> T:
        return self.tree.apply_format(render_to, TextFormat.ITALIC)

    def bold(self, render_to: T) -> T:
        return self.tree.apply_format(render_to, TextFormat.BOLD)

    def code_string(self, render_to: T) -> T:
        return self.tree.apply_color(render_to, CODE_COLOR)

    def code_block(self, render_to: T) -> T:
        return self.tree.apply_color(render_to, CODE_COLOR)

    def append_spoiler(self, render_to: T, content: T) -> T:
        mask = self.tree.create_literal(SPOILER_MASK_CHAR * len(self.tree.plain_text(content)), style_from=render_to)
        mask = self.tree.apply_color(mask, SPOILER_COLOR)
        mask = self.tree.set_hover_text(mask, content)
        return self.tree.append(render_to, mask)

    def quote_prefix(self, render_to: T) -> T:
        prefix = self.tree.create_literal(QUOTE_PREFIX, style_from=render_to)
        prefix = self.tree.apply_format(prefix, TextFormat.BOLD)
        return self.tree.apply_color(prefix, QUOTE_PREFIX_COLOR)

    def append_quote(self, render_to: T, content: T) -> T:
        return self.tree.append(self.tree.append(render_to, self.quote_prefix(render_to)), content)

    def _append_text(self, render_to: T, text: str) -> T:
        return self.tree.append(render_to, self.tree.create_literal(text, style_from=render_to))

    def append_emoji_mention(self, render_to: T, name: str, emoji_id: str) -> T:
        return self._append_text(render_to, f":{name}:")

    def append_channel_mention(self, render_to: T, channel_id: str) -> T:
        return self._append_text(render_to, f"<#{channel_id}>")

    def append_user_mention(self, render_to: T, user_id: str) -> T:
        return self._append_text(render_to, f"<@{user_id}>")

    def append_role_mention(self, render_to: T, role_id: str) -> T:
        return self._append_text(render_to, f"<@&{role_id}>")
