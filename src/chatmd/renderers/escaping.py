#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/renderers/escaping.py
"""Renderer re-emitting a parsed message with its markdown escaped.

Escape mode renders into strings. Every marker the parser recognized is
written back backslash-escaped, so Discord displays the message exactly as
it was typed instead of formatting it.

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional

from chatmd.ast.nodes import Node, StyleNode, StyleType, TextNode, TextStyle
from chatmd.parsers.discord import QuoteState, is_multiline_quote
from chatmd.renderers.base import NodeRenderer, RenderWithChildren, parse_and_render
from chatmd.utils.escape import escape_discord_markdown

if TYPE_CHECKING:
    from chatmd.options.components import ComponentSerializerOptions

_LINE_START_QUOTE = re.compile(r"^>", re.MULTILINE)

_SYMMETRIC_MARKERS = {
    StyleType.BOLD: r"\*\*",
    StyleType.UNDERLINE: r"\_\_",
    StyleType.STRIKETHROUGH: r"\~\~",
}


def _escape_text(text: str) -> str:
    return _LINE_START_QUOTE.sub(r"\\>", escape_discord_markdown(text))


def _escaped_marker(style: TextStyle) -> str:
    if style.type in _SYMMETRIC_MARKERS:
        return _SYMMETRIC_MARKERS[style.type]
    if style.type is StyleType.ITALICS:
        return "\\" + style.extra.get("marker", "_")
    if style.type is StyleType.CODE_STRING:
        return r"\`" * len(style.extra.get("marker", "`"))
    if style.type is StyleType.CODE_BLOCK:
        return style.extra.get("trailing_newline", "") + r"\`\`\`"
    return ""


class DefaultEscapingRenderer(NodeRenderer[str]):
    """The built-in escape mode renderer.

    Formatting markers are emitted around the children, escaped. Quotes and
    spoilers re-render their raw content. Mentions are kept verbatim since
    they contain no markdown.
    """

    def render(
        self,
        render_to: str,
        node: Node,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[str],
    ) -> Optional[str]:
        if isinstance(node, TextNode):
            return render_to + _escape_text(node.content)
        if not isinstance(node, StyleNode):
            return render_to

        for style in node.styles:
            render_to += self._opening(style, options, render_with_children)
        return render_to

    def render_after_children(
        self,
        render_to: str,
        node: Node,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[str],
    ) -> Optional[str]:
        if not isinstance(node, StyleNode):
            return None
        closing = "".join(_escaped_marker(style) for style in reversed(node.styles))
        return render_to + closing if closing else None

    def _opening(
        self,
        style: TextStyle,
        options: ComponentSerializerOptions,
        render_with_children: RenderWithChildren[str],
    ) -> str:
        extra = style.extra
        kind = style.type

        if kind is StyleType.CODE_BLOCK:
            language = extra.get("language", "")
            return r"\`\`\`" + language + extra.get("leading_newline", "")
        if kind is StyleType.SPOILER:
            content = "".join(parse_and_render(extra.get("content", ""), None, options, render_with_children))
            return rf"\|\|{content}\|\|"
        if kind is StyleType.QUOTE:
            marker = r"\>>> " if is_multiline_quote(extra) else r"\> "
            state = QuoteState(in_quote=True)
            return marker + "".join(parse_and_render(extra.get("content", ""), state, options, render_with_children))
        if kind is StyleType.MENTION_EMOJI:
            animated = "a" if extra.get("animated") == "true" else ""
            return f"<{animated}:{extra.get('name', '')}:{extra.get('id', '')}>"
        if kind is StyleType.MENTION_CHANNEL:
            return f"<#{extra.get('id', '')}>"
        if kind is StyleType.MENTION_USER:
            return f"<@{extra.get('id', '')}>"
        if kind is StyleType.MENTION_ROLE:
            return f"<@&{extra.get('id', '')}>"
        return _escaped_marker(style)
