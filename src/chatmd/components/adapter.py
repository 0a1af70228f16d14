#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/components/adapter.py
"""Tree adapter for the built-in chat component model."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from chatmd.components.nodes import (
    HoverEvent,
    KeybindContents,
    LiteralContents,
    ScoreContents,
    SelectorContents,
    Style,
    TextComponent,
    TranslatableContents,
)
from chatmd.tree import ContentKind, StyleFlags, TextFormat, TreeAdapter

_FORMAT_ATTRIBUTES = {
    TextFormat.BOLD: "bold",
    TextFormat.ITALIC: "italic",
    TextFormat.UNDERLINE: "underlined",
    TextFormat.STRIKETHROUGH: "strikethrough",
}


def _copy_style(style_from: Optional[TextComponent]) -> Style:
    return replace(style_from.style) if style_from is not None else Style()


class ComponentTreeAdapter(TreeAdapter[TextComponent]):
    """:class:`TreeAdapter` over :class:`TextComponent` trees."""

    def children(self, node: TextComponent) -> Sequence[TextComponent]:
        return node.children

    def style_flags(self, node: TextComponent) -> StyleFlags:
        style = node.style
        return StyleFlags(
            bold=bool(style.bold),
            italic=bool(style.italic),
            underline=bool(style.underlined),
            strikethrough=bool(style.strikethrough),
        )

    def open_url(self, node: TextComponent) -> Optional[str]:
        click = node.style.click_event
        if click is not None and click.action == "open_url":
            return click.value
        return None

    def content_kind(self, node: TextComponent) -> ContentKind:
        contents = node.contents
        if isinstance(contents, LiteralContents):
            return ContentKind.LITERAL
        if isinstance(contents, KeybindContents):
            return ContentKind.KEYBIND
        if isinstance(contents, TranslatableContents):
            return ContentKind.TRANSLATABLE
        if isinstance(contents, ScoreContents):
            return ContentKind.SCORE
        if isinstance(contents, SelectorContents):
            return ContentKind.SELECTOR
        return ContentKind.OTHER

    def literal_text(self, node: TextComponent) -> str:
        if self.content_kind(node) in (ContentKind.KEYBIND, ContentKind.TRANSLATABLE, ContentKind.OTHER):
            return ""
        return node.own_text()

    def create_empty(self, style_from: Optional[TextComponent] = None) -> TextComponent:
        return TextComponent(style=_copy_style(style_from))

    def create_literal(self, text: str, style_from: Optional[TextComponent] = None) -> TextComponent:
        return TextComponent(contents=LiteralContents(text), style=_copy_style(style_from))

    def append(self, parent: TextComponent, child: TextComponent) -> TextComponent:
        return parent.append(child)

    def replace_children(self, node: TextComponent, children: Sequence[TextComponent]) -> TextComponent:
        node.children[:] = children
        return node

    def apply_format(self, node: TextComponent, text_format: TextFormat) -> TextComponent:
        return node.styled(**{_FORMAT_ATTRIBUTES[text_format]: True})

    def apply_color(self, node: TextComponent, color: str) -> TextComponent:
        return node.styled(color=color)

    def set_hover_text(self, node: TextComponent, hover: TextComponent) -> TextComponent:
        return node.styled(hover_event=HoverEvent("show_text", hover))

    def plain_text(self, node: TextComponent) -> str:
        return node.plain_text()


def keybind_name(component: TextComponent) -> str:
    """Return the keybind identifier of a keybind component, e.g. ``"key.jump"``."""
    contents = component.contents
    return contents.keybind if isinstance(contents, KeybindContents) else ""


def translation_fallback(component: TextComponent) -> str:
    """Return the fallback text of a translatable component, else its key."""
    contents = component.contents
    if not isinstance(contents, TranslatableContents):
        return ""
    return contents.fallback if contents.fallback is not None else contents.key
