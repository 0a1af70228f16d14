#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/components/preview.py
"""Terminal preview of chat components using Rich."""

from __future__ import annotations

from typing import Optional

from rich.style import Style as RichStyle
from rich.text import Text

from chatmd.components.nodes import Style, TextComponent

# Named chat colors as the game client displays them
NAMED_COLORS = {
    "black": "#000000",
    "dark_blue": "#0000AA",
    "dark_green": "#00AA00",
    "dark_aqua": "#00AAAA",
    "dark_red": "#AA0000",
    "dark_purple": "#AA00AA",
    "gold": "#FFAA00",
    "gray": "#AAAAAA",
    "dark_gray": "#555555",
    "blue": "#5555FF",
    "green": "#55FF55",
    "aqua": "#55FFFF",
    "red": "#FF5555",
    "light_purple": "#FF55FF",
    "yellow": "#FFFF55",
    "white": "#FFFFFF",
}


def _rich_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    if color.startswith("#") and len(color) == 7:
        return color
    return NAMED_COLORS.get(color)


def to_rich_style(style: Style) -> RichStyle:
    """Convert a fully inherited component style to a Rich style."""
    link = None
    if style.click_event is not None and style.click_event.action == "open_url":
        link = style.click_event.value
    return RichStyle(
        bold=bool(style.bold),
        italic=bool(style.italic),
        underline=bool(style.underlined),
        strike=bool(style.strikethrough),
        blink=bool(style.obfuscated),
        color=_rich_color(style.color),
        link=link,
    )


def _append(text: Text, component: TextComponent, inherited: Style) -> None:
    style = component.style.inherit(inherited)
    own = component.own_text()
    if own:
        text.append(own, style=to_rich_style(style))
    for child in component.children:
        _append(text, child, style)


def to_rich_text(component: TextComponent) -> Text:
    """Render a component tree as Rich text with inherited styles resolved.

    Hover tooltips have no terminal equivalent and are dropped.

    Parameters
    ----------
    component : TextComponent
        Root of the tree

    Returns
    -------
    rich.text.Text
        Styled text ready for ``Console.print``

    """
    text = Text()
    _append(text, component, Style())
    return text
