#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/components/nodes.py
"""Chat component classes.

This module models the JSON text components used by Minecraft chat: a tree
of components, each with one kind of contents, an optional style and
ordered children (``extra`` in the JSON format).

Style flags are tri-state. ``None`` means "inherit from the parent" when the
component is displayed; ``True``/``False`` are set explicitly on the node.

Contents Kinds
--------------
- LiteralContents: plain text
- TranslatableContents: a translation key with arguments and fallback text
- KeybindContents: the key currently bound to a control
- ScoreContents: a scoreboard value
- SelectorContents: an entity selector resolved by the game
- NbtContents: an NBT path; it has no textual content outside the game

"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Optional, Union

from chatmd.constants import ClickAction, HoverAction


@dataclass
class LiteralContents:
    """Plain text contents."""

    text: str = ""


@dataclass
class TranslatableContents:
    """Translation key contents.

    Parameters
    ----------
    key : str
        Translation key, e.g. ``"chat.type.text"``
    args : list of TextComponent, default = empty list
        Arguments substituted into the translation
    fallback : str or None, default = None
        Text shown when the key is unknown to the client

    """

    key: str
    args: list[TextComponent] = field(default_factory=list)
    fallback: Optional[str] = None


@dataclass
class KeybindContents:
    """Keybind contents, e.g. ``"key.jump"``."""

    keybind: str


@dataclass
class ScoreContents:
    """Scoreboard contents."""

    name: str
    objective: str


@dataclass
class SelectorContents:
    """Entity selector contents, e.g. ``"@p"``."""

    pattern: str


@dataclass
class NbtContents:
    """NBT path contents."""

    path: str


Contents = Union[
    LiteralContents, TranslatableContents, KeybindContents, ScoreContents, SelectorContents, NbtContents
]


@dataclass
class ClickEvent:
    """Action performed when the component is clicked."""

    action: ClickAction
    value: str


@dataclass
class HoverEvent:
    """Tooltip shown when the component is hovered.

    Only ``show_text`` events carry a component; other actions are kept for
    round-tripping but never produced by chatmd.
    """

    action: HoverAction
    contents: TextComponent


@dataclass
class Style:
    """Visual style of a component.

    Parameters
    ----------
    bold, italic, underlined, strikethrough, obfuscated : bool or None
        Formatting flags, ``None`` to inherit
    color : str or None
        Color name (``"dark_gray"``) or ``#RRGGBB``
    click_event : ClickEvent or None
        Click action
    hover_event : HoverEvent or None
        Hover tooltip

    """

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underlined: Optional[bool] = None
    strikethrough: Optional[bool] = None
    obfuscated: Optional[bool] = None
    color: Optional[str] = None
    click_event: Optional[ClickEvent] = None
    hover_event: Optional[HoverEvent] = None

    def is_empty(self) -> bool:
        """Return True when no attribute is set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def inherit(self, parent: Style) -> Style:
        """Return this style with unset attributes taken from ``parent``."""
        changes = {f.name: getattr(parent, f.name) for f in fields(self) if getattr(self, f.name) is None}
        return replace(self, **changes)


@dataclass
class TextComponent:
    """A chat component.

    Parameters
    ----------
    contents : Contents, default = empty LiteralContents
        What the component displays
    style : Style, default = empty Style
        Visual style
    children : list of TextComponent, default = empty list
        Components displayed after this one, inheriting its style

    Examples
    --------
        >>> greeting = TextComponent.literal("Hello ", bold=True)
        >>> greeting.append(TextComponent.literal("world"))
        >>> greeting.plain_text()
        'Hello world'

    """

    contents: Contents = field(default_factory=LiteralContents)
    style: Style = field(default_factory=Style)
    children: list[TextComponent] = field(default_factory=list)

    @classmethod
    def empty(cls) -> TextComponent:
        """Create a component with empty text and no style."""
        return cls()

    @classmethod
    def literal(cls, text: str, **style: object) -> TextComponent:
        """Create a text component, with optional ``Style`` keyword arguments."""
        return cls(contents=LiteralContents(text), style=Style(**style))  # type: ignore[arg-type]

    @classmethod
    def translatable(cls, key: str, *args: TextComponent, fallback: Optional[str] = None) -> TextComponent:
        """Create a translatable component."""
        return cls(contents=TranslatableContents(key, list(args), fallback))

    @classmethod
    def keybind(cls, keybind: str) -> TextComponent:
        """Create a keybind component."""
        return cls(contents=KeybindContents(keybind))

    def append(self, child: TextComponent) -> TextComponent:
        """Append a child and return this component."""
        self.children.append(child)
        return self

    def styled(self, **changes: object) -> TextComponent:
        """Update style attributes in place and return this component."""
        self.style = replace(self.style, **changes)  # type: ignore[arg-type]
        return self

    def own_text(self) -> str:
        """Return the text displayed by this component alone, without children."""
        contents = self.contents
        if isinstance(contents, LiteralContents):
            return contents.text
        if isinstance(contents, TranslatableContents):
            return contents.fallback if contents.fallback is not None else contents.key
        if isinstance(contents, KeybindContents):
            return contents.keybind
        if isinstance(contents, ScoreContents):
            return contents.objective
        if isinstance(contents, SelectorContents):
            return contents.pattern
        return ""

    def plain_text(self) -> str:
        """Return the unstyled text of this component and all descendants."""
        return self.own_text() + "".join(child.plain_text() for child in self.children)
