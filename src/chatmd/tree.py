#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/tree.py
"""Capability interface over a styled text tree.

The serializers never touch a concrete component class. They read and build
trees through a :class:`TreeAdapter`, so chatmd can target any host text
component type by providing one adapter for it.
:class:`chatmd.components.adapter.ComponentTreeAdapter` is the adapter for
the built-in :class:`~chatmd.components.nodes.TextComponent`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, NamedTuple, Optional, Sequence, TypeVar

T = TypeVar("T")


class StyleFlags(NamedTuple):
    """The four style flags that survive in Discord markdown."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False


class ContentKind(Enum):
    """How the text of a tree node is resolved."""

    LITERAL = "literal"
    KEYBIND = "keybind"
    TRANSLATABLE = "translatable"
    SCORE = "score"
    SELECTOR = "selector"
    OTHER = "other"


class TextFormat(Enum):
    """Inline formats applied while building a tree."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"


class TreeAdapter(ABC, Generic[T]):
    """Read and build operations on a styled text tree of node type ``T``.

    Write operations may mutate the node they receive; those returning a node
    return the one to keep using.
    """

    # Read side

    @abstractmethod
    def children(self, node: T) -> Sequence[T]:
        """Return the ordered children of ``node``."""

    @abstractmethod
    def style_flags(self, node: T) -> StyleFlags:
        """Return the flags set on ``node`` itself, ignoring ancestors."""

    @abstractmethod
    def open_url(self, node: T) -> Optional[str]:
        """Return the URL opened when ``node`` is clicked, if any."""

    @abstractmethod
    def content_kind(self, node: T) -> ContentKind:
        """Return how the text of ``node`` is resolved."""

    @abstractmethod
    def literal_text(self, node: T) -> str:
        """Return the text embedded in ``node``.

        For score nodes this is the objective, for selector nodes the
        pattern; other non-literal kinds return an empty string.
        """

    # Write side

    @abstractmethod
    def create_empty(self, style_from: Optional[T] = None) -> T:
        """Create an empty node, copying the style of ``style_from`` if given."""

    @abstractmethod
    def create_literal(self, text: str, style_from: Optional[T] = None) -> T:
        """Create a text node, copying the style of ``style_from`` if given."""

    @abstractmethod
    def append(self, parent: T, child: T) -> T:
        """Append ``child`` to ``parent`` and return ``parent``."""

    @abstractmethod
    def replace_children(self, node: T, children: Sequence[T]) -> T:
        """Make ``children`` the children of ``node``, in order, and return ``node``."""

    @abstractmethod
    def apply_format(self, node: T, text_format: TextFormat) -> T:
        """Turn ``text_format`` on for ``node``."""

    @abstractmethod
    def apply_color(self, node: T, color: str) -> T:
        """Set the color of ``node``."""

    @abstractmethod
    def set_hover_text(self, node: T, hover: T) -> T:
        """Show ``hover`` as a tooltip when ``node`` is hovered."""

    @abstractmethod
    def plain_text(self, node: T) -> str:
        """Return the visible text of ``node`` and its descendants."""
