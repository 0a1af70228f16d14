#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/ast/nodes.py
"""AST node classes for parsed Discord markdown.

The rule-based parser produces a tree of generic nodes which the renderer
chain turns into chat components or escaped text.

Node Kinds
----------
- TextNode: a literal run of text
- StyleNode: an ordered list of TextStyle tags plus child nodes
- Node: any other node kind; grammar extensions subclass it and the
  renderers receive such nodes unchanged

QUOTE and SPOILER tags do not hold children. Their raw inner source is kept
in ``extra["content"]`` and re-parsed by the renderer.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class StyleType(Enum):
    """Formatting directives a StyleNode can carry."""

    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"
    ITALICS = "italics"
    BOLD = "bold"
    CODE_STRING = "code_string"
    CODE_BLOCK = "code_block"
    QUOTE = "quote"
    SPOILER = "spoiler"
    MENTION_EMOJI = "mention_emoji"
    MENTION_CHANNEL = "mention_channel"
    MENTION_USER = "mention_user"
    MENTION_ROLE = "mention_role"


@dataclass
class TextStyle:
    """A single style tag with auxiliary string data.

    Parameters
    ----------
    type : StyleType
        Kind of the tag
    extra : dict of str to str, default = empty dict
        Tag payload, e.g. ``{"id": "1234"}`` for mentions or
        ``{"content": "raw source"}`` for quotes and spoilers

    """

    type: StyleType
    extra: dict[str, str] = field(default_factory=dict)


@dataclass
class Node:
    """Base class for AST nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Ordered child nodes

    """

    children: list[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> None:
        """Append a child node."""
        self.children.append(child)


@dataclass
class TextNode(Node):
    """Literal text.

    Parameters
    ----------
    content : str
        The text, with markdown escapes already resolved

    """

    content: str = ""


@dataclass
class StyleNode(Node):
    """Node applying one or more style tags to its children.

    Parameters
    ----------
    styles : list of TextStyle, default = empty list
        Ordered style tags

    """

    styles: list[TextStyle] = field(default_factory=list)

    @classmethod
    def of(cls, style_type: StyleType, **extra: str) -> StyleNode:
        """Create a node carrying a single style tag."""
        return cls(styles=[TextStyle(style_type, dict(extra))])
