#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed Discord markdown.

- nodes: generic node classes produced by the parser
- transforms: normalization passes run before rendering

Examples
--------
    >>> from chatmd.ast import StyleNode, StyleType, TextNode
    >>> node = StyleNode.of(StyleType.BOLD)
    >>> node.add_child(TextNode(content="hi"))

"""

from __future__ import annotations

from chatmd.ast.nodes import Node, StyleNode, StyleType, TextNode, TextStyle
from chatmd.ast.transforms import flatten_text_nodes

__all__ = [
    "Node",
    "StyleNode",
    "StyleType",
    "TextNode",
    "TextStyle",
    "flatten_text_nodes",
]
