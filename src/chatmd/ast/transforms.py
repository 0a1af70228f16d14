#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/ast/transforms.py
"""AST normalization passes applied between parsing and rendering."""

from __future__ import annotations

from chatmd.ast.nodes import Node, TextNode


def flatten_text_nodes(nodes: list[Node]) -> list[Node]:
    """Merge adjacent sibling text nodes at every level of the tree.

    The parser emits one text node per special-character boundary. Merging
    them keeps rendering cheap and avoids spurious style runs. Any non-text
    node ends a merge; nodes with children have their children flattened in
    place and are never merged with their siblings.

    Parameters
    ----------
    nodes : list of Node
        Sibling nodes in source order

    Returns
    -------
    list of Node
        New sibling list, relative order preserved

    Examples
    --------
        >>> flatten_text_nodes([TextNode(content="a"), TextNode(content="!")])
        [TextNode(children=[], content='a!')]

    """
    flattened: list[Node] = []
    pending: TextNode | None = None

    for node in nodes:
        if node.children:
            if pending is not None:
                flattened.append(pending)
                pending = None
            node.children[:] = flatten_text_nodes(node.children)
            flattened.append(node)
        elif not isinstance(node, TextNode):
            if pending is not None:
                flattened.append(pending)
                pending = None
            flattened.append(node)
        elif pending is None:
            pending = node
        else:
            pending = TextNode(content=pending.content + node.content)

    if pending is not None:
        flattened.append(pending)
    return flattened
