#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST normalization passes."""
import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from chatmd.ast import Node, StyleNode, StyleType, TextNode, TextStyle, flatten_text_nodes


def _bold(*children: Node) -> StyleNode:
    return StyleNode(children=list(children), styles=[TextStyle(StyleType.BOLD)])


def _text_of(nodes: list[Node]) -> str:
    parts = []
    for node in nodes:
        if isinstance(node, TextNode):
            parts.append(node.content)
        parts.append(_text_of(node.children))
    return "".join(parts)


_text_nodes = st.builds(TextNode, content=st.text(alphabet="ab *", max_size=3))
_trees = st.recursive(
    _text_nodes,
    lambda children: st.lists(children, max_size=3).map(lambda c: _bold(*c)),
    max_leaves=12,
)


@pytest.mark.unit
class TestFlattenTextNodes:
    """Test merging of adjacent text nodes."""

    def test_merges_adjacent_text(self) -> None:
        """Test sibling text nodes become one."""
        result = flatten_text_nodes([TextNode(content="a"), TextNode(content="!"), TextNode(content="b")])

        assert result == [TextNode(content="a!b")]

    def test_style_node_breaks_merge(self) -> None:
        """Test a style node between text nodes keeps them apart."""
        bold = _bold(TextNode(content="x"))
        result = flatten_text_nodes([TextNode(content="a"), bold, TextNode(content="b")])

        assert len(result) == 3
        assert result[1] is bold

    def test_childless_style_node_breaks_merge(self) -> None:
        """Test a mention-like node without children also ends a merge."""
        mention = StyleNode.of(StyleType.MENTION_USER, id="1")
        result = flatten_text_nodes([TextNode(content="a"), mention, TextNode(content="b")])

        assert [type(node) for node in result] == [TextNode, StyleNode, TextNode]

    def test_children_flattened_in_place(self) -> None:
        """Test nested children lists are rewritten on the same node."""
        bold = _bold(TextNode(content="x"), TextNode(content="y"))
        children = bold.children

        flatten_text_nodes([bold])

        assert bold.children is children
        assert children == [TextNode(content="xy")]

    def test_empty_list(self) -> None:
        """Test flattening nothing returns nothing."""
        assert flatten_text_nodes([]) == []

    @given(st.lists(_trees, max_size=5))
    def test_flattening_is_idempotent(self, nodes: list[Node]) -> None:
        """Test flattening twice yields the same tree as flattening once."""
        once = flatten_text_nodes(copy.deepcopy(nodes))
        twice = flatten_text_nodes(flatten_text_nodes(copy.deepcopy(nodes)))

        assert once == twice

    @given(st.lists(_trees, max_size=5))
    def test_text_and_order_preserved(self, nodes: list[Node]) -> None:
        """Test the concatenated text of the tree is unchanged."""
        expected = _text_of(nodes)

        assert _text_of(flatten_text_nodes(copy.deepcopy(nodes))) == expected

    @given(st.lists(_trees, max_size=5))
    def test_no_adjacent_text_nodes(self, nodes: list[Node]) -> None:
        """Test no level of the result has two text nodes side by side."""

        def check(level: list[Node]) -> None:
            for left, right in zip(level, level[1:]):
                assert not (isinstance(left, TextNode) and isinstance(right, TextNode))
            for node in level:
                check(node.children)

        check(flatten_text_nodes(copy.deepcopy(nodes)))
