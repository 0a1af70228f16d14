#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/renderers/__init__.py
"""Renderers turning the markdown AST into components or escaped text.

- base: the ``NodeRenderer`` interface shared by both output modes
- components: tree mode renderers built on a ``TreeAdapter``
- escaping: the escape mode renderer

"""

from chatmd.renderers.base import NodeRenderer, RenderWithChildren, parse_and_render
from chatmd.renderers.components import ComponentRenderer, DefaultComponentRenderer
from chatmd.renderers.escaping import DefaultEscapingRenderer

__all__ = [
    "ComponentRenderer",
    "DefaultComponentRenderer",
    "DefaultEscapingRenderer",
    "NodeRenderer",
    "RenderWithChildren",
    "parse_and_render",
]
