#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/components/__init__.py
"""Built-in chat component model.

- nodes: ``TextComponent`` and its contents, style and events
- serialization: the Minecraft JSON text format
- adapter: the ``TreeAdapter`` used by the serializers
- preview: Rich rendering for terminals

"""

from chatmd.components.adapter import ComponentTreeAdapter
from chatmd.components.nodes import (
    ClickEvent,
    Contents,
    HoverEvent,
    KeybindContents,
    LiteralContents,
    NbtContents,
    ScoreContents,
    SelectorContents,
    Style,
    TextComponent,
    TranslatableContents,
)
from chatmd.components.serialization import (
    component_from_dict,
    component_from_json,
    component_to_dict,
    component_to_json,
)

__all__ = [
    "ClickEvent",
    "ComponentTreeAdapter",
    "Contents",
    "HoverEvent",
    "KeybindContents",
    "LiteralContents",
    "NbtContents",
    "ScoreContents",
    "SelectorContents",
    "Style",
    "TextComponent",
    "TranslatableContents",
    "component_from_dict",
    "component_from_json",
    "component_to_dict",
    "component_to_json",
]
