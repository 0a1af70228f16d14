#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/components/serialization.py
"""JSON serialization and deserialization for chat components.

The format is the Minecraft JSON text format:

- ``"text"``, ``"translate"`` (+ ``"with"``, ``"fallback"``), ``"keybind"``,
  ``"score"``, ``"selector"`` or ``"nbt"`` select the contents
- ``"bold"``, ``"italic"``, ``"underlined"``, ``"strikethrough"``,
  ``"obfuscated"`` and ``"color"`` set the style
- ``"clickEvent"`` and ``"hoverEvent"`` carry interaction events
- ``"extra"`` lists the children

On input a bare string is a text component and an array is a component
whose first element is the parent of the remaining ones.

Examples
--------
    >>> component = component_from_json('{"text": "hi", "bold": true}')
    >>> component_to_json(component)
    '{"text": "hi", "bold": true}'

"""

from __future__ import annotations

import json
from typing import Any

from chatmd.components.nodes import (
    ClickEvent,
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
from chatmd.constants import DEFAULT_MAX_NESTING_DEPTH
from chatmd.exceptions import NestingDepthError, ParsingError

_FLAG_KEYS = ("bold", "italic", "underlined", "strikethrough", "obfuscated")


def component_to_dict(component: TextComponent) -> dict[str, Any]:
    """Convert a component tree to its JSON-compatible dictionary.

    Parameters
    ----------
    component : TextComponent
        Component to convert

    Returns
    -------
    dict
        Dictionary in the Minecraft JSON text format

    """
    result: dict[str, Any] = {}
    contents = component.contents
    if isinstance(contents, LiteralContents):
        result["text"] = contents.text
    elif isinstance(contents, TranslatableContents):
        result["translate"] = contents.key
        if contents.args:
            result["with"] = [component_to_dict(arg) for arg in contents.args]
        if contents.fallback is not None:
            result["fallback"] = contents.fallback
    elif isinstance(contents, KeybindContents):
        result["keybind"] = contents.keybind
    elif isinstance(contents, ScoreContents):
        result["score"] = {"name": contents.name, "objective": contents.objective}
    elif isinstance(contents, SelectorContents):
        result["selector"] = contents.pattern
    elif isinstance(contents, NbtContents):
        result["nbt"] = contents.path

    style = component.style
    for key in _FLAG_KEYS:
        value = getattr(style, key)
        if value is not None:
            result[key] = value
    if style.color is not None:
        result["color"] = style.color
    if style.click_event is not None:
        result["clickEvent"] = {"action": style.click_event.action, "value": style.click_event.value}
    if style.hover_event is not None:
        result["hoverEvent"] = {
            "action": style.hover_event.action,
            "contents": component_to_dict(style.hover_event.contents),
        }

    if component.children:
        result["extra"] = [component_to_dict(child) for child in component.children]
    return result


def _contents_from_dict(data: dict[str, Any], depth: int, max_depth: int) -> Any:
    if "text" in data:
        return LiteralContents(str(data["text"]))
    if "translate" in data:
        args = [_component_from_dict(arg, depth + 1, max_depth) for arg in data.get("with", [])]
        return TranslatableContents(str(data["translate"]), args, data.get("fallback"))
    if "keybind" in data:
        return KeybindContents(str(data["keybind"]))
    if "score" in data:
        score = data["score"]
        if not isinstance(score, dict):
            raise ParsingError(f"'score' must be an object, got {type(score).__name__}")
        return ScoreContents(str(score.get("name", "")), str(score.get("objective", "")))
    if "selector" in data:
        return SelectorContents(str(data["selector"]))
    if "nbt" in data:
        return NbtContents(str(data["nbt"]))
    return LiteralContents("")


def _style_from_dict(data: dict[str, Any], depth: int, max_depth: int) -> Style:
    style = Style(**{key: bool(data[key]) for key in _FLAG_KEYS if key in data})
    style.color = data.get("color")

    click = data.get("clickEvent")
    if isinstance(click, dict) and "action" in click:
        style.click_event = ClickEvent(click["action"], str(click.get("value", "")))

    hover = data.get("hoverEvent")
    if isinstance(hover, dict) and "action" in hover:
        # "value" is the pre-1.16 name of "contents"
        raw = hover.get("contents", hover.get("value", ""))
        style.hover_event = HoverEvent(hover["action"], _component_from_dict(raw, depth + 1, max_depth))
    return style


def _component_from_dict(data: Any, depth: int, max_depth: int) -> TextComponent:
    if depth > max_depth:
        raise NestingDepthError(depth, max_depth)
    if isinstance(data, str):
        return TextComponent.literal(data)
    if isinstance(data, list):
        if not data:
            raise ParsingError("A component array must not be empty")
        # The first element is the parent, the rest become its children
        parent = _component_from_dict(data[0], depth + 1, max_depth)
        for item in data[1:]:
            parent.append(_component_from_dict(item, depth + 1, max_depth))
        return parent
    if not isinstance(data, dict):
        raise ParsingError(f"Invalid component: expected object, array or string, got {type(data).__name__}")

    component = TextComponent(
        contents=_contents_from_dict(data, depth, max_depth),
        style=_style_from_dict(data, depth, max_depth),
    )
    extra = data.get("extra", [])
    if not isinstance(extra, list):
        raise ParsingError(f"'extra' must be an array, got {type(extra).__name__}")
    for child in extra:
        component.append(_component_from_dict(child, depth + 1, max_depth))
    return component


def component_from_dict(data: Any, max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> TextComponent:
    """Build a component tree from JSON-compatible data.

    Array elements, children, translation arguments and hover contents each
    count one level below the value holding them.

    Parameters
    ----------
    data : dict, list or str
        Component data in the Minecraft JSON text format
    max_depth : int, default DEFAULT_MAX_NESTING_DEPTH
        Deepest nesting accepted, the top-level component being depth 1

    Returns
    -------
    TextComponent
        The decoded component tree

    Raises
    ------
    ParsingError
        If the data is not a valid component
    NestingDepthError
        If the data is nested deeper than ``max_depth``

    """
    return _component_from_dict(data, 1, max_depth)


def component_to_json(component: TextComponent, indent: int | None = None) -> str:
    """Serialize a component tree to a JSON string.

    Parameters
    ----------
    component : TextComponent
        Component to serialize
    indent : int or None, default = None
        JSON indentation

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(component_to_dict(component), indent=indent, ensure_ascii=False)


def component_from_json(json_str: str, max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> TextComponent:
    """Deserialize a component tree from a JSON string.

    Raises
    ------
    ParsingError
        If the text is not valid JSON, is nested too deeply for the JSON
        decoder, or is not a valid component
    NestingDepthError
        If the component is nested deeper than ``max_depth``

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid component JSON: {e}", source=json_str, position=e.pos, original_error=e) from e
    except RecursionError as e:
        raise ParsingError("Invalid component JSON: nested too deeply to decode", original_error=e) from e
    return component_from_dict(data, max_depth)
