"""The major exported API functions for chat message transcoding."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/chatmd/api.py
from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Callable, Optional, TypeVar, Union

from chatmd.components.nodes import TextComponent
from chatmd.components.serialization import component_from_dict, component_from_json
from chatmd.exceptions import ValidationError
from chatmd.options.base import BaseSerializerOptions
from chatmd.options.components import ComponentSerializerOptions
from chatmd.options.markdown import MarkdownSerializerOptions
from chatmd.serializers.components import ComponentSerializer
from chatmd.serializers.markdown import MarkdownSerializer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=BaseSerializerOptions)

ComponentSource = Union[TextComponent, str, dict, list]


def _resolve_options(options: Optional[OptionsT], factory: Callable[[], OptionsT], **kwargs: Any) -> OptionsT:
    """Apply keyword overrides to ``options`` or to fresh defaults.

    Raises
    ------
    ValidationError
        If a keyword is not a field of the options class

    """
    resolved = options if options is not None else factory()
    if not kwargs:
        return resolved

    known = {f.name for f in fields(resolved)}
    for name, value in kwargs.items():
        if name not in known:
            raise ValidationError(
                f"Unknown option '{name}' for {type(resolved).__name__}",
                parameter_name=name,
                parameter_value=value,
            )
    logger.debug("Overriding options: %s", sorted(kwargs))
    return resolved.create_updated(**kwargs)


def _resolve_component(component: ComponentSource, max_depth: int) -> TextComponent:
    if isinstance(component, TextComponent):
        return component
    if isinstance(component, str):
        return component_from_json(component, max_depth)
    return component_from_dict(component, max_depth)


def to_markdown(
    component: ComponentSource,
    options: Optional[MarkdownSerializerOptions] = None,
    **kwargs: Any,
) -> str:
    """Serialize a chat component to Discord markdown.

    Parameters
    ----------
    component : TextComponent, str, dict or list
        The component, or its JSON text format as a string or decoded data
    options : MarkdownSerializerOptions or None, default None
        Serialization options, defaults when None
    **kwargs
        Individual option overrides, e.g. ``embed_links=True``

    Returns
    -------
    str
        Discord markdown

    Raises
    ------
    ParsingError
        If component JSON is malformed
    ValidationError
        If an override names an unknown option
    ProviderMissingError
        If a keybind or translatable component has no provider
    NestingDepthError
        If the component tree or its JSON is nested deeper than
        ``max_depth``

    Examples
    --------
        >>> to_markdown('{"text": "Hi", "bold": true}')
        '**Hi**'

    """
    resolved = _resolve_options(options, MarkdownSerializerOptions.defaults, **kwargs)
    return MarkdownSerializer().serialize(_resolve_component(component, resolved.max_depth), resolved)


def from_markdown(
    message: str,
    options: Optional[ComponentSerializerOptions] = None,
    **kwargs: Any,
) -> TextComponent:
    """Render a Discord markdown message into a chat component.

    Parameters
    ----------
    message : str
        Discord markdown
    options : ComponentSerializerOptions or None, default None
        Serialization options, defaults when None
    **kwargs
        Individual option overrides, e.g. ``debugging_enabled=True``

    Returns
    -------
    TextComponent
        Empty root component holding the rendered message

    Examples
    --------
        >>> from_markdown("**bold** text").plain_text()
        'bold text'

    """
    resolved = _resolve_options(options, ComponentSerializerOptions.defaults, **kwargs)
    return ComponentSerializer().serialize(message, resolved)


def escape_markdown(
    message: str,
    options: Optional[ComponentSerializerOptions] = None,
    **kwargs: Any,
) -> str:
    r"""Escape the markdown of a whole Discord message.

    Parameters
    ----------
    message : str
        Discord markdown
    options : ComponentSerializerOptions or None, default None
        Escaping options, ``ComponentSerializerOptions.escape_defaults()`` when None
    **kwargs
        Individual option overrides

    Returns
    -------
    str
        The message with every markdown construct backslash-escaped

    Examples
    --------
        >>> escape_markdown("**hi**")
        '\\*\\*hi\\*\\*'

    """
    resolved = _resolve_options(options, ComponentSerializerOptions.escape_defaults, **kwargs)
    return ComponentSerializer().escape_markdown(message, resolved)
