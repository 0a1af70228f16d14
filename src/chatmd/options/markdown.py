#  Copyright (c) 2025 Tom Villani, Ph.D.

# chatmd/options/markdown.py
"""Configuration options for component-to-markdown serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from chatmd.components.adapter import keybind_name, translation_fallback
from chatmd.options.base import BaseSerializerOptions

TextProvider = Callable[[Any], str]


@dataclass(frozen=True)
class MarkdownSerializerOptions(BaseSerializerOptions):
    """Configuration options for serializing a component tree to Discord markdown.

    Parameters
    ----------
    embed_links : bool, default False
        Wrap the text of components that open a URL as ``[text](url)``
    escape_markdown : bool, default True
        Backslash-escape ``* ~ _ ` |`` in component text
    keybind_provider : callable or None, default keybind_name
        Resolves the displayed text of keybind components. ``None`` makes
        serializing a keybind component fail with ProviderMissingError.
    translation_provider : callable or None, default translation_fallback
        Resolves the displayed text of translatable components. ``None``
        makes serializing a translatable component fail with
        ProviderMissingError.
    strip_legacy_formatting : bool, default True
        Remove ``§``-prefixed formatting codes from component text
    max_depth : int, default 64
        Maximum component tree depth

    Examples
    --------
        >>> options = MarkdownSerializerOptions.defaults().with_embed_links(True)
        >>> options = options.with_translation_provider(lambda c: translations[c.contents.key])

    """

    embed_links: bool = field(
        default=False,
        metadata={"help": "Render components that open a URL as markdown links", "importance": "core"},
    )
    escape_markdown: bool = field(
        default=True,
        metadata={"help": "Escape markdown special characters in component text", "importance": "core"},
    )
    keybind_provider: Optional[TextProvider] = field(
        default=keybind_name,
        metadata={"help": "Function resolving the text of keybind components", "importance": "advanced"},
    )
    translation_provider: Optional[TextProvider] = field(
        default=translation_fallback,
        metadata={"help": "Function resolving the text of translatable components", "importance": "advanced"},
    )
    strip_legacy_formatting: bool = field(
        default=True,
        metadata={"help": "Strip legacy section-sign formatting codes from text", "importance": "advanced"},
    )

    @classmethod
    def defaults(cls) -> MarkdownSerializerOptions:
        """Create options with every field at its default."""
        return cls()

    def with_embed_links(self, embed_links: bool) -> MarkdownSerializerOptions:
        """Return options with link embedding turned on or off."""
        return self._with("embed_links", embed_links)

    def with_escape_markdown(self, escape_markdown: bool) -> MarkdownSerializerOptions:
        """Return options with markdown escaping turned on or off."""
        return self._with("escape_markdown", escape_markdown)

    def with_keybind_provider(self, provider: Optional[TextProvider]) -> MarkdownSerializerOptions:
        """Return options with a different keybind text provider."""
        return self._with("keybind_provider", provider)

    def with_translation_provider(self, provider: Optional[TextProvider]) -> MarkdownSerializerOptions:
        """Return options with a different translation text provider."""
        return self._with("translation_provider", provider)

    def with_strip_legacy_formatting(self, strip: bool) -> MarkdownSerializerOptions:
        """Return options with legacy code stripping turned on or off."""
        return self._with("strip_legacy_formatting", strip)
