#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/serializers/markdown.py
"""Serialize styled component trees to Discord markdown.

The tree is walked depth-first in pre-order. Every node contributes one
:class:`~chatmd.serializers.runs.StyleRun` built from its own style flags;
flags are not inherited from ancestors. Runs without content are dropped, and
a run whose flags equal those of the previous kept run is merged into it.
Each run is then wrapped in its markers and the runs are joined with a zero
width space, which keeps Discord from merging the markers of neighbouring
runs.

Examples
--------
    >>> tree = TextComponent.literal("Hi", bold=True).append(TextComponent.literal("there", italic=True))
    >>> MarkdownSerializer().serialize(tree)
    '**Hi**\\u200b_there_'

"""

from __future__ import annotations

import logging
from typing import Any, Generic, Optional, TypeVar

from chatmd.components.adapter import ComponentTreeAdapter
from chatmd.constants import ZERO_WIDTH_SPACE
from chatmd.exceptions import NestingDepthError, ProviderMissingError
from chatmd.options.markdown import MarkdownSerializerOptions
from chatmd.serializers.runs import StyleRun
from chatmd.tree import ContentKind, TreeAdapter
from chatmd.utils.escape import escape_discord_markdown, strip_legacy_formatting

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MarkdownSerializer(Generic[T]):
    """Serializer from component trees to Discord markdown.

    Node text is escaped before a click link is wrapped around it as
    ``[text](url)``, so the URL itself is never escaped.

    Parameters
    ----------
    tree : TreeAdapter or None, default None
        Adapter for the tree type, ComponentTreeAdapter when None
    options : MarkdownSerializerOptions or None, default None
        Default options for :meth:`serialize`

    """

    def __init__(
        self,
        tree: Optional[TreeAdapter[T]] = None,
        options: Optional[MarkdownSerializerOptions] = None,
    ):
        """Initialize the serializer."""
        self.tree: TreeAdapter[Any] = tree if tree is not None else ComponentTreeAdapter()
        self.options = options if options is not None else MarkdownSerializerOptions.defaults()

    def serialize(self, component: T, options: Optional[MarkdownSerializerOptions] = None) -> str:
        """Serialize ``component`` and its descendants to markdown.

        Parameters
        ----------
        component : T
            Root of the tree
        options : MarkdownSerializerOptions or None, default None
            Options for this call, the serializer's options when None

        Returns
        -------
        str
            Discord markdown

        Raises
        ------
        ProviderMissingError
            If the tree holds a keybind or translatable node and the matching
            provider is None
        NestingDepthError
            If the tree is deeper than ``options.max_depth``

        """
        options = options if options is not None else self.options
        runs = self.collect_runs(component, options)
        parts = [run.wrap(run.content) for run in runs]
        logger.debug("Serialized %d runs", len(runs))
        return ZERO_WIDTH_SPACE.join(parts)

    def collect_runs(self, component: T, options: MarkdownSerializerOptions) -> list[StyleRun]:
        """Flatten a tree into non-empty style runs, merging neighbours with equal flags.

        Run content is already escaped and stripped as configured, with links
        embedded. Nodes without content add no run, so they never separate two
        runs with equal flags.
        """
        runs: list[StyleRun] = []
        stack: list[tuple[Any, int]] = [(component, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > options.max_depth:
                raise NestingDepthError(depth, options.max_depth)

            flags = self.tree.style_flags(node)
            run = StyleRun(
                self._node_content(node, options),
                bold=flags.bold,
                strikethrough=flags.strikethrough,
                underline=flags.underline,
                italic=flags.italic,
            )
            if run.content:
                if runs and run.formatting_matches(runs[-1]):
                    runs[-1].content += run.content
                else:
                    runs.append(run)

            for child in reversed(self.tree.children(node)):
                stack.append((child, depth + 1))
        return runs

    def _node_content(self, node: Any, options: MarkdownSerializerOptions) -> str:
        kind = self.tree.content_kind(node)
        if kind is ContentKind.KEYBIND:
            if options.keybind_provider is None:
                raise ProviderMissingError("keybind_provider", node)
            content = options.keybind_provider(node)
        elif kind is ContentKind.TRANSLATABLE:
            if options.translation_provider is None:
                raise ProviderMissingError("translation_provider", node)
            content = options.translation_provider(node)
        elif kind is ContentKind.OTHER:
            content = ""
        else:
            content = self.tree.literal_text(node)

        if options.escape_markdown:
            content = escape_discord_markdown(content)
        if options.strip_legacy_formatting:
            content = strip_legacy_formatting(content)

        url = self.tree.open_url(node) if options.embed_links else None
        if url is not None:
            content = f"[{content}]({url})"
        return content
