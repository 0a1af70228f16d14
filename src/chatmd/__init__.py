"""chatmd - transcode between Minecraft chat components and Discord markdown.

chatmd converts styled chat component trees (the Minecraft JSON text format)
to Discord markdown and back.

Pipelines
---------
- Component to markdown: the tree is flattened into style runs, runs with
  equal style flags are merged, and each run is wrapped in ``**``, ``~~``,
  ``_`` and ``__`` markers with its text escaped.
- Markdown to component: a rule-based parser builds a markdown AST, adjacent
  text nodes are merged, and an ordered chain of renderers with a built-in
  fallback turns every node into components (or into escaped text).

Requirements
------------
- Python 3.10+
- rich, for terminal previews

Examples
--------
Serialize a component:

    >>> from chatmd import TextComponent, to_markdown
    >>> to_markdown(TextComponent.literal("Hello", bold=True))
    '**Hello**'

Render markdown back into components:

    >>> from chatmd import from_markdown
    >>> component = from_markdown("||secret||")

Escape a message so Discord displays it verbatim:

    >>> from chatmd import escape_markdown
    >>> escaped = escape_markdown("**not bold**")

See Also
--------
chatmd.renderers : renderer chain used for markdown to component
chatmd.parsers : the Discord markdown grammar

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "chatmd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from chatmd.api import escape_markdown, from_markdown, to_markdown
from chatmd.components import TextComponent, component_from_json, component_to_json
from chatmd.exceptions import (
    ChatMdError,
    NestingDepthError,
    ParsingError,
    ProviderMissingError,
    RendererRegistrationError,
    RenderingError,
    ValidationError,
)
from chatmd.options import ComponentSerializerOptions, MarkdownSerializerOptions
from chatmd.renderers import ComponentRenderer, DefaultComponentRenderer, NodeRenderer
from chatmd.serializers import ComponentSerializer, MarkdownSerializer

__all__ = [
    "__version__",
    "ChatMdError",
    "ComponentRenderer",
    "ComponentSerializer",
    "ComponentSerializerOptions",
    "DefaultComponentRenderer",
    "MarkdownSerializer",
    "MarkdownSerializerOptions",
    "NestingDepthError",
    "NodeRenderer",
    "ParsingError",
    "ProviderMissingError",
    "RendererRegistrationError",
    "RenderingError",
    "TextComponent",
    "ValidationError",
    "component_from_json",
    "component_to_json",
    "escape_markdown",
    "from_markdown",
    "to_markdown",
]
