"""Options for chatmd serializers.

- MarkdownSerializerOptions: component tree to Discord markdown
- ComponentSerializerOptions: Discord markdown to component tree or escaped text
"""

from chatmd.options.base import BaseSerializerOptions, CloneFrozenMixin
from chatmd.options.components import ComponentSerializerOptions
from chatmd.options.markdown import MarkdownSerializerOptions

__all__ = [
    "BaseSerializerOptions",
    "CloneFrozenMixin",
    "ComponentSerializerOptions",
    "MarkdownSerializerOptions",
]
