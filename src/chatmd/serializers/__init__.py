"""Serializers between component trees and Discord markdown."""

from chatmd.serializers.components import ComponentSerializer
from chatmd.serializers.markdown import MarkdownSerializer
from chatmd.serializers.runs import StyleRun

__all__ = ["ComponentSerializer", "MarkdownSerializer", "StyleRun"]
