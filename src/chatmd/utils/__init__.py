"""Utility helpers shared by chatmd serializers and renderers."""

from chatmd.utils.escape import escape_discord_markdown, strip_legacy_formatting

__all__ = ["escape_discord_markdown", "strip_legacy_formatting"]
