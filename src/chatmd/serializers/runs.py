#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/serializers/runs.py
"""Style runs: spans of text sharing one combination of style flags."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chatmd.constants import BOLD_MARKER, ITALIC_MARKER, STRIKETHROUGH_MARKER, UNDERLINE_MARKER


@dataclass
class StyleRun:
    """A contiguous span of text with a single style.

    Parameters
    ----------
    content : str
        Text of the run
    bold, strikethrough, underline, italic : bool
        Style flags

    """

    content: str = ""
    bold: bool = False
    strikethrough: bool = False
    underline: bool = False
    italic: bool = False

    def formatting_matches(self, other: StyleRun) -> bool:
        """Return whether both runs have the same flags, ignoring content."""
        return (
            self.bold == other.bold
            and self.strikethrough == other.strikethrough
            and self.underline == other.underline
            and self.italic == other.italic
        )

    def copy(self, content: str = "") -> StyleRun:
        """Return a run with the same flags and the given content."""
        return replace(self, content=content)

    def markers(self) -> list[str]:
        """Return the opening markers in emission order."""
        markers = []
        if self.bold:
            markers.append(BOLD_MARKER)
        if self.strikethrough:
            markers.append(STRIKETHROUGH_MARKER)
        if self.italic:
            markers.append(ITALIC_MARKER)
        if self.underline:
            markers.append(UNDERLINE_MARKER)
        return markers

    def wrap(self, text: str) -> str:
        """Surround ``text`` with this run's markers, closing in reverse order."""
        markers = self.markers()
        return "".join(markers) + text + "".join(reversed(markers))
