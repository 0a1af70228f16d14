#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/utils/escape.py
"""Discord markdown escaping utilities.

This module provides the character-level escaping applied to literal text
before it is wrapped in Discord markdown markers, and the removal of legacy
section-sign formatting codes that chat components may still carry.

"""

from __future__ import annotations

import re

from chatmd.constants import LEGACY_FORMATTING_CHAR, MARKDOWN_SPECIAL_CHARS

# A special character preceded by an even number of backslashes (zero included)
# is unescaped; an odd count means it is already escaped.
_UNESCAPED_SPECIAL_PATTERN = re.compile(r"(?<!\\)((?:\\\\)*)([" + re.escape(MARKDOWN_SPECIAL_CHARS) + r"])")

_LEGACY_FORMATTING_PATTERN = re.compile(re.escape(LEGACY_FORMATTING_CHAR) + r"[0-9A-FK-ORX]", re.IGNORECASE)


def escape_discord_markdown(text: str) -> str:
    r"""Backslash-escape Discord markdown characters in text content.

    Each of ``* ~ _ ` |`` is prefixed with a backslash unless it is already
    escaped. Running the function on its own output is a no-op.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for Discord markdown

    Examples
    --------
        >>> escape_discord_markdown("2*3 = 6")
        '2\\*3 = 6'
        >>> escape_discord_markdown("already \\*escaped\\*")
        'already \\*escaped\\*'

    """
    if not text:
        return text
    return _UNESCAPED_SPECIAL_PATTERN.sub(r"\1\\\2", text)


def strip_legacy_formatting(text: str) -> str:
    """Remove legacy section-sign formatting codes such as ``§l`` or ``§4``.

    Parameters
    ----------
    text : str
        Text possibly containing legacy codes

    Returns
    -------
    str
        Text without legacy formatting codes

    """
    if not text or LEGACY_FORMATTING_CHAR not in text:
        return text
    return _LEGACY_FORMATTING_PATTERN.sub("", text)
