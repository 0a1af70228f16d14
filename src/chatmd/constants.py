#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for chatmd.

Constants are organized by category:
1. Type Definitions - Literal types shared across modules
2. Discord Markdown Syntax - Markers emitted and recognized by chatmd
3. Component Rendering - Decorations used when building chat components
4. Limits - Resource bounds for recursive transforms
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ClickAction = Literal["open_url", "open_file", "run_command", "suggest_command", "change_page", "copy_to_clipboard"]
HoverAction = Literal["show_text", "show_item", "show_entity"]

# =============================================================================
# Discord Markdown Syntax
# =============================================================================

BOLD_MARKER = "**"
STRIKETHROUGH_MARKER = "~~"
ITALIC_MARKER = "_"
UNDERLINE_MARKER = "__"
CODE_MARKER = "`"
CODE_BLOCK_MARKER = "```"
SPOILER_MARKER = "||"
QUOTE_MARKER = ">"
BLOCK_QUOTE_MARKER = ">>>"

# Inserted between emitted runs so Discord does not merge e.g. two bold runs
ZERO_WIDTH_SPACE = "\u200b"

# Characters backslash-escaped in literal content
MARKDOWN_SPECIAL_CHARS = "*~_`|"

# Legacy section-sign formatting codes (e.g. "§l", "§4")
LEGACY_FORMATTING_CHAR = "§"

# =============================================================================
# Component Rendering
# =============================================================================

CODE_COLOR = "dark_gray"
QUOTE_PREFIX = "| "
QUOTE_PREFIX_COLOR = "dark_gray"
SPOILER_MASK_CHAR = "▌"
SPOILER_COLOR = "dark_gray"

# =============================================================================
# Limits
# =============================================================================

# Maximum component tree depth / markdown nesting depth processed before
# NestingDepthError is raised.
DEFAULT_MAX_NESTING_DEPTH = 64
