#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/parsers/__init__.py
"""Rule-based markdown parsing.

- base: the generic ``Parser``, ``Rule`` and ``ParseSpec``
- discord: rule sets for the Discord markdown dialect

"""

from chatmd.parsers.base import ParseSpec, Parser, Rule
from chatmd.parsers.discord import (
    QuoteState,
    create_all_rules_for_discord,
    create_mention_rules,
    create_simple_markdown_rules,
    create_style_rules,
    create_text_rule,
)

__all__ = [
    "ParseSpec",
    "Parser",
    "QuoteState",
    "Rule",
    "create_all_rules_for_discord",
    "create_mention_rules",
    "create_simple_markdown_rules",
    "create_style_rules",
    "create_text_rule",
]
