#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/parsers/discord.py
"""Grammar rules for the Discord markdown dialect.

Rules are grouped the way callers combine them:

- simple markdown rules: escapes, newlines, bold, underline, italics,
  strikethrough
- style rules: code blocks, inline code, spoilers, block quotes
- mention rules: custom emoji, channel, role and user mentions
- the text rule, which consumes plain text up to the next special character

:func:`create_all_rules_for_discord` returns the full grammar in priority
order. Block quotes are recognized only at the start of a line and never
while parsing in quote mode (:class:`QuoteState`), since Discord does not
nest quotes.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from chatmd.ast.nodes import StyleNode, StyleType, TextNode
from chatmd.parsers.base import ParseSpec, Rule

ESCAPE_PATTERN = re.compile(r"\\([^0-9A-Za-z\s])")
NEWLINE_PATTERN = re.compile(r"\n")
BOLD_PATTERN = re.compile(r"\*\*([\s\S]+?)\*\*(?!\*)")
UNDERLINE_PATTERN = re.compile(r"__([\s\S]+?)__(?!_)")
ITALICS_PATTERN = re.compile(
    # _text_ : the word boundaries keep snake_case_words intact
    r"\b_((?:__|\\[\s\S]|[^\\_])+?)_\b"
    # *text* : may not start with whitespace
    r"|\*(?=\S)((?:\*\*|\\[\s\S]|\s+(?:\\[\s\S]|[^\s*\\]|\*\*)|[^\s*\\])+?)\*(?!\*)"
)
STRIKETHROUGH_PATTERN = re.compile(r"~~([\s\S]+?)~~(?!~)")
TEXT_PATTERN = re.compile(r"[\s\S]+?(?=[^0-9A-Za-z\s\u00c0-\uffff]|\n| {2,}\n|\w+:\S|$)")

CODE_BLOCK_PATTERN = re.compile(r"```(?:([\w+\-.]+)?(\n))?([\s\S]+?)(\n?)```")
CODE_STRING_PATTERN = re.compile(r"(`+)([\s\S]*?[^`])\1(?!`)")
SPOILER_PATTERN = re.compile(r"\|\|([\s\S]+?)\|\|")
QUOTE_PATTERN = re.compile(r"(?<![^\n])(?:>>> ([\s\S]*)|> ([^\n]*))")

EMOJI_MENTION_PATTERN = re.compile(r"<(a)?:(\w+):(\d+)>")
CHANNEL_MENTION_PATTERN = re.compile(r"<#(\d+)>")
ROLE_MENTION_PATTERN = re.compile(r"<@&(\d+)>")
USER_MENTION_PATTERN = re.compile(r"<@!?(\d+)>")


@dataclass(frozen=True)
class QuoteState:
    """Parse mode used while re-parsing the content of a block quote.

    Parameters
    ----------
    in_quote : bool
        Whether the source being parsed is already inside a quote

    """

    in_quote: bool = False


def _not_in_quote(state: Any) -> bool:
    return not (isinstance(state, QuoteState) and state.in_quote)


def _wrap_group(style_type: StyleType, group: int, **extra: str):
    def action(match: re.Match[str], state: Any) -> ParseSpec:
        return ParseSpec.nonterminal(
            StyleNode.of(style_type, **extra), state, match.start(group), match.end(group)
        )

    return action


# ---------------------------------------------------------------------------
# Simple markdown rules
# ---------------------------------------------------------------------------


def create_escape_rule() -> Rule:
    """Create the rule resolving ``\\x`` escapes to the literal character."""
    return Rule(
        "escape",
        ESCAPE_PATTERN,
        lambda match, state: ParseSpec.terminal(TextNode(content=match.group(1)), state),
    )


def create_newline_rule() -> Rule:
    """Create the rule emitting line breaks as text."""
    return Rule("newline", NEWLINE_PATTERN, lambda match, state: ParseSpec.terminal(TextNode(content="\n"), state))


def create_bold_rule() -> Rule:
    """Create the ``**bold**`` rule."""
    return Rule("bold", BOLD_PATTERN, _wrap_group(StyleType.BOLD, 1))


def create_underline_rule() -> Rule:
    """Create the ``__underline__`` rule."""
    return Rule("underline", UNDERLINE_PATTERN, _wrap_group(StyleType.UNDERLINE, 1))


def create_italics_rule() -> Rule:
    """Create the ``_italics_`` / ``*italics*`` rule.

    The marker used in the source is kept in ``extra["marker"]``.
    """

    def action(match: re.Match[str], state: Any) -> ParseSpec:
        group = 1 if match.group(1) is not None else 2
        marker = "_" if group == 1 else "*"
        return ParseSpec.nonterminal(
            StyleNode.of(StyleType.ITALICS, marker=marker), state, match.start(group), match.end(group)
        )

    return Rule("italics", ITALICS_PATTERN, action)


def create_strikethrough_rule() -> Rule:
    """Create the ``~~strikethrough~~`` rule."""
    return Rule("strikethrough", STRIKETHROUGH_PATTERN, _wrap_group(StyleType.STRIKETHROUGH, 1))


def create_text_rule() -> Rule:
    """Create the catch-all text rule.

    It consumes at least one character, then stops before the next character
    another rule could start on.
    """
    return Rule("text", TEXT_PATTERN, lambda match, state: ParseSpec.terminal(TextNode(content=match.group(0)), state))


def create_simple_markdown_rules(include_text_rule: bool = True) -> list[Rule]:
    """Create escape, newline and inline formatting rules.

    Parameters
    ----------
    include_text_rule : bool, default = True
        Append the catch-all text rule

    Returns
    -------
    list of Rule
        Rules in priority order

    """
    rules = [
        create_escape_rule(),
        create_newline_rule(),
        create_bold_rule(),
        create_underline_rule(),
        create_italics_rule(),
        create_strikethrough_rule(),
    ]
    if include_text_rule:
        rules.append(create_text_rule())
    return rules


# ---------------------------------------------------------------------------
# Style rules
# ---------------------------------------------------------------------------


def create_code_block_rule() -> Rule:
    """Create the fenced code block rule.

    The language tag goes in ``extra["language"]``. The newlines dropped after
    the opening fence and before the closing one go in
    ``extra["leading_newline"]`` and ``extra["trailing_newline"]``, empty when
    absent.
    """

    def action(match: re.Match[str], state: Any) -> ParseSpec:
        node = StyleNode.of(
            StyleType.CODE_BLOCK,
            language=match.group(1) or "",
            leading_newline=match.group(2) or "",
            trailing_newline=match.group(4),
        )
        node.add_child(TextNode(content=match.group(3)))
        return ParseSpec.terminal(node, state)

    return Rule("code_block", CODE_BLOCK_PATTERN, action)


def create_code_string_rule() -> Rule:
    """Create the inline code rule; the content is kept verbatim."""

    def action(match: re.Match[str], state: Any) -> ParseSpec:
        node = StyleNode.of(StyleType.CODE_STRING, marker=match.group(1))
        node.add_child(TextNode(content=match.group(2)))
        return ParseSpec.terminal(node, state)

    return Rule("code_string", CODE_STRING_PATTERN, action)


def create_spoiler_rule() -> Rule:
    """Create the ``||spoiler||`` rule; the raw inner source goes in ``extra["content"]``."""
    return Rule(
        "spoiler",
        SPOILER_PATTERN,
        lambda match, state: ParseSpec.terminal(StyleNode.of(StyleType.SPOILER, content=match.group(1)), state),
    )


def create_quote_rule() -> Rule:
    """Create the block quote rule for ``> line`` and ``>>> rest of message``.

    The raw quoted source goes in ``extra["content"]``; ``extra["multiline"]``
    is ``"true"`` for the ``>>>`` form.
    """

    def action(match: re.Match[str], state: Any) -> ParseSpec:
        multiline = match.group(1) is not None
        content = match.group(1) if multiline else match.group(2)
        node = StyleNode.of(StyleType.QUOTE, content=content, multiline="true" if multiline else "false")
        return ParseSpec.terminal(node, state)

    return Rule("quote", QUOTE_PATTERN, action, condition=_not_in_quote)


def create_style_rules() -> list[Rule]:
    """Create code, spoiler and quote rules in priority order."""
    return [
        create_code_block_rule(),
        create_code_string_rule(),
        create_spoiler_rule(),
        create_quote_rule(),
    ]


# ---------------------------------------------------------------------------
# Mention rules
# ---------------------------------------------------------------------------


def create_emoji_mention_rule() -> Rule:
    """Create the custom emoji rule for ``<:name:id>`` and ``<a:name:id>``."""

    def action(match: re.Match[str], state: Any) -> ParseSpec:
        node = StyleNode.of(
            StyleType.MENTION_EMOJI,
            name=match.group(2),
            id=match.group(3),
            animated="true" if match.group(1) else "false",
        )
        return ParseSpec.terminal(node, state)

    return Rule("emoji_mention", EMOJI_MENTION_PATTERN, action)


def _id_mention_rule(name: str, pattern: re.Pattern[str], style_type: StyleType) -> Rule:
    return Rule(
        name,
        pattern,
        lambda match, state: ParseSpec.terminal(StyleNode.of(style_type, id=match.group(1)), state),
    )


def create_mention_rules() -> list[Rule]:
    """Create emoji, channel, role and user mention rules."""
    return [
        create_emoji_mention_rule(),
        _id_mention_rule("channel_mention", CHANNEL_MENTION_PATTERN, StyleType.MENTION_CHANNEL),
        _id_mention_rule("role_mention", ROLE_MENTION_PATTERN, StyleType.MENTION_ROLE),
        _id_mention_rule("user_mention", USER_MENTION_PATTERN, StyleType.MENTION_USER),
    ]


def create_all_rules_for_discord(include_text_rule: bool = True) -> list[Rule]:
    """Create the complete Discord grammar.

    Parameters
    ----------
    include_text_rule : bool, default = True
        Append the catch-all text rule

    Returns
    -------
    list of Rule
        Escape, style, mention and simple markdown rules, in that priority

    """
    simple = create_simple_markdown_rules(include_text_rule=include_text_rule)
    return [simple[0], *create_style_rules(), *create_mention_rules(), *simple[1:]]


def is_multiline_quote(extra: dict[str, str]) -> bool:
    """Return whether quote ``extra`` data describes a ``>>>`` quote."""
    return extra.get("multiline") == "true"


__all__ = [
    "QuoteState",
    "create_all_rules_for_discord",
    "create_bold_rule",
    "create_code_block_rule",
    "create_code_string_rule",
    "create_emoji_mention_rule",
    "create_escape_rule",
    "create_italics_rule",
    "create_mention_rules",
    "create_newline_rule",
    "create_simple_markdown_rules",
    "create_spoiler_rule",
    "create_strikethrough_rule",
    "create_style_rules",
    "create_text_rule",
    "create_underline_rule",
    "is_multiline_quote",
]
