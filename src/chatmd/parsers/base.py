#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/parsers/base.py
"""Rule-based parser producing the generic markdown AST.

A grammar is an ordered sequence of :class:`Rule` objects. At every scan
position the parser tries the rules in order and the first one that matches
wins. A matching rule returns a :class:`ParseSpec`: either a terminal node, or
a node together with a source range whose parse result becomes that node's
children.

The parser keeps its pending work on an explicit stack, so deeply nested
markdown never grows the Python call stack.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from chatmd.ast.nodes import Node
from chatmd.exceptions import ParsingError

logger = logging.getLogger(__name__)


@dataclass
class ParseSpec:
    """Result of applying a rule to a match.

    Parameters
    ----------
    node : Node or None
        Node produced by the rule, None to drop the matched source
    is_terminal : bool
        Whether ``node`` is complete, or its children are parsed from
        ``source[start:end]``
    state : Any
        Parse mode used for the nested range
    start : int
        Start offset of the nested range (non-terminal only)
    end : int
        End offset of the nested range (non-terminal only)

    """

    node: Optional[Node]
    is_terminal: bool = True
    state: Any = None
    start: int = 0
    end: int = 0

    @classmethod
    def terminal(cls, node: Optional[Node], state: Any = None) -> ParseSpec:
        """Create a spec for a complete node."""
        return cls(node=node, is_terminal=True, state=state)

    @classmethod
    def nonterminal(cls, node: Node, state: Any, start: int, end: int) -> ParseSpec:
        """Create a spec whose node receives the parse of ``source[start:end]``."""
        return cls(node=node, is_terminal=False, state=state, start=start, end=end)


# (match, state) -> ParseSpec
RuleAction = Callable[["re.Match[str]", Any], ParseSpec]
# (state) -> whether the rule may be tried
RuleCondition = Callable[[Any], bool]


class Rule:
    """A single grammar rule: a regex anchored at the scan position and an action.

    Parameters
    ----------
    name : str
        Rule name, used in debug logging
    pattern : re.Pattern
        Compiled pattern. It is matched with ``pattern.match(source, pos, endpos)``,
        so it is implicitly anchored at the scan position and lookbehinds see
        the real preceding characters.
    action : callable
        ``action(match, state) -> ParseSpec``
    condition : callable, optional
        ``condition(state) -> bool``; the rule is skipped when it returns False

    """

    def __init__(
        self,
        name: str,
        pattern: re.Pattern[str],
        action: RuleAction,
        condition: Optional[RuleCondition] = None,
    ):
        """Initialize the rule."""
        self.name = name
        self.pattern = pattern
        self.action = action
        self.condition = condition

    def match(self, source: str, pos: int, endpos: int, state: Any) -> Optional[re.Match[str]]:
        """Try the rule at ``pos`` without looking past ``endpos``."""
        if self.condition is not None and not self.condition(state):
            return None
        match = self.pattern.match(source, pos, endpos)
        if match is None or match.end() == pos:
            return None
        return match

    def parse(self, match: re.Match[str], state: Any) -> ParseSpec:
        """Build the parse spec for a successful match."""
        return self.action(match, state)

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"Rule(name={self.name!r}, pattern={self.pattern.pattern!r})"


@dataclass
class _PendingRange:
    parent: Optional[Node]
    state: Any
    start: int
    end: int


class Parser:
    """Parse source text into a list of top-level AST nodes with a rule list.

    Examples
    --------
        >>> from chatmd.parsers.discord import create_all_rules_for_discord
        >>> nodes = Parser().parse("**hi**", None, create_all_rules_for_discord())

    """

    def parse(
        self,
        source: str,
        state: Any,
        rules: Sequence[Rule],
        debug: bool = False,
    ) -> list[Node]:
        """Parse ``source`` with ``rules``.

        Parameters
        ----------
        source : str
            Text to parse
        state : Any
            Parse mode, e.g. None or a ``QuoteState``
        rules : sequence of Rule
            Ordered rules; the first match at each position wins
        debug : bool, default = False
            Log every rule match at DEBUG level

        Returns
        -------
        list of Node
            Top-level nodes in source order

        Raises
        ------
        ParsingError
            If no rule matches at some position

        """
        top_level: list[Node] = []
        if not source:
            return top_level

        stack: list[_PendingRange] = [_PendingRange(None, state, 0, len(source))]
        while stack:
            pending = stack.pop()
            if pending.start >= pending.end:
                continue

            for rule in rules:
                match = rule.match(source, pending.start, pending.end, pending.state)
                if match is not None:
                    break
            else:
                raise ParsingError(
                    f"No rule matched at offset {pending.start}: {source[pending.start:pending.start + 20]!r}",
                    source=source,
                    position=pending.start,
                )

            if debug:
                logger.debug("Rule %s matched %r at offset %d", rule.name, match.group(0), pending.start)

            spec = rule.parse(match, pending.state)
            if spec.node is not None:
                if pending.parent is None:
                    top_level.append(spec.node)
                else:
                    pending.parent.add_child(spec.node)

            # Remainder of this range first, so the nested range is handled before it
            if match.end() < pending.end:
                stack.append(_PendingRange(pending.parent, pending.state, match.end(), pending.end))
            if not spec.is_terminal and spec.node is not None:
                stack.append(_PendingRange(spec.node, spec.state, spec.start, spec.end))

        return top_level
