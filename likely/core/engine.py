"""
Branching rewrite engine.

Scans a word left to right. At each position the first rule (in table order)
that matches wins; every live production is extended with each of the rule's
outputs. Positions without a matching rule copy the character unchanged.

Productions are not deduplicated during the scan, so rules with several
outputs multiply the number of productions. Callers that care about
worst-case latency must bound table branching and word length.
"""

import logging
from typing import Iterable, List, Optional, Set, Union

from .rules import Rule, RuleLike, RuleTable

logger = logging.getLogger(__name__)

# Production counts above this are reported at DEBUG level
BRANCHING_LOG_THRESHOLD = 256

TableLike = Union[RuleTable, Iterable[RuleLike], None]


def first_hit(word: str, i: int, table: RuleTable) -> Optional[Rule]:
    """Return the first rule in table order that applies at position i."""
    for rule in table.rules:
        if rule.matches_at(word, i):
            return rule
    return None


def extend_each_production(productions: List[str], extensions: Iterable[str]) -> List[str]:
    """Cross product: every production followed by every extension."""
    extensions = tuple(extensions)
    return [prod + ext for prod in productions for ext in extensions]


def expand_by_rules(word: str, table: TableLike) -> List[str]:
    """
    Expand word into every production reachable under the rule table.

    Args:
        word: Normalized word
        table: RuleTable, or a plain list of Rules / rule records

    Returns:
        All productions, duplicates included. Never empty.
    """
    table = RuleTable.coerce(table)
    total = len(word)
    productions = ['']
    reported = False
    i = 0

    while i < total:
        rule = first_hit(word, i, table)
        if rule is None:
            ch = word[i]
            productions = [prod + ch for prod in productions]
            i += 1
            continue

        productions = extend_each_production(productions, rule.outputs)
        i += len(rule.pattern)

        if not reported and len(productions) > BRANCHING_LOG_THRESHOLD:
            logger.debug(
                f"{word!r} has {len(productions)} productions at position {i} "
                f"(table {table.name or '<unnamed>'})"
            )
            reported = True

    return productions


def expand(word: str, table: TableLike) -> Set[str]:
    """Set of distinct productions of word under the rule table."""
    return set(expand_by_rules(word, table))
