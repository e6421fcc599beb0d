"""
MRA+ phonetic fingerprinting.

A substitution based phonetic encoder tuned for Scandinavian names, knowing
Swedish and English spelling while trying to respect Norwegian and Danish.

Pipeline per word:
1. Normalize (strip accents, keep Å Ä Ö Æ Ø)
2. Expand into base variants by eliding a weak second vowel
3. Expand every variant under every rule table
4. Post-process each production into a short code
5. Union everything into the fingerprint set

Two words match when their fingerprint sets intersect.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Set, Union

from ..config import PhoneticAlphabet, default_alphabet
from ..core.engine import TableLike, expand_by_rules
from ..core.normalize import compile_protected_map, normalize
from ..core.postprocess import PostProcessOptions, dedupe_consecutive, postprocess
from ..core.rules import Rule, RuleTable
from ..core.vowel_drop import expand_second_vowel

logger = logging.getLogger(__name__)

TablesLike = Union[RuleTable, Iterable[TableLike], None]


def _coerce_tables(rule_tables: TablesLike) -> List[RuleTable]:
    """Normalize the rule_tables argument to a non-empty list of RuleTables."""
    if rule_tables is None:
        return [RuleTable()]
    if isinstance(rule_tables, RuleTable):
        return [rule_tables]

    rule_tables = list(rule_tables)
    # A flat list of rules is a single table
    if rule_tables and all(isinstance(t, (Rule, Mapping)) for t in rule_tables):
        return [RuleTable.from_records(rule_tables)]

    tables = [RuleTable.coerce(table) for table in rule_tables]
    # No tables behaves like one identity table
    return tables or [RuleTable()]


class Fingerprinter:
    """
    Computes MRA+ fingerprint sets with a fixed configuration.

    The configuration is read-only after construction, so one instance can
    be shared freely between threads.
    """

    def __init__(
        self,
        rule_tables: TablesLike = None,
        options: Optional[PostProcessOptions] = None,
        alphabet: Optional[PhoneticAlphabet] = None,
        keep_chars: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the fingerprinter.

        Args:
            rule_tables: Rule tables applied in turn, results are unioned
            options: Post-processing options (defaults if None)
            alphabet: Vowel classes and protected sequences
            keep_chars: Non-letter characters that survive normalization
        """
        self.rule_tables = _coerce_tables(rule_tables)
        self.options = options or PostProcessOptions()
        self.alphabet = alphabet or default_alphabet
        self.keep_chars = frozenset(keep_chars) if keep_chars else frozenset()
        self.protected_map = compile_protected_map(self.alphabet.protected_chars)

    @classmethod
    def scandinavian(cls, options: Optional[PostProcessOptions] = None) -> 'Fingerprinter':
        """Fingerprinter with the bundled English and Swedish rule tables."""
        from ..data.reference_loader import rule_data

        return cls(
            [rule_data.get_table('english'), rule_data.get_table('swedish')],
            options=options,
        )

    def base_variants(self, word: str) -> Set[str]:
        """Normalized word plus its vowel-elided variant, if any."""
        normalized = normalize(word, self.protected_map, self.keep_chars)
        if not normalized:
            return set()
        return expand_second_vowel(normalized, self.alphabet)

    def productions(self, word: str) -> List[str]:
        """Every rule engine production for every base variant and table."""
        results = []
        for variant in sorted(self.base_variants(word)):
            for table in self.rule_tables:
                results.extend(expand_by_rules(variant, table))
        return results

    def fingerprint(self, word: str) -> Set[str]:
        """
        Compute the fingerprint set of a word.

        Args:
            word: A single word

        Returns:
            Set of codes; empty if nothing of the word survives normalization
        """
        productions = self.productions(word)
        if not productions:
            logger.debug(f"No letters left in {word!r}, empty fingerprint")
            return set()
        return {postprocess(p, self.options) for p in productions}

    def phonetic(self, word: str) -> Set[str]:
        """Rule engine productions with runs compressed, without truncation or folding."""
        return {dedupe_consecutive(p) for p in self.productions(word)}

    def matches(self, word1: str, word2: str) -> bool:
        """True if the fingerprint sets of the two words intersect."""
        return not self.fingerprint(word1).isdisjoint(self.fingerprint(word2))


def fingerprint(
    word: str,
    rule_tables: TablesLike,
    options: Optional[PostProcessOptions] = None,
    alphabet: Optional[PhoneticAlphabet] = None,
) -> Set[str]:
    """
    Fingerprint set of word, unioned across all rule tables.

    Examples:
        >>> fingerprint("Pelle", [])
        {'PELE'}
    """
    return Fingerprinter(rule_tables, options, alphabet).fingerprint(word)


def phonetic(
    word: str,
    rule_tables: TablesLike,
    alphabet: Optional[PhoneticAlphabet] = None,
) -> Set[str]:
    """Uncompressed phonetic spellings of word, unioned across all rule tables."""
    return Fingerprinter(rule_tables, alphabet=alphabet).phonetic(word)


def matches(
    word1: str,
    word2: str,
    rule_tables: TablesLike,
    options: Optional[PostProcessOptions] = None,
    alphabet: Optional[PhoneticAlphabet] = None,
) -> bool:
    """True if the two words share at least one fingerprint."""
    return Fingerprinter(rule_tables, options, alphabet).matches(word1, word2)
