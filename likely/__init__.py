"""likely - phonetic fingerprints for fuzzy matching of Scandinavian names."""

__version__ = "0.1.0"

from .config import ConfigurationError, PhoneticAlphabet, default_alphabet
from .core.normalize import normalize, compile_protected_map
from .core.vowel_drop import expand_second_vowel
from .core.rules import Rule, RuleTable
from .core.engine import expand, expand_by_rules
from .core.postprocess import PostProcessOptions, postprocess
from .matching.mraplus import Fingerprinter, fingerprint, phonetic, matches
from .data.reference_loader import load_rule_table, rule_data

__all__ = [
    'ConfigurationError',
    'PhoneticAlphabet',
    'default_alphabet',
    'normalize',
    'compile_protected_map',
    'expand_second_vowel',
    'Rule',
    'RuleTable',
    'expand',
    'expand_by_rules',
    'PostProcessOptions',
    'postprocess',
    'Fingerprinter',
    'fingerprint',
    'phonetic',
    'matches',
    'load_rule_table',
    'rule_data',
]
