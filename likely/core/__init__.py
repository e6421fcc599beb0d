"""
Core pipeline stages: normalization, vowel elision, rule expansion and
post-processing.
"""

from .normalize import normalize, compile_protected_map, ProtectedCharMap, strip_combining
from .vowel_drop import expand_second_vowel
from .rules import Rule, RuleTable
from .engine import expand, expand_by_rules, first_hit
from .postprocess import (
    PostProcessOptions,
    postprocess,
    keep_n_of,
    dedupe_consecutive,
    take_codex_letters,
    fold_consonants,
    fold_vowels,
)

__all__ = [
    'normalize',
    'compile_protected_map',
    'ProtectedCharMap',
    'strip_combining',
    'expand_second_vowel',
    'Rule',
    'RuleTable',
    'expand',
    'expand_by_rules',
    'first_hit',
    'PostProcessOptions',
    'postprocess',
    'keep_n_of',
    'dedupe_consecutive',
    'take_codex_letters',
    'fold_consonants',
    'fold_vowels',
]
