"""Post-processing of rule engine productions into compact codes."""

from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping, Optional

from ..config import ConfigurationError

DEFAULT_VOWELS = "AEIOUYÅÄÖÆØ"

# Voiced -> voiceless and similar mergers; W V R H Q are dropped
CONSONANT_FOLDS = str.maketrans(
    {'B': 'P', 'D': 'T', 'G': 'K', 'C': 'X', 'J': 'X', 'M': 'N', 'Z': 'S',
     'W': None, 'V': None, 'R': None, 'H': None, 'Q': None}
)

VOWEL_FOLDS = str.maketrans(
    {'Y': 'U', 'Å': 'O', 'Ä': 'E', 'Æ': 'E', 'Ø': 'O', 'Ö': 'O'}
)


@dataclass(frozen=True)
class PostProcessOptions:
    """
    Options for the post-processing pipeline.

    Attributes:
        max_vowels: Vowels kept, counted from the left
        head_length: Leading characters kept by truncation
        tail_length: Trailing characters kept by truncation
        fold_consonants: Merge similar consonants, drop silent ones
        fold_vowels: Merge similar vowels
        vowels: Vowel alphabet used for capping
    """
    max_vowels: int = 2
    head_length: int = 3
    tail_length: int = 3
    fold_consonants: bool = True
    fold_vowels: bool = True
    vowels: str = DEFAULT_VOWELS

    def __post_init__(self):
        for name in ('max_vowels', 'head_length', 'tail_length'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}")
        for name in ('fold_consonants', 'fold_vowels'):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean")
        vowels = self.vowels
        if isinstance(vowels, (list, tuple, set, frozenset)):
            vowels = ''.join(sorted(v for v in vowels if isinstance(v, str)))
            if len(vowels) != len(self.vowels):
                vowels = None
        if not isinstance(vowels, str):
            raise ConfigurationError(f"vowels must be a string of letters, got {self.vowels!r}")
        object.__setattr__(self, 'vowels', vowels)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'PostProcessOptions':
        """Build options from a mapping, rejecting unknown keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown post-processing options: {sorted(unknown)}")
        return cls(**data)


DEFAULT_OPTIONS = PostProcessOptions()


def keep_n_of(s: str, n: int, alphabet: Iterable[str]) -> str:
    """
    Keep at most n occurrences of characters from alphabet.

    Characters outside the alphabet are always kept, order is preserved.

    >>> keep_n_of("ANDERSSON", 2, "AEIOU")
    'ANDERSSN'
    """
    members = set(alphabet)
    left = max(0, n)
    result = []
    for ch in s:
        if ch in members:
            if left == 0:
                continue
            left -= 1
        result.append(ch)
    return ''.join(result)


def dedupe_consecutive(s: str) -> str:
    """Collapse runs of the same character: "HALLAND" -> "HALAND"."""
    result = []
    for ch in s:
        if not result or result[-1] != ch:
            result.append(ch)
    return ''.join(result)


def take_codex_letters(s: str, head: int, tail: int) -> str:
    """Keep the first head and last tail characters, never overlapping."""
    n = len(s)
    if n <= head:
        return s
    return s[:head] + s[max(head, n - tail):]


def fold_consonants(s: str) -> str:
    """Merge voiced consonants into voiceless ones and drop W V R H Q."""
    return s.translate(CONSONANT_FOLDS)


def fold_vowels(s: str) -> str:
    """Merge Y into U, Å Ø Ö into O and Ä Æ into E."""
    return s.translate(VOWEL_FOLDS)


def postprocess(s: str, options: Optional[PostProcessOptions] = None) -> str:
    """
    Turn one production into its final code.

    Steps: vowel capping, run compression, head/tail truncation, consonant
    folding, vowel folding, run compression.
    """
    options = options or DEFAULT_OPTIONS

    s = keep_n_of(s, options.max_vowels, options.vowels)
    s = dedupe_consecutive(s)
    s = take_codex_letters(s, options.head_length, options.tail_length)
    if options.fold_consonants:
        s = fold_consonants(s)
    if options.fold_vowels:
        s = fold_vowels(s)
    return dedupe_consecutive(s)
