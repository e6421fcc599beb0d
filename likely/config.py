"""Configuration for phonetic fingerprinting."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


class ConfigurationError(ValueError):
    """Raised when a rule table, alphabet or option set is invalid."""


@dataclass(frozen=True)
class PhoneticAlphabet:
    """Letter classes and protected sequences used by the pipeline."""

    # Vowel letters, English and Scandinavian
    vowels: FrozenSet[str] = frozenset("AEIOUYÅÄÖÆØ")

    # Vowels eligible for medial elision
    weak_vowels: FrozenSet[str] = frozenset("AEO")

    # sj/tj clusters that vowel elision must leave alone
    protected_clusters: Tuple[str, ...] = ("SKJ", "STJ", "SCH", "SJ", "KJ", "TJ")

    # Suffixes that must not be swallowed when they start right after vowel #2
    protected_suffixes: Tuple[str, ...] = field(default_factory=lambda: (
        # English
        "ING", "ION", "TION", "SION", "IOUS", "IOUSLY", "IAL", "IC", "ISH",
        "ISM", "IST", "ABLE", "IBLE", "MENT", "NESS", "LESS", "FUL", "WARD",
        "WARDS", "LY", "ED", "ES", "ER", "EST", "OUS",
        # Swedish
        "NING", "NINGEN", "NINGAR", "LIG", "LIGA", "LIGT", "HET", "HETEN",
        "HETER", "HETS", "ADE", "ANDE", "AR", "ARE", "ARNA", "EN", "ET",
        "OR", "ORS", "SKA", "SKT", "ELSE",
    ))

    # Letters kept intact through accent stripping
    protected_chars: str = "ÅÄÖÆØ"

    def __post_init__(self):
        """Validate the alphabet."""
        # Letter classes may be given as a string of letters
        for name in ('vowels', 'weak_vowels'):
            value = getattr(self, name)
            try:
                letters = frozenset(value)
            except TypeError:
                raise ConfigurationError(f"{name} must be a collection of letters, got {value!r}") from None
            if any(not isinstance(ch, str) or len(ch) != 1 for ch in letters):
                raise ConfigurationError(f"{name} must only hold single characters: {value!r}")
            object.__setattr__(self, name, letters)

        if not self.weak_vowels <= self.vowels:
            raise ConfigurationError(
                f"Weak vowels {sorted(self.weak_vowels - self.vowels)} are not vowels"
            )

        # A bare string would be read one letter at a time
        for name in ('protected_clusters', 'protected_suffixes'):
            value = getattr(self, name)
            if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
                raise ConfigurationError(f"{name} must be a list or tuple of strings, got {value!r}")
            if any(not isinstance(s, str) or not s for s in value):
                raise ConfigurationError(f"{name} must only hold non-empty strings: {value!r}")
            object.__setattr__(self, name, tuple(value))

        if not isinstance(self.protected_chars, str):
            raise ConfigurationError(f"protected_chars must be a string, got {self.protected_chars!r}")

    def is_consonant(self, ch: str) -> bool:
        """True for alphabetic characters that are not vowels."""
        return ch.isalpha() and ch.upper() not in self.vowels


# Global configuration instance
default_alphabet = PhoneticAlphabet()
