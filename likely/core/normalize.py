"""
Unicode normalization for phonetic encoding.

Turns a word into uppercase A-Z, removing accents from borrowed letters
(e.g. "é" -> "E"). Letters that carry meaning of their own, such as the
Scandinavian Å Ä Ö Æ Ø, can be protected: they are swapped for private use
placeholders before decomposition and swapped back afterwards, so NFD never
reduces them to their base letter.
"""

import unicodedata
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Union

from ..config import ConfigurationError

# Placeholders are taken from the start of the BMP Private Use Area
PLACEHOLDER_START = 0xE000
PLACEHOLDER_END = 0xF8FF

COMBINING_CATEGORIES = frozenset({'Mn', 'Mc', 'Me'})


def is_placeholder(ch: str) -> bool:
    """True if ch lies in the placeholder codepoint range."""
    return PLACEHOLDER_START <= ord(ch) <= PLACEHOLDER_END


@dataclass(frozen=True)
class ProtectedCharMap:
    """Bijection between protected characters and placeholder codepoints."""
    to_placeholder: Mapping[str, str] = field(default_factory=dict)
    from_placeholder: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only views, instances are shared through the cache
        object.__setattr__(self, 'to_placeholder', MappingProxyType(dict(self.to_placeholder)))
        object.__setattr__(self, 'from_placeholder', MappingProxyType(dict(self.from_placeholder)))

    @property
    def chars(self) -> FrozenSet[str]:
        """The protected characters."""
        return frozenset(self.to_placeholder)

    def protect(self, s: str) -> str:
        """Replace protected characters with placeholders.

        Input codepoints that already equal a placeholder are dropped so
        they cannot come back as a protected letter.
        """
        return ''.join(
            self.to_placeholder.get(ch, ch)
            for ch in s
            if ch not in self.from_placeholder
        )

    def __len__(self) -> int:
        return len(self.to_placeholder)


@lru_cache(maxsize=64)
def _compile(chars: FrozenSet[str]) -> ProtectedCharMap:
    ordered = sorted(chars)
    if len(ordered) > PLACEHOLDER_END - PLACEHOLDER_START + 1:
        raise ConfigurationError("Too many protected characters")

    to_placeholder = {
        ch: chr(PLACEHOLDER_START + i) for i, ch in enumerate(ordered)
    }
    from_placeholder = {ph: ch for ch, ph in to_placeholder.items()}
    return ProtectedCharMap(to_placeholder, from_placeholder)


def compile_protected_map(
    protected_chars: Union[None, str, Iterable[str], ProtectedCharMap]
) -> ProtectedCharMap:
    """
    Build the placeholder map for a set of protected characters.

    The result is cached per distinct configuration and is safe to share.

    Args:
        protected_chars: Characters to protect (string, iterable of single
            characters, or an already compiled map)

    Returns:
        ProtectedCharMap for the uppercased characters

    Raises:
        ConfigurationError: If an entry is not a single character or lies
            in the placeholder range
    """
    if isinstance(protected_chars, ProtectedCharMap):
        return protected_chars
    if not protected_chars:
        return _compile(frozenset())

    chars = set()
    for ch in protected_chars:
        if not isinstance(ch, str) or len(ch) != 1:
            raise ConfigurationError(f"Protected character must be a single character: {ch!r}")
        if is_placeholder(ch):
            raise ConfigurationError(
                f"Protected character U+{ord(ch):04X} lies in the placeholder range"
            )
        upper = ch.upper()
        # Characters like ß uppercase to more than one letter and cannot be protected
        chars.add(upper if len(upper) == 1 else ch)

    return _compile(frozenset(chars))


def is_ascii(s: str) -> bool:
    """True if s only holds 7-bit characters."""
    return s.isascii()


def strip_combining(s: str) -> str:
    """Remove combining marks (Mn/Mc/Me)."""
    return ''.join(ch for ch in s if unicodedata.category(ch) not in COMBINING_CATEGORIES)


def _keep_set(keep_chars: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not keep_chars:
        return frozenset()
    return frozenset(keep_chars)


def _is_letter(ch: str) -> bool:
    return 'A' <= ch <= 'Z'


def normalize_ascii(s: str, keep_chars: Optional[Iterable[str]] = None) -> str:
    """Uppercase and keep only A-Z plus keep_chars."""
    keep = _keep_set(keep_chars)
    return ''.join(ch for ch in s.upper() if _is_letter(ch) or ch in keep)


def normalize(
    word: str,
    protected_chars: Union[None, str, Iterable[str], ProtectedCharMap] = None,
    keep_chars: Optional[Iterable[str]] = None,
) -> str:
    """
    Normalize a word to uppercase letters.

    Diacritics are stripped from letters ("déjà" -> "DEJA") except for the
    protected characters, which survive as themselves. Non-letters are
    dropped unless listed in keep_chars.

    Args:
        word: Input text
        protected_chars: Letters to keep intact, e.g. "ÅÄÖ"
        keep_chars: Extra characters to let through, e.g. {' ', '-'}

    Returns:
        Normalized string, possibly empty

    Examples:
        >>> normalize("Håkan Björn", "ÅÄÖ")
        'HÅKANBJÖRN'
        >>> normalize("Göte-borg's", "ÅÄÖ", {'-'})
        'GÖTE-BORGS'
    """
    if not word:
        return ''

    upper = word.upper()
    if is_ascii(upper):
        return normalize_ascii(upper, keep_chars)

    ph_map = compile_protected_map(protected_chars)
    keep = _keep_set(keep_chars)

    composed = unicodedata.normalize('NFC', upper)
    protected = ph_map.protect(composed)
    stripped = strip_combining(unicodedata.normalize('NFD', protected))

    result = []
    for ch in stripped:
        if _is_letter(ch) or ch in keep:
            result.append(ch)
        elif ch in ph_map.from_placeholder:
            result.append(ph_map.from_placeholder[ch])

    return ''.join(result)
