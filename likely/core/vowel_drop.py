"""Spelling variants made by eliding a weak medial vowel.

Medial A/E/O are often swallowed in casual or dialectal speech
("Katarina" ~ "Katrina"), so the second vowel of a word is dropped to form an
extra base variant, unless that would break an sj/tj cluster or eat into a
derivational suffix.
"""

from typing import List, Set

from ..config import PhoneticAlphabet, default_alphabet


def vowel_positions(word: str, alphabet: PhoneticAlphabet = default_alphabet) -> List[int]:
    """Indexes of the vowels in word."""
    return [i for i, ch in enumerate(word) if ch in alphabet.vowels]


def has_protected_cluster(word: str, alphabet: PhoneticAlphabet = default_alphabet) -> bool:
    """True if word contains an sj/tj cluster that must stay intact."""
    return any(cluster in word for cluster in alphabet.protected_clusters)


def starts_with_protected_suffix(s: str, alphabet: PhoneticAlphabet = default_alphabet) -> bool:
    """True if s begins with one of the protected suffixes."""
    return s.startswith(alphabet.protected_suffixes)


def expand_second_vowel(word: str, alphabet: PhoneticAlphabet = default_alphabet) -> Set[str]:
    """
    Return the word plus, when allowed, the word without its second vowel.

    The second vowel is dropped only if:
    1. the word has at least 3 vowels,
    2. the vowel is weak (A, E or O),
    3. it sits between two consonants, and
    4. no protected suffix starts right after it.

    Words shorter than 3 letters and words containing a protected cluster
    (SKJ, STJ, SCH, SJ, KJ, TJ) are returned unchanged.

    Args:
        word: Normalized word
        alphabet: Letter classes and protected sequences

    Returns:
        {word} or {word, word-with-second-vowel-removed}
    """
    s = word.upper()
    if len(s) < 3 or has_protected_cluster(s, alphabet):
        return {s}

    positions = vowel_positions(s, alphabet)
    if len(positions) < 3:
        return {s}

    i = positions[1]
    if s[i] not in alphabet.weak_vowels:
        return {s}

    # Neighbours must exist on both sides
    if i == 0 or i + 1 >= len(s):
        return {s}
    if not (alphabet.is_consonant(s[i - 1]) and alphabet.is_consonant(s[i + 1])):
        return {s}

    if starts_with_protected_suffix(s[i + 1:], alphabet):
        return {s}

    return {s, s[:i] + s[i + 1:]}
