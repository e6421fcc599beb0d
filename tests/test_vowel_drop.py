"""Tests for the weak second vowel elision."""

import pytest
from likely.config import ConfigurationError, PhoneticAlphabet
from likely.core.vowel_drop import (
    expand_second_vowel,
    has_protected_cluster,
    starts_with_protected_suffix,
    vowel_positions,
)


class TestVowelDrop:
    """Test when the second vowel is dropped."""

    def test_drops_weak_vowel_between_consonants(self):
        """Test that the second A of KATARINA is dropped."""
        assert expand_second_vowel("KATARINA") == {"KATARINA", "KATRINA"}

    def test_drops_e(self):
        """Test that a medial E is dropped."""
        assert expand_second_vowel("ANDERSSON") == {"ANDERSSON", "ANDRSSON"}
        assert expand_second_vowel("PETTERSSON") == {"PETTERSSON", "PETTRSSON"}

    def test_lowercase_input(self):
        """Test that input is uppercased first."""
        assert expand_second_vowel("katarina") == {"KATARINA", "KATRINA"}

    def test_two_vowels_unchanged(self):
        """Test that PELLE, with only two vowels, is left alone."""
        assert expand_second_vowel("PELLE") == {"PELLE"}

    def test_short_word_unchanged(self):
        """Test that words shorter than three letters are left alone."""
        assert expand_second_vowel("AB") == {"AB"}
        assert expand_second_vowel("") == {""}

    def test_strong_vowel_unchanged(self):
        """Test that a second vowel I is never dropped."""
        assert expand_second_vowel("MARIANA") == {"MARIANA"}

    def test_vowel_next_to_vowel_unchanged(self):
        """Test that the vowel must sit between consonants."""
        assert expand_second_vowel("MAEVANA") == {"MAEVANA"}

    def test_protected_suffix_unchanged(self):
        """Test that dropping E in JUDGEMENT would eat into -MENT."""
        assert expand_second_vowel("JUDGEMENT") == {"JUDGEMENT"}

    @pytest.mark.parametrize("word", ["SCHMIDT", "SKJOLDEBRAND", "STJERNAVALA", "SJOBERGA", "KJELLANOR", "TJADERANA"])
    def test_protected_cluster_unchanged(self, word):
        """Test that sj/tj clusters block elision."""
        assert expand_second_vowel(word) == {word}

    def test_scandinavian_vowels_count(self):
        """Test that Å Ä Ö Æ Ø count as vowels."""
        assert vowel_positions("ÅSÖDERÆ") == [0, 2, 4, 6]
        assert expand_second_vowel("BÅLÖTERA") == {"BÅLÖTERA"}
        assert expand_second_vowel("BÅLOTERA") == {"BÅLOTERA", "BÅLTERA"}


class TestHelpers:
    """Test the cluster and suffix predicates."""

    def test_has_protected_cluster(self):
        """Test cluster detection anywhere in the word."""
        assert has_protected_cluster("SCHMIDT")
        assert has_protected_cluster("MATJES")
        assert not has_protected_cluster("SMITH")

    def test_starts_with_protected_suffix(self):
        """Test suffix detection at the start of the tail."""
        assert starts_with_protected_suffix("NINGEN")
        assert starts_with_protected_suffix("LIGA")
        assert not starts_with_protected_suffix("RINA")


class TestCustomAlphabet:
    """Test vowel elision with a custom alphabet."""

    def test_custom_suffixes(self):
        """Test that caller suffixes block elision."""
        alphabet = PhoneticAlphabet(protected_suffixes=("RINA",))
        assert expand_second_vowel("KATARINA", alphabet) == {"KATARINA"}

    def test_custom_clusters(self):
        """Test that caller clusters block elision."""
        alphabet = PhoneticAlphabet(protected_clusters=("TAR",))
        assert expand_second_vowel("KATARINA", alphabet) == {"KATARINA"}

    def test_list_of_clusters_accepted(self):
        """Test that clusters given as a list are stored as a tuple."""
        alphabet = PhoneticAlphabet(protected_clusters=["SJ", "TJ"])
        assert alphabet.protected_clusters == ("SJ", "TJ")
        assert expand_second_vowel("KATARINAS", alphabet) == {"KATARINAS", "KATRINAS"}

    def test_string_of_vowels_accepted(self):
        """Test that letter classes may be given as strings."""
        alphabet = PhoneticAlphabet(vowels="AEIOUYÅÄÖÆØ", weak_vowels="AEO")
        assert alphabet.vowels == frozenset("AEIOUYÅÄÖÆØ")
        assert expand_second_vowel("KATARINA", alphabet) == {"KATARINA", "KATRINA"}

    @pytest.mark.parametrize("field", ["protected_clusters", "protected_suffixes"])
    def test_bare_string_rejected(self, field):
        """Test that a single string is not read letter by letter."""
        with pytest.raises(ConfigurationError):
            PhoneticAlphabet(**{field: "SJ"})

    def test_non_string_entry_rejected(self):
        """Test that cluster entries must be strings."""
        with pytest.raises(ConfigurationError):
            PhoneticAlphabet(protected_clusters=("SJ", 5))

    def test_non_collection_vowels_rejected(self):
        """Test that vowels must be a collection of letters."""
        with pytest.raises(ConfigurationError):
            PhoneticAlphabet(vowels=5)

    def test_weak_vowels_must_be_vowels(self):
        """Test that every weak vowel is also a vowel."""
        with pytest.raises(ConfigurationError):
            PhoneticAlphabet(weak_vowels=frozenset("AB"))

    def test_empty_suffix_rejected(self):
        """Test that empty suffixes are rejected."""
        with pytest.raises(ConfigurationError):
            PhoneticAlphabet(protected_suffixes=("ING", ""))

    def test_protected_chars_must_be_string(self):
        """Test that protected_chars must be a string."""
        with pytest.raises(ConfigurationError):
            PhoneticAlphabet(protected_chars=None)
