"""Tests for the collation module."""

from morphdict.collation import (
    CYRILLIC_ALPHABET,
    CYRILLIC_WEIGHTS,
    GROUP_CYRILLIC,
    char_weights,
    collate,
    collation_key,
    compare,
)


class TestAlphabet:
    """Tests for Russian alphabet ordering."""

    def test_alphabet_order(self):
        """Test single letters sort in alphabet order."""
        letters = list(CYRILLIC_ALPHABET)
        assert collate(reversed(letters)) == letters

    def test_yo_after_ye(self):
        """Test ё sorts right after е, not after я."""
        assert collate(["я", "ё", "ж", "е", "а"]) == ["а", "е", "ё", "ж", "я"]

    def test_yo_shares_primary_weight(self):
        """Test ё is ordered by the letters after it before its accent."""
        assert collate(["ель", "ёж"]) == ["ёж", "ель"]
        assert collate(["ёж", "еж"]) == ["еж", "ёж"]

    def test_yo_not_code_point(self):
        """Test words with ё are not pushed to the end."""
        assert collate(["яма", "ёлка", "жук"]) == ["ёлка", "жук", "яма"]

    def test_short_i_is_own_letter(self):
        """Test й sorts after и as a separate letter."""
        assert collate(["йод", "ия", "иод"]) == ["иод", "ия", "йод"]

    def test_prefix_sorts_first(self):
        """Test a prefix sorts before its extensions."""
        assert collate(["котёнок", "кот"]) == ["кот", "котёнок"]

    def test_weights_cover_alphabet(self):
        """Test every letter has a weight."""
        for letter in CYRILLIC_ALPHABET:
            assert letter in CYRILLIC_WEIGHTS
        assert CYRILLIC_WEIGHTS["ё"][0] == CYRILLIC_WEIGHTS["е"][0]
        assert CYRILLIC_WEIGHTS["й"][0] > CYRILLIC_WEIGHTS["и"][0]


class TestCase:
    """Tests for case handling."""

    def test_case_variants_adjacent(self):
        """Test uppercase does not split words by code point."""
        assert collate(["Ваза", "агат", "Барсук"]) == ["агат", "Барсук", "Ваза"]

    def test_lowercase_first(self):
        """Test lowercase sorts before uppercase of the same word."""
        assert collate(["Кот", "кот"]) == ["кот", "Кот"]

    def test_uppercase_yo(self):
        """Test Ё follows the same rules as ё."""
        assert collate(["Ж", "Ё", "Е"]) == ["Е", "Ё", "Ж"]


class TestScripts:
    """Tests for ordering across scripts."""

    def test_group_order(self):
        """Test punctuation < digits < Cyrillic < Latin."""
        assert collate(["abc", "абв", "123", "-x"]) == ["-x", "123", "абв", "abc"]

    def test_latin_accents(self):
        """Test accented Latin letters sort next to the base letter."""
        assert collate(["cotf", "côte", "cote"]) == ["cote", "côte", "cotf"]

    def test_digits_char_by_char(self):
        """Test digits compare one character at a time."""
        assert collate(["10", "2", "1"]) == ["1", "10", "2"]

    def test_other_cyrillic_in_cyrillic_group(self):
        """Test non-Russian Cyrillic letters stay before Latin."""
        assert collate(["a", "ґ"]) == ["ґ", "a"]
        assert char_weights("ґ")[0][0] == GROUP_CYRILLIC

    def test_ukrainian_letters_interleaved(self):
        """Test Ukrainian letters sort next to their Russian neighbours."""
        words = ["я", "кит", "їжак", "иней", "жук", "єнот", "ель", "гусь", "ґанок"]
        assert collate(words) == [
            "ґанок", "гусь", "ель", "єнот", "жук", "иней", "їжак", "кит", "я"
        ]

    def test_serbian_letters_interleaved(self):
        """Test Serbian letters sort after their base neighbours, not after я."""
        assert collate(["я", "лук", "љубав", "мир"]) == ["лук", "љубав", "мир", "я"]
        assert collate(["я", "ѕвезда", "зуб", "ию"]) == ["зуб", "ѕвезда", "ию", "я"]

    def test_punctuation_order(self):
        """Test separators inside a word follow the Unicode root order."""
        words = ["кто.то", "кто-то", "кто_то", "кто то"]
        assert collate(words) == ["кто то", "кто_то", "кто-то", "кто.то"]

    def test_unlisted_symbols_after_listed(self):
        """Test symbols missing from the table still sort before digits."""
        assert collate(["1", "§", "$", "!"]) == ["!", "$", "§", "1"]


class TestCompare:
    """Tests for compare function."""

    def test_compare(self):
        """Test three-way comparison."""
        assert compare("банан", "груша") == -1
        assert compare("груша", "банан") == 1
        assert compare("кот", "кот") == 0

    def test_equal_only_for_identical(self):
        """Test differing strings never compare equal."""
        assert compare("кот", "Кот") != 0
        assert compare("е", "ё") != 0

    def test_key_matches_compare(self):
        """Test collation_key agrees with compare."""
        pairs = [("ёж", "ель"), ("Кот", "кот"), ("abc", "абв")]
        for a, b in pairs:
            assert (collation_key(a) < collation_key(b)) == (compare(a, b) < 0)

    def test_empty_string(self):
        """Test empty string sorts first."""
        assert collate(["а", ""]) == ["", "а"]
