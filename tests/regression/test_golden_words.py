"""Regression tests pinning decompositions against the bundled periodic table."""

import pytest
from pyatomword.algorithms.decomposition import decompose
from pyatomword.core.results import Success
from pyatomword.parsing.api import spell_word

GOLDEN_SENTENCES = {
    "poison": "PoISON (Polonium, Iodine, Sulfur, Oxygen, Nitrogen)",
    "bacon": "BaCoN (Barium, Cobalt, Nitrogen)",
    "sickness": "SICKNeSS (Sulfur, Iodine, Carbon, Potassium, Neon, Sulfur, Sulfur)",
    "ticklish": "TiCKLiSH (Titanium, Carbon, Potassium, Lithium, Sulfur, Hydrogen)",
    "functions": "FUNCTiONS (Fluorine, Uranium, Nitrogen, Carbon, Titanium, Oxygen, Nitrogen, Sulfur)",
}


class TestGoldenWords:
    """Pinned sentences for the demo words."""

    @pytest.mark.parametrize("word,expected", sorted(GOLDEN_SENTENCES.items()))
    def test_golden_sentence(self, periodic_table, word, expected):
        """Test the rendered sentence of each demo word."""
        assert spell_word(word, periodic_table) == expected

    @pytest.mark.parametrize("word", sorted(GOLDEN_SENTENCES))
    def test_golden_words_cover_input(self, periodic_table, word):
        """Test that each demo word is spelled exactly."""
        result = decompose(word, periodic_table)
        assert isinstance(result, Success)
        assert "".join(result.symbols).lower() == word

    @pytest.mark.parametrize("word,expected", [
        ("zebra", "zebra is undefinable"),
        ("jump", "jump is undefinable"),
        ("coh", "CoH (Cobalt, Hydrogen)"),
        ("chocolate", "CHoCoLaTe (Carbon, Holmium, Cobalt, Lanthanum, Tellurium)"),
    ])
    def test_other_words(self, periodic_table, word, expected):
        """Test further words against the bundled table."""
        assert spell_word(word, periodic_table) == expected


class TestEveryElement:
    """Properties that hold for the elements of the bundled table."""

    # Two-letter elements lighter than their one-letter prefix
    SHADOWED = {"be": "be is undefinable", "si": "SI (Sulfur, Iodine)", "in": "IN (Iodine, Nitrogen)"}

    def test_each_symbol_spells_itself(self, periodic_table):
        """Test that every lowercased symbol decomposes into that symbol."""
        for key, record in periodic_table.items():
            if key in self.SHADOWED:
                continue
            result = decompose(key, periodic_table)
            assert isinstance(result, Success), f"{record.symbol} is undefinable"
            assert result.symbols == (record.symbol,), f"{key} -> {result.symbols}"
            assert result.full_names == (record.full_name,)

    @pytest.mark.parametrize("key,expected", sorted(SHADOWED.items()))
    def test_shadowed_symbols(self, periodic_table, key, expected):
        """Test that a heavier one-letter prefix wins over a lighter two-letter symbol."""
        assert spell_word(key, periodic_table) == expected

    def test_shadowed_list_complete(self, periodic_table):
        """Test that only the listed symbols are lighter than their prefix."""
        shadowed = {
            key for key in periodic_table
            if len(key) == 2 and periodic_table.weight_of(key[0]) >= periodic_table[key].weight
        }
        assert shadowed == set(self.SHADOWED)
