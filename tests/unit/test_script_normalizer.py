"""Unit tests for script conversion and canonical forms."""

import pytest

from idverify.processors.script_normalizer import (
    contains_token,
    cyrillic_to_latin,
    latin_to_cyrillic,
    strings_match,
    strip_diacritics,
    to_canonical,
    to_search_form,
)


class TestScriptConversion:
    """Tests for the one-directional script converters."""

    def test_cyrillic_to_latin(self):
        """Test Cyrillic letters map to Gaj's Latin alphabet."""
        assert cyrillic_to_latin("Ћирилица") == "Ćirilica"
        assert cyrillic_to_latin("Љиљана") == "Ljiljana"
        assert cyrillic_to_latin("Џамија") == "Džamija"

    def test_latin_to_cyrillic_digraphs_first(self):
        """Test digraphs are converted as single letters."""
        assert latin_to_cyrillic("Ljiljana") == "Љиљана"
        assert latin_to_cyrillic("Njegoš") == "Његош"
        assert latin_to_cyrillic("Džamija") == "Џамија"

    def test_empty_input(self):
        """Test converters are total on empty and None input."""
        assert cyrillic_to_latin("") == ""
        assert latin_to_cyrillic(None) == ""

    def test_strip_diacritics(self):
        """Test explicit folding and NFD mark removal."""
        assert strip_diacritics("Čćžšđ é") == "Cczsd e"


class TestCanonicalForm:
    """Tests for to_canonical and strings_match."""

    def test_canonical_basic(self):
        """Test case, diacritics and punctuation are removed."""
        assert to_canonical("  Hodžić,   Edhem! ") == "hodzic edhem"

    def test_canonical_cross_script(self):
        """Test Cyrillic and Latin forms of a name coincide."""
        assert to_canonical("Ђорђе") == to_canonical("ĐORĐE") == "dorde"
        assert to_canonical("Хоџић") == to_canonical("Hodzic")

    def test_canonical_none(self):
        """Test canonical form of None is empty."""
        assert to_canonical(None) == ""

    @pytest.mark.parametrize(
        "text",
        ["Hodžić", "ЕДХЕМ ХОЏИЋ", "  O'Brien-Smith  ", "2A-141 A80K", "Љубомир Њ.", ""],
    )
    def test_canonical_idempotent(self, text):
        """Test canonicalising twice changes nothing."""
        once = to_canonical(text)
        assert to_canonical(once) == once

    def test_strings_match_same_word(self):
        """Test identical words match."""
        assert strings_match("Ćirilica", "Ćirilica")

    def test_strings_match_converted_pair(self):
        """Test a converted Cyrillic word matches its Latin form."""
        assert strings_match(cyrillic_to_latin("Ћирилица"), "Ćirilica")
        assert strings_match("Ћирилица", "cirilica")

    def test_strings_match_empty(self):
        """Test empty values only match each other."""
        assert strings_match("", None)
        assert not strings_match("Edhem", "")

    def test_strings_match_punctuation_only(self):
        """Test punctuation-only text equals empty text once canonicalised."""
        assert strings_match("!!!", "")
        assert strings_match("--", None)
        assert not strings_match("!!!", "A")


class TestTokenSearch:
    """Tests for whole-word token lookup."""

    def test_search_form_splits_on_punctuation(self):
        """Test punctuation becomes a word break."""
        assert to_search_form("PREZIME/SURNAME") == "prezime surname"

    def test_contains_whole_word(self):
        """Test tokens match whole words only."""
        assert contains_token("PREZIME/SURNAME", ("SURNAME",))
        assert not contains_token("PREZIMENA", ("PREZIME",))

    def test_contains_phrase_cross_script(self):
        """Test phrases match across scripts."""
        assert contains_token("БОСНА И ХЕРЦЕГОВИНА", ("BOSNA I HERCEGOVINA",))
        assert contains_token("ПРЕЗИМЕ", ("PREZIME",))

    def test_contains_empty_text(self):
        """Test empty text contains nothing."""
        assert not contains_token("", ("IME",))
