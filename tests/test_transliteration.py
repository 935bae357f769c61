"""Tests for Buckwalter decoding and contextual hamza seats."""

import pytest

from mufahris.core.arabic import normalize_for_match
from mufahris.core.transliteration import (
    DAMMA,
    FATHA,
    HAMZA,
    HAMZA_ALIF,
    HAMZA_WAW,
    HAMZA_YA,
    KASRA,
    STRIP_SYMBOLS,
    decode,
    decode_hamza_seat,
)


@pytest.mark.parametrize("source, expected", [
    ("ktb", "كتب"),
    ("rHm", "رحم"),
    ("smw", "سمو"),
    ("Ebd", "عبد"),
    ("qwl", "قول"),
    ("$y'", "شيء"),
    ("mwsY", "موسى"),
    ("*hb", "ذهب"),
])
def test_decode_base_letters(source, expected):
    assert decode(source) == expected


def test_decode_empty():
    assert decode("") == ""


def test_decode_keeps_diacritics():
    assert decode("kataba") == "ك" + FATHA + "ت" + FATHA + "ب" + FATHA


def test_decode_alif_wasla():
    assert normalize_for_match(decode("{ll~ah")) == "ٱلله"


@pytest.mark.parametrize("symbol", sorted(STRIP_SYMBOLS))
def test_strip_symbols_dropped(symbol):
    assert decode(f"k{symbol}tb") == "كتب"


def test_segment_boundary_dropped():
    assert decode("Al+") == "ال"


def test_unknown_characters_pass_through():
    assert decode("R-1") == "R-1"


class TestContextualHamza:
    def test_after_kasra(self):
        assert decode("bi#") == "ب" + KASRA + HAMZA_YA

    def test_after_yeh(self):
        assert decode("y#") == "ي" + HAMZA_YA

    def test_after_alif_maqsura(self):
        assert decode("Y#") == "ى" + HAMZA_YA

    def test_after_damma(self):
        assert decode("su#") == "س" + DAMMA + HAMZA_WAW

    def test_after_waw(self):
        assert decode("w#") == "و" + HAMZA_WAW

    def test_before_fatha(self):
        assert decode("#a") == HAMZA_ALIF + FATHA

    def test_before_fathatan(self):
        assert decode("#F").startswith(HAMZA_ALIF)

    def test_before_fatha_across_stripped_symbols(self):
        assert decode("#_a") == HAMZA_ALIF + FATHA
        assert decode("#+^a") == HAMZA_ALIF + FATHA

    def test_stripped_tail_is_bare(self):
        assert decode("ma#_") == "م" + FATHA + HAMZA

    def test_bare(self):
        assert decode("ma#") == "م" + FATHA + HAMZA

    def test_bare_at_start(self):
        assert decode("#") == HAMZA

    def test_kasra_beats_following_fatha(self):
        assert decode("bi#a") == "ب" + KASRA + HAMZA_YA + FATHA

    def test_new_letter_resets_vowel(self):
        # the kasra belongs to b, not to t
        assert decode("bit#") == "ب" + KASRA + "ت" + HAMZA

    def test_shadda_keeps_vowel(self):
        assert decode("bi~#") == "ب" + KASRA + "ّ" + HAMZA_YA


@pytest.mark.parametrize("last_vowel, last_letter, next_symbol, expected", [
    (KASRA, None, None, HAMZA_YA),
    (None, "ي", "a", HAMZA_YA),
    (DAMMA, None, "a", HAMZA_WAW),
    (None, "و", None, HAMZA_WAW),
    (None, None, "a", HAMZA_ALIF),
    (FATHA, "م", "F", HAMZA_ALIF),
    (FATHA, "م", "o", HAMZA),
    (None, None, None, HAMZA),
])
def test_decode_hamza_seat(last_vowel, last_letter, next_symbol, expected):
    assert decode_hamza_seat(last_vowel, last_letter, next_symbol) == expected
