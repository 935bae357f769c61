"""Tests for Arabic normalization, root families and lemma candidates."""

import pytest

from mufahris.core.arabic import (
    lemma_candidates,
    lemma_matches,
    normalize_for_match,
    normalize_for_search,
    normalize_root_family,
    roots_match,
)


@pytest.mark.parametrize("text", [
    "ٱلْحَمْدُ",
    "بِسْمِ",
    "ٱلرَّحْمَٰنِ",
    "مُوسَىٰ",
    "  عَصَايَ ",
    "قـــال",
    "",
])
def test_normalize_for_match_idempotent(text):
    once = normalize_for_match(text)
    assert normalize_for_match(once) == once


def test_normalize_for_match_strips_marks():
    assert normalize_for_match("ٱلْحَمْدُ") == "ٱلحمد"
    assert normalize_for_match("ٱلرَّحْمَٰنِ") == "ٱلرحمن"


def test_normalize_for_match_strips_tatweel_and_whitespace():
    assert normalize_for_match("  قـــال ") == "قال"


def test_normalize_for_match_none():
    assert normalize_for_match(None) == ""


def test_weak_final_spellings_share_a_family():
    families = {normalize_root_family(root) for root in ("عصا", "عصى", "عصي", "عصو")}
    assert families == {"عصى"}


def test_strong_root_family_unchanged():
    assert normalize_root_family("رحم") == "رحم"


@pytest.mark.parametrize("root_a, root_b, expected", [
    ("عصو", "عصا", True),
    ("سعي", "سعى", True),
    ("رَحِم", "رحم", True),
    ("رحم", "رحب", False),
    ("", "", False),
    ("رحم", None, False),
])
def test_roots_match(root_a, root_b, expected):
    assert roots_match(root_a, root_b) is expected


def test_lemma_candidates_strip_one_suffix():
    assert lemma_candidates("عصاك") == {"عصاك", "عصا"}
    assert lemma_candidates("كتابهم") == {"كتابهم", "كتاب"}


def test_lemma_candidates_keep_short_words():
    # removing the suffix would leave a single letter
    assert lemma_candidates("به") == {"به"}
    assert lemma_candidates("لك") == {"لك"}


def test_lemma_candidates_empty():
    assert lemma_candidates("") == set()
    assert lemma_candidates(None) == set()


def test_lemma_matches_through_suffix():
    assert lemma_matches("عَصَاكَ", "عَصَا")
    assert lemma_matches("عصا", "عَصَا")
    assert not lemma_matches("عصا", "عصاك")
    assert not lemma_matches("", "عصا")


@pytest.mark.parametrize("text, expected", [
    ("ٱلْحَمْدُ", "الحمد"),
    ("مُوسَىٰ", "موسي"),
    ("أَنزَلَ", "انزل"),
    ("إِيَّاكَ", "اياك"),
    ("ءَامَنُوا۟", "ءامنوا"),
    ("يُؤْمِنُونَ", "يومنون"),
    ("رَحْمَةً", "رحمه"),
    ("بِسْمِ   ٱللَّهِ", "بسم الله"),
])
def test_normalize_for_search(text, expected):
    assert normalize_for_search(text) == expected


def test_normalize_for_search_empty():
    assert normalize_for_search("") == ""
