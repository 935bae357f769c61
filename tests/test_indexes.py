"""Tests for the inverted indexes and conjunctive queries."""

import dataclasses

import pytest

from mufahris.core.arabic import normalize_root_family
from mufahris.core.indexes import build_indexes, query
from mufahris.models import PartOfSpeech, QueryFilters


@pytest.fixture
def indexes(arabic_tokens):
    return build_indexes(arabic_tokens)


def test_build_indexes_stats(indexes, arabic_tokens):
    assert len(indexes) == len(arabic_tokens)
    stats = indexes.stats()
    assert stats["ayahs"] == 5
    assert stats["pos"] == 4
    # عصو, عصا and عصى collapse into one family
    assert "عصى" in indexes.by_root
    assert indexes.by_root["عصى"] == ["7:117:1", "20:18:1", "20:21:1"]


def test_indexes_are_read_only(indexes):
    with pytest.raises(dataclasses.FrozenInstanceError):
        indexes.order = {}
    with pytest.raises(dataclasses.FrozenInstanceError):
        indexes.by_root = {}


def test_rootless_tokens_not_in_root_index(indexes):
    assert all("20:17:1" not in ids for ids in indexes.by_root.values())
    assert "20:17:1" in indexes.by_ayah["20:17"]


def test_empty_filters_return_nothing(indexes):
    assert query(indexes) == []
    assert query(indexes, {}) == []
    assert query(indexes, QueryFilters()) == []
    assert query(indexes, root="", lemma=None) == []


def test_root_weak_final_variants(indexes):
    expected = ["7:117:1", "20:18:1", "20:21:1"]
    assert query(indexes, root="عصا") == expected
    assert query(indexes, root="عصو") == expected
    assert query(indexes, root="عصي") == expected


def test_root_with_diacritics(indexes):
    assert query(indexes, root="سَعَى") == ["20:20:1"]


def test_lemma_with_suffix(indexes):
    assert query(indexes, lemma="عصاك") == ["7:117:1", "20:18:1", "20:21:1"]


def test_lemma_surface_text(indexes):
    assert query(indexes, lemma="تسعى") == ["20:20:1"]


def test_pos_filter(indexes):
    assert query(indexes, pos="V") == ["7:117:2", "20:20:1"]
    assert query(indexes, pos=PartOfSpeech.VERB) == ["7:117:2", "20:20:1"]
    assert query(indexes, pos="verb", ayah="20:20") == ["20:20:1"]


def test_unknown_pos_returns_nothing(indexes):
    assert query(indexes, pos="XYZ") == []


def test_ayah_filter_keeps_corpus_order(indexes):
    assert query(indexes, ayah="20:17") == ["20:17:1", "20:17:2", "20:17:3", "20:17:4"]


def test_conjunction(indexes):
    assert query(indexes, root="عصو", ayah="20:18") == ["20:18:1"]
    assert query(indexes, root="عصو", pos="V") == []


def test_mapping_and_keyword_filters(indexes):
    assert query(indexes, {"root": "عصا", "ayah": "7:117"}) == ["7:117:1"]
    # keywords override the mapping
    assert query(indexes, {"ayah": "7:117"}, ayah="20:21", root="عصا") == ["20:21:1"]


def test_query_filters_model(indexes):
    assert query(indexes, QueryFilters(pos=PartOfSpeech.PRONOUN)) == ["20:17:2"]


def test_unknown_values_return_nothing(indexes):
    assert query(indexes, root="زلزل") == []
    assert query(indexes, ayah="99:1") == []


def test_results_follow_token_order(arabic_tokens):
    reordered = list(reversed(arabic_tokens))
    indexes = build_indexes(reordered)
    assert query(indexes, root="عصا") == ["20:21:1", "20:18:1", "7:117:1"]


def test_every_rooted_token_is_found_by_its_root(indexes, arabic_tokens):
    for token in arabic_tokens:
        if token.root:
            assert token.id in query(indexes, root=token.root)
            assert normalize_root_family(token.root) in indexes.by_root


def test_build_indexes_empty():
    indexes = build_indexes([])
    assert len(indexes) == 0
    assert query(indexes, root="رحم") == []
