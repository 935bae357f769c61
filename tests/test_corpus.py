"""Tests for corpus token assembly and the morphology cache."""

from pathlib import Path

import pytest

from mufahris.config import configure
from mufahris.data.annotation import parse_annotation_text
from mufahris.data.cache import MorphologyCache
from mufahris.data.corpus import (
    FALLBACK_TEXT,
    build_corpus_tokens,
    morphology_from_tokens,
    tokens_from_morphology,
)
from mufahris.exceptions import MorphologyDataError
from mufahris.models import MorphologyRecord, PartOfSpeech


@pytest.fixture
def morphology(annotation_text):
    return parse_annotation_text(annotation_text)


class TestBuildCorpusTokens:
    def test_join_with_words(self, morphology):
        words = [
            {"sura": 1, "ayah": 1, "position": 1, "text": "بِسْمِ", "gloss": "In (the) name"},
            {"sura": 1, "ayah": 1, "position": 2, "text": "ٱللَّهِ", "gloss": "(of) Allah"},
        ]
        tokens = build_corpus_tokens(words, morphology)

        assert [t.id for t in tokens] == ["1:1:1", "1:1:2"]
        assert tokens[0].root == "سمو"
        assert tokens[0].text == "بِسْمِ"
        assert tokens[0].morphology.gloss == "In (the) name"
        assert tokens[0].morphology.features["GEN"] == "true"
        assert tokens[1].root == "اله"
        assert tokens[1].ayah_key == "1:1"

    def test_word_objects(self, morphology):
        class Word:
            sura = 1
            ayah = 5
            position = 2
            text = "نَعْبُدُ"

        tokens = build_corpus_tokens([Word()], morphology)
        assert tokens[0].pos == PartOfSpeech.VERB
        assert tokens[0].morphology.gloss is None

    def test_missing_record_falls_back(self, morphology):
        words = [{"sura": 114, "ayah": 1, "position": 1, "text": "قُلْ"}]
        token = build_corpus_tokens(words, morphology)[0]

        assert token.root == ""
        assert token.lemma == "قُلْ"
        assert token.pos == PartOfSpeech.NOUN
        assert token.morphology.features == {}


class TestTokensFromMorphology:
    def test_sorted_and_text_fallback(self, morphology):
        tokens = tokens_from_morphology(morphology)

        assert [t.id for t in tokens] == ["1:1:1", "1:1:2", "1:1:3", "1:5:1", "1:5:2"]
        assert all(t.text == (t.morphology.stem or t.lemma) for t in tokens)

    def test_sort_is_numeric(self):
        records = {
            "2:10:1": MorphologyRecord(root="قول", lemma="قَالَ"),
            "2:9:1": MorphologyRecord(root="خدع", lemma="خَدَعَ"),
            "10:1:1": MorphologyRecord(root="كتب", lemma="كِتَاب"),
        }
        assert [t.id for t in tokens_from_morphology(records)] == ["2:9:1", "2:10:1", "10:1:1"]

    def test_root_and_placeholder_fallback(self):
        records = {
            "1:1:1": MorphologyRecord(root="سمو"),
            "1:1:2": MorphologyRecord(),
        }
        tokens = tokens_from_morphology(records)
        assert tokens[0].text == "سمو"
        assert tokens[1].text == FALLBACK_TEXT

    def test_malformed_keys_skipped(self):
        records = {
            "1:1": MorphologyRecord(root="سمو"),
            "0:1:1": MorphologyRecord(root="سمو"),
            "1:1:1": MorphologyRecord(root="سمو"),
        }
        assert [t.id for t in tokens_from_morphology(records)] == ["1:1:1"]

    def test_morphology_round_trip(self, morphology):
        tokens = tokens_from_morphology(morphology)
        recovered = morphology_from_tokens(tokens)
        assert recovered["1:5:2"].root == morphology["1:5:2"].root
        assert recovered["1:5:2"].features == morphology["1:5:2"].features


class TestMorphologyCache:
    def test_loads_once(self, tmp_path: Path):
        calls = []

        def loader(path):
            calls.append(path)
            return {"1:1:1": MorphologyRecord(root="سمو")}

        cache = MorphologyCache(loader=loader)
        first = cache.get(tmp_path / "a.txt")
        second = cache.get(str(tmp_path / "a.txt"))

        assert first is second
        assert len(calls) == 1
        assert tmp_path / "a.txt" in cache
        assert len(cache) == 1

    def test_separate_paths(self, tmp_path: Path):
        cache = MorphologyCache(loader=lambda path: {})
        cache.get(tmp_path / "a.txt")
        cache.get(tmp_path / "b.txt")
        assert len(cache) == 2

        cache.clear()
        assert len(cache) == 0

    def test_default_loader(self, tmp_path: Path, annotation_text):
        path = tmp_path / "morphology.txt"
        path.write_text(annotation_text, encoding="utf-8")
        configure(morphology_path=path)

        cache = MorphologyCache()
        assert len(cache.get()) == 5
        assert path in cache

    def test_no_path(self):
        with pytest.raises(MorphologyDataError):
            MorphologyCache().get()

    def test_loader_errors_propagate(self, tmp_path: Path):
        with pytest.raises(MorphologyDataError):
            MorphologyCache().get(tmp_path / "missing.txt")
