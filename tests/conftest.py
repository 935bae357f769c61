"""Shared fixtures for the Mufahris test suite."""

import pytest

from mufahris.config import reset_settings
from mufahris.models import CorpusToken, Morphology, PartOfSpeech


# Quranic Arabic Corpus style annotation for Al-Fatiha 1:1, plus a
# rootless pronoun, a malformed line and a comment.
ANNOTATION_TEXT = "\n".join([
    "# Quranic Arabic Corpus (morphology) sample",
    "LOCATION\tFORM\tTAG\tFEATURES",
    "(1:1:1:1)\tbi\tP\tPREFIX|bi+",
    "(1:1:1:2)\tsomi\tN\tSTEM|POS:N|LEM:{som|ROOT:smw|M|GEN",
    "(1:1:2:1)\t{ll~ahi\tPN\tSTEM|POS:PN|LEM:{ll~ah|ROOT:Alh|GEN",
    "(1:1:3:1)\t{l\tDET\tPREFIX|Al+",
    "(1:1:3:2)\tr~aHoma`ni\tADJ\tSTEM|POS:ADJ|LEM:r~aHoma`n|ROOT:rHm|MS|GEN",
    "",
    "(1:5:1:1)\t<iy~aAka\tPRON\tSTEM|POS:PRON|LEM:<iy~aA|2MS",
    "(1:5:2:1)\tnaEobudu\tV\tPREFIX|na+",
    "(1:5:2:2)\tnaEobudu\tV\tSTEM|POS:V|IMPF|LEM:Eabada|ROOT:Ebd|1P|MOOD:IND",
    "not a data line",
    "(1:5:3)\tbroken\tN\tSTEM|ROOT:xyz",
])


def make_token(
    token_id: str,
    root: str = "",
    lemma: str = "",
    text: str | None = None,
    pos: PartOfSpeech = PartOfSpeech.NOUN,
) -> CorpusToken:
    """Token whose location is taken from its id."""
    sura, ayah, position = (int(part) for part in token_id.split(":"))
    return CorpusToken(
        id=token_id,
        sura=sura,
        ayah=ayah,
        position=position,
        text=text if text is not None else (lemma or token_id),
        root=root,
        lemma=lemma,
        pos=pos,
        morphology=Morphology(),
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Every test starts from default settings."""
    for name in (
        "MUFAHRIS_MORPHOLOGY_PATH",
        "MUFAHRIS_DEFAULT_WINDOW_DISTANCE",
        "MUFAHRIS_DEFAULT_MIN_FREQUENCY",
        "MUFAHRIS_SAMPLE_LIMIT",
        "MUFAHRIS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def annotation_text() -> str:
    return ANNOTATION_TEXT


@pytest.fixture
def fixture_tokens() -> list[CorpusToken]:
    """12 tokens over 3 ayahs in 2 surahs; R-1 occurs 4 times in 3 ayahs."""
    rows = [
        ("1:1:1", "R-1"),
        ("1:1:2", "R-2"),
        ("1:1:3", "R-3"),
        ("1:1:4", "R-1"),
        ("1:2:1", "R-2"),
        ("1:2:2", "R-4"),
        ("1:2:3", "R-5"),
        ("1:2:4", "R-1"),
        ("2:1:1", "R-1"),
        ("2:1:2", "R-3"),
        ("2:1:3", "R-6"),
        ("2:1:4", "R-4"),
    ]
    return [make_token(token_id, root=root, lemma=root.replace("R", "L")) for token_id, root in rows]


@pytest.fixture
def arabic_tokens() -> list[CorpusToken]:
    """Tokens around the staff of Musa (Ta-Ha 20 and Al-A'raf 7)."""
    return [
        make_token("7:117:1", root="عصو", lemma="عَصَا", text="عَصَاكَ"),
        make_token("7:117:2", root="لقف", lemma="لَقِفَ", text="تَلْقَفُ", pos=PartOfSpeech.VERB),
        make_token("20:17:1", root="", lemma="مَا", text="وَمَا", pos=PartOfSpeech.PARTICLE),
        make_token("20:17:2", root="", lemma="تِلْكَ", text="تِلْكَ", pos=PartOfSpeech.PRONOUN),
        make_token("20:17:3", root="يمن", lemma="يَمِين", text="بِيَمِينِكَ"),
        make_token("20:17:4", root="وسي", lemma="مُوسَىٰ", text="يَٰمُوسَىٰ"),
        make_token("20:18:1", root="عصا", lemma="عَصَا", text="عَصَايَ"),
        make_token("20:20:1", root="سعي", lemma="سَعَىٰ", text="تَسْعَىٰ", pos=PartOfSpeech.VERB),
        make_token("20:20:2", root="حيي", lemma="حَيَّة", text="حَيَّةٌ"),
        make_token("20:21:1", root="عصى", lemma="عَصَا", text="عَصَا"),
    ]
