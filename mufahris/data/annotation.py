"""
Morphology annotation parser.

Parses the Quranic Arabic Corpus morphology annotation (one line per
segment) and merges the segments of each surface word into a single
MorphologyRecord.

Line format::

    (sura:ayah:word:segment)<TAB>form<TAB>tag<TAB>feature|feature|...

Example::

    (1:1:1:1)	bi	P	PREFIX|bi+
    (1:1:1:2)	somi	N	STEM|POS:N|LEM:{som|ROOT:smw|M|GEN
"""

import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from mufahris._logging import log_line_skipped, log_parse_complete
from mufahris.config import get_settings
from mufahris.core.transliteration import decode
from mufahris.exceptions import MorphologyDataError
from mufahris.models import MorphologyRecord, PartOfSpeech, RawSegment


LOCATION_RE = re.compile(r"\((\d+):(\d+):(\d+):(\d+)\)")
COMMENT_PREFIX = "#"
MIN_FIELDS = 4

RESERVED_FEATURES = ("ROOT", "LEM", "POS")

_PRONOUN_TAGS = frozenset({"PRON", "REL", "DEM"})
_PARTICLE_TAGS = frozenset({
    "P",
    "CONJ",
    "DET",
    "REM",
    "INL",
    "VOC",
    "NEG",
    "INTG",
    "COND",
    "SUB",
    "RSLT",
    "T",
})


def normalize_pos(tag: str | None) -> PartOfSpeech:
    """
    Collapse a fine-grained annotation tag to a coarse part of speech.

    Unrecognized tags default to Noun.

    Examples:
        >>> normalize_pos("V")
        <PartOfSpeech.VERB: 'V'>
        >>> normalize_pos("DEM")
        <PartOfSpeech.PRONOUN: 'PRON'>
    """
    pos = (tag or "").strip().upper()
    if pos.startswith("V"):
        return PartOfSpeech.VERB
    if pos == "ADJ":
        return PartOfSpeech.ADJECTIVE
    if pos in _PRONOUN_TAGS:
        return PartOfSpeech.PRONOUN
    if pos in _PARTICLE_TAGS:
        return PartOfSpeech.PARTICLE
    return PartOfSpeech.NOUN


def extract_feature(features: Iterable[str], key: str) -> Optional[str]:
    """Value of the first ``KEY:value`` feature token, or None."""
    prefix = f"{key}:"
    for token in features:
        if token.startswith(prefix):
            return token[len(prefix):]
    return None


def build_feature_map(features: Iterable[str]) -> dict[str, str]:
    """
    Open feature map of a segment.

    ``KEY:VALUE`` tokens map key to value, flag tokens map to "true".
    Reserved ROOT, LEM and POS tokens are left out.
    """
    feature_map: dict[str, str] = {}
    for token in features:
        if not token or token.startswith(tuple(f"{k}:" for k in RESERVED_FEATURES)):
            continue
        if ":" in token:
            key, value = token.split(":", 1)
            if key and value:
                feature_map[key] = value
        else:
            feature_map[token] = "true"
    return feature_map


def parse_segment_line(line: str) -> Optional[RawSegment]:
    """
    Parse one annotation line.

    Returns:
        RawSegment, or None for comment, blank and malformed lines
    """
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    parts = line.split("\t")
    if len(parts) < MIN_FIELDS:
        return None

    match = LOCATION_RE.search(parts[0])
    if not match:
        return None

    sura, ayah, word, segment = (int(g) for g in match.groups())
    if min(sura, ayah, word, segment) < 1:
        return None

    return RawSegment(
        sura=sura,
        ayah=ayah,
        word=word,
        segment=segment,
        form=parts[1].strip(),
        tag=parts[2].strip(),
        features=[token for token in parts[3].strip().split("|") if token],
    )


@dataclass
class _RecordBuilder:
    """Mutable merge state of one word location."""
    pos: PartOfSpeech
    root: str = ""
    lemma: str = ""
    features: dict[str, str] = field(default_factory=dict)
    stem: Optional[str] = None
    has_root: bool = False

    def add(self, segment: RawSegment) -> None:
        if self.has_root:
            return

        root = extract_feature(segment.features, "ROOT")
        lemma = extract_feature(segment.features, "LEM")
        pos = normalize_pos(extract_feature(segment.features, "POS") or segment.tag or "N")

        if root:
            self.root = decode(root)
            if lemma:
                self.lemma = decode(lemma)
            self.pos = pos
            self.features = build_feature_map(segment.features)
            self.stem = self.lemma or self.stem
            self.has_root = True
            return

        if not self.lemma and lemma:
            self.lemma = decode(lemma)
        if not self.lemma and segment.form:
            self.lemma = decode(segment.form)
        if not self.features:
            self.features = build_feature_map(segment.features)
        self.stem = self.lemma or self.stem

    def build(self) -> MorphologyRecord:
        return MorphologyRecord(
            root=self.root,
            lemma=self.lemma,
            pos=self.pos,
            features=self.features,
            stem=self.stem,
        )


def merge_segments(segments: Iterable[RawSegment]) -> dict[str, MorphologyRecord]:
    """
    Merge segments into one record per word location.

    The first segment carrying ROOT is canonical: it supplies root, lemma,
    part of speech and features, and later segments of that word are
    ignored. Words without any ROOT segment keep an empty root, the first
    available lemma (or decoded surface form) and the first segment's
    part of speech.

    Args:
        segments: Parsed segments in source order

    Returns:
        Records keyed by "sura:ayah:word", in source order
    """
    builders: dict[str, _RecordBuilder] = {}
    for segment in segments:
        key = segment.word_key
        builder = builders.get(key)
        if builder is None:
            pos_raw = extract_feature(segment.features, "POS") or segment.tag or "N"
            builder = _RecordBuilder(pos=normalize_pos(pos_raw))
            builders[key] = builder
        builder.add(segment)

    return {key: builder.build() for key, builder in builders.items()}


def parse_annotation_text(text: str) -> dict[str, MorphologyRecord]:
    """
    Parse annotation text into merged morphology records.

    Comment and blank lines are ignored; malformed lines are skipped
    without failing the batch.

    Args:
        text: Newline-delimited annotation text

    Returns:
        Records keyed by "sura:ayah:word", in source order
    """
    start = time.time()
    segments: list[RawSegment] = []
    skipped = 0

    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        segment = parse_segment_line(line)
        if segment is None:
            skipped += 1
            log_line_skipped(line_no, "malformed location or too few fields")
            continue
        segments.append(segment)

    records = merge_segments(segments)
    log_parse_complete(len(records), skipped, time.time() - start)
    return records


def load_annotation_file(path: str | Path | None = None) -> dict[str, MorphologyRecord]:
    """
    Read and parse a morphology annotation file.

    Args:
        path: File path (default: settings.morphology_path)

    Returns:
        Records keyed by "sura:ayah:word"

    Raises:
        MorphologyDataError: If no path is configured or the file cannot be read
    """
    if path is None:
        path = get_settings().morphology_path
    if path is None:
        raise MorphologyDataError(
            "No morphology file given. "
            "Pass a path or set the MUFAHRIS_MORPHOLOGY_PATH env var."
        )

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise MorphologyDataError("Morphology annotation file not found", path=path)
    except (OSError, UnicodeDecodeError) as e:
        raise MorphologyDataError(f"Failed to read morphology annotation: {e}", path=path)

    return parse_annotation_text(text)
