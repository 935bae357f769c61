"""
Collocation analysis with pointwise mutual information.

For every occurrence of a target root or lemma, the engine scans a window
(the enclosing ayah, the enclosing surah, or +/- N tokens), counts each
collocate at most once per window, and scores it with

    PMI = log2((count * N) / (target_freq * collocate_freq))

where N and both frequencies come from the frequency table at the same
granularity as the window: token counts for distance windows, ayah
document frequencies for ayah windows, surah document frequencies for
surah windows.
"""

import math
import time
from collections import defaultdict
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from mufahris._logging import log_collocations_complete, log_frequencies_built
from mufahris.config import get_settings
from mufahris.core.arabic import (
    lemma_candidates,
    lemma_matches,
    normalize_for_match,
    normalize_root_family,
    roots_match,
)
from mufahris.exceptions import InvalidOptionsError
from mufahris.models import (
    CollocateFilter,
    CollocationOptions,
    CollocationResult,
    CollocationTerm,
    CorpusToken,
    FrequencyTable,
    PairCooccurrenceResult,
    TermKind,
    WindowType,
)


TermLike = Union[str, CollocationTerm, Mapping[str, Any]]
OptionsLike = Union[CollocationOptions, Mapping[str, Any]]


def calculate_frequencies(tokens: Iterable[CorpusToken]) -> FrequencyTable:
    """
    Corpus-wide frequencies of every root and lemma.

    One pass accumulates raw token counts and, through per-value seen
    ayah/surah sets, ayah and surah document frequencies.

    Args:
        tokens: Corpus tokens

    Returns:
        FrequencyTable
    """
    start = time.time()
    total_tokens = 0
    ayah_ids: set[tuple[int, int]] = set()
    surah_ids: set[int] = set()

    raw: dict[TermKind, defaultdict[str, int]] = {
        TermKind.ROOT: defaultdict(int),
        TermKind.LEMMA: defaultdict(int),
    }
    seen_ayahs: dict[TermKind, defaultdict[str, set]] = {
        TermKind.ROOT: defaultdict(set),
        TermKind.LEMMA: defaultdict(set),
    }
    seen_surahs: dict[TermKind, defaultdict[str, set]] = {
        TermKind.ROOT: defaultdict(set),
        TermKind.LEMMA: defaultdict(set),
    }

    for token in tokens:
        total_tokens += 1
        ayah_id = (token.sura, token.ayah)
        ayah_ids.add(ayah_id)
        surah_ids.add(token.sura)

        for kind, value in ((TermKind.ROOT, token.root), (TermKind.LEMMA, token.lemma)):
            if not value:
                continue
            raw[kind][value] += 1
            seen_ayahs[kind][value].add(ayah_id)
            seen_surahs[kind][value].add(token.sura)

    def _doc_counts(seen: Mapping[str, set]) -> dict[str, int]:
        return {value: len(ids) for value, ids in seen.items()}

    table = FrequencyTable(
        total_tokens=total_tokens,
        total_ayahs=len(ayah_ids),
        total_surahs=len(surah_ids),
        root_frequencies=dict(raw[TermKind.ROOT]),
        root_ayah_frequencies=_doc_counts(seen_ayahs[TermKind.ROOT]),
        root_surah_frequencies=_doc_counts(seen_surahs[TermKind.ROOT]),
        lemma_frequencies=dict(raw[TermKind.LEMMA]),
        lemma_ayah_frequencies=_doc_counts(seen_ayahs[TermKind.LEMMA]),
        lemma_surah_frequencies=_doc_counts(seen_surahs[TermKind.LEMMA]),
    )
    log_frequencies_built(
        table.total_tokens, table.total_ayahs, table.total_surahs, time.time() - start
    )
    return table


def token_matches_term(token: CorpusToken, term: CollocationTerm) -> bool:
    """
    Whether a token is an occurrence of a term.

    Roots match by root family; lemmas match when a lemma candidate of the
    term equals the token's lemma or surface text.
    """
    return _term_matcher(term)(token)


def _term_matcher(term: CollocationTerm) -> Callable[[CorpusToken], bool]:
    """Predicate equivalent to token_matches_term, with the term normalized once."""
    if term.kind == TermKind.ROOT:
        family = normalize_root_family(term.value)

        def matches_root(token: CorpusToken) -> bool:
            return bool(family) and normalize_root_family(token.root) == family

        return matches_root

    candidates = lemma_candidates(term.value)

    def matches_lemma(token: CorpusToken) -> bool:
        for value in (token.lemma, token.text):
            normalized = normalize_for_match(value)
            if normalized and normalized in candidates:
                return True
        return False

    return matches_lemma


def token_matches_filter(token: CorpusToken, collocate_filter: Optional[CollocateFilter]) -> bool:
    """Whether a token passes a collocate filter (None passes everything)."""
    if collocate_filter is None:
        return True
    if collocate_filter.pos and token.pos not in collocate_filter.pos:
        return False
    if collocate_filter.lemma and not lemma_matches(collocate_filter.lemma, token.lemma, token.text):
        return False
    if collocate_filter.root and not roots_match(token.root, collocate_filter.root):
        return False
    return True


def _coerce_options(options: OptionsLike) -> CollocationOptions:
    if isinstance(options, CollocationOptions):
        resolved = options
    else:
        try:
            resolved = CollocationOptions.model_validate(dict(options))
        except ValidationError as e:
            errors = e.errors()
            name = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
            raise InvalidOptionsError(f"Invalid collocation options: {e}", option_name=name)

    settings = get_settings()
    updates = {}
    if resolved.distance is None:
        updates["distance"] = settings.default_window_distance
    if resolved.min_frequency is None:
        updates["min_frequency"] = settings.default_min_frequency
    if resolved.sample_limit is None:
        updates["sample_limit"] = settings.sample_limit
    return resolved.model_copy(update=updates) if updates else resolved


def _coerce_term(term: TermLike) -> CollocationTerm:
    try:
        return CollocationTerm.coerce(term)
    except ValidationError as e:
        raise InvalidOptionsError(f"Invalid collocation term: {e}", option_name="term")


def _window_bounds(
    tokens: Sequence[CorpusToken],
    i: int,
    window_type: WindowType,
    distance: int,
) -> tuple[int, int]:
    """Inclusive [start, end] of the window around tokens[i]."""
    if window_type == WindowType.DISTANCE:
        return max(0, i - distance), min(len(tokens) - 1, i + distance)

    center = tokens[i]
    if window_type == WindowType.AYAH:
        def same(t: CorpusToken) -> bool:
            return t.sura == center.sura and t.ayah == center.ayah
    else:
        def same(t: CorpusToken) -> bool:
            return t.sura == center.sura

    start = i
    while start > 0 and same(tokens[start - 1]):
        start -= 1
    end = i
    while end < len(tokens) - 1 and same(tokens[end + 1]):
        end += 1
    return start, end


def _window_id(token: CorpusToken, i: int, window_type: WindowType) -> tuple[str, str]:
    """(window id, display label) of the window centred on tokens[i]."""
    if window_type == WindowType.AYAH:
        label = f"{token.sura}:{token.ayah}"
        return label, label
    if window_type == WindowType.SURAH:
        return f"s:{token.sura}", f"{token.sura}"
    return f"idx:{i}", f"{token.sura}:{token.ayah}:{token.position}"


def _group_value(token: CorpusToken, group_by: TermKind) -> str:
    return token.root if group_by == TermKind.ROOT else token.lemma


def _term_frequency(
    freq_table: FrequencyTable,
    term: CollocationTerm,
    window_type: WindowType,
) -> int:
    """Frequency of a target term, summed over all stored spellings it matches."""
    source = freq_table.source_for(term.kind, window_type)

    # Lemma targets count lemma keys only. Occurrences matched through
    # surface text alone add to the window count but not to this baseline.
    if term.kind == TermKind.LEMMA:
        candidates = lemma_candidates(term.value)
        if not candidates:
            return 0
        return sum(
            count for key, count in source.items()
            if normalize_for_match(key) in candidates
        )

    family = normalize_root_family(term.value)
    if not family:
        return 0
    return sum(count for key, count in source.items() if normalize_root_family(key) == family)


def _collocate_frequency(
    freq_table: FrequencyTable,
    group_by: TermKind,
    value: str,
    window_type: WindowType,
) -> int:
    """Frequency of a collocate value: exact key, else all keys with the same matching form."""
    source = freq_table.source_for(group_by, window_type)
    if value in source:
        return source[value]

    normalized = normalize_for_match(value)
    if not normalized:
        return 0
    return sum(count for key, count in source.items() if normalize_for_match(key) == normalized)


def get_collocations(
    target: TermLike,
    tokens: Sequence[CorpusToken],
    freq_table: FrequencyTable,
    options: OptionsLike,
) -> list[CollocationResult]:
    """
    Collocates of a target term, scored by PMI.

    Args:
        target: Root string, CollocationTerm or mapping with kind/value
        tokens: The full corpus in corpus order
        freq_table: Frequencies from calculate_frequencies over ``tokens``
        options: CollocationOptions or mapping (e.g. {"window_type": "ayah"})

    Returns:
        Results with count >= min_frequency, sorted by PMI descending then
        count descending. Collocates with a zero frequency baseline are
        left out.

    Raises:
        InvalidOptionsError: If options or the target cannot be validated
    """
    opts = _coerce_options(options)
    target_term = _coerce_term(target)
    window_type = opts.window_type
    is_target = _term_matcher(target_term)
    is_pair = _term_matcher(opts.pair_term) if opts.pair_term is not None else None

    target_indices = [i for i, token in enumerate(tokens) if is_target(token)]
    if not target_indices:
        log_collocations_complete(str(target_term), window_type.value, 0, 0)
        return []

    counts: dict[str, int] = {}
    counted_windows: defaultdict[str, set[str]] = defaultdict(set)
    sample_lemmas: defaultdict[str, dict[str, None]] = defaultdict(dict)
    sample_windows: defaultdict[str, dict[str, None]] = defaultdict(dict)
    processed_windows: set[str] = set()

    for i in target_indices:
        window_id, window_label = _window_id(tokens[i], i, window_type)
        # Ayah and surah windows are shared by every occurrence inside them.
        if window_type != WindowType.DISTANCE:
            if window_id in processed_windows:
                continue
            processed_windows.add(window_id)
        start, end = _window_bounds(tokens, i, window_type, opts.distance)

        for j in range(start, end + 1):
            if j == i:
                continue
            collocate = tokens[j]
            value = _group_value(collocate, opts.group_by)
            if not value:
                continue
            if is_target(collocate):
                continue
            if is_pair is not None and not is_pair(collocate):
                continue
            if not token_matches_filter(collocate, opts.filter):
                continue

            if window_id not in counted_windows[value]:
                counted_windows[value].add(window_id)
                counts[value] = counts.get(value, 0) + 1
            if collocate.lemma:
                sample_lemmas[value][collocate.lemma] = None
            sample_windows[value][window_label] = None

    n_windows = freq_table.total_for(window_type)
    target_freq = _term_frequency(freq_table, target_term, window_type)

    results: list[CollocationResult] = []
    if target_freq == 0 or n_windows == 0:
        log_collocations_complete(str(target_term), window_type.value, len(target_indices), 0)
        return results

    for value, count in counts.items():
        if count < opts.min_frequency:
            continue
        collocate_freq = _collocate_frequency(freq_table, opts.group_by, value, window_type)
        if collocate_freq == 0:
            continue

        pmi = math.log2((count * n_windows) / (target_freq * collocate_freq))
        results.append(CollocationResult(
            term=value,
            group_by=opts.group_by,
            count=count,
            pmi=pmi,
            sample_lemmas=list(sample_lemmas[value])[: opts.sample_limit],
            sample_windows=list(sample_windows[value])[: opts.sample_limit],
        ))

    results.sort(key=lambda r: (-r.pmi, -r.count))
    log_collocations_complete(str(target_term), window_type.value, len(target_indices), len(results))
    return results


def get_pair_cooccurrence(
    term_a: TermLike,
    term_b: TermLike,
    tokens: Sequence[CorpusToken],
    options: OptionsLike,
) -> PairCooccurrenceResult:
    """
    Windows containing two terms and their overlap, without PMI.

    Ayah and surah windows are compared as sets of "sura:ayah" / "sura"
    labels. For distance windows, each occurrence of A opens a window
    labelled "sura:ayah:position", and it is shared when B occurs within
    +/- distance tokens.

    Args:
        term_a: First term (root string, CollocationTerm or mapping)
        term_b: Second term
        tokens: The full corpus in corpus order
        options: Uses window_type and distance only

    Returns:
        PairCooccurrenceResult
    """
    opts = _coerce_options(options)
    a = _coerce_term(term_a)
    b = _coerce_term(term_b)

    match_a = _term_matcher(a)
    match_b = _term_matcher(b)
    a_indices = []
    b_indices = []
    for i, token in enumerate(tokens):
        if match_a(token):
            a_indices.append(i)
        if match_b(token):
            b_indices.append(i)

    windows_a: dict[str, None] = {}
    windows_b: dict[str, None] = {}
    shared: dict[str, None] = {}

    if opts.window_type == WindowType.DISTANCE:
        b_set = set(b_indices)
        for i in a_indices:
            label = _window_id(tokens[i], i, WindowType.DISTANCE)[1]
            windows_a[label] = None
            start, end = _window_bounds(tokens, i, WindowType.DISTANCE, opts.distance)
            if any(j in b_set for j in range(start, end + 1) if j != i):
                shared[label] = None
        for i in b_indices:
            windows_b[_window_id(tokens[i], i, WindowType.DISTANCE)[1]] = None
    else:
        for i in a_indices:
            windows_a[_window_id(tokens[i], i, opts.window_type)[1]] = None
        for i in b_indices:
            windows_b[_window_id(tokens[i], i, opts.window_type)[1]] = None
        for label in windows_a:
            if label in windows_b:
                shared[label] = None

    return PairCooccurrenceResult(
        term_a=a,
        term_b=b,
        windows_a=list(windows_a),
        windows_b=list(windows_b),
        shared_windows=list(shared),
    )
