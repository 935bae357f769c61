"""
Basic usage example for Mufahris library.

This example demonstrates the core workflow:
1. Parse the morphology annotation
2. Build corpus tokens, indexes and frequencies
3. Query the index and list collocations

Usage:
    python examples/basic_usage.py quranic-corpus-morphology-0.4.txt
"""

import json
import sys

from mufahris import configure
from mufahris._logging import configure_logging
from mufahris.core import (
    build_indexes,
    calculate_frequencies,
    get_collocations,
    get_pair_cooccurrence,
    parse_search_query,
    query,
)
from mufahris.data import MorphologyCache, tokens_from_morphology
from mufahris.models import CollocationOptions, CollocationTerm, TermKind, WindowType


def analyse(morphology_path: str, root: str = "رحم"):
    """
    Index the corpus and report on one root.

    Args:
        morphology_path: Path to the morphology annotation file
        root: Arabic root to analyse

    Returns:
        Top collocations as dictionaries
    """
    print(f"Analysing root {root} from {morphology_path}")
    print("=" * 50)

    # Step 1: Parse annotation
    print("\n📖 Step 1: Parsing morphology annotation...")

    cache = MorphologyCache()
    morphology = cache.get(morphology_path)
    tokens = tokens_from_morphology(morphology)
    print(f"   Parsed {len(morphology)} words into {len(tokens)} tokens")

    # Step 2: Indexes and frequencies
    print("\n🗂️  Step 2: Building indexes and frequencies...")

    indexes = build_indexes(tokens)
    freq = calculate_frequencies(tokens)
    print(f"   {indexes.stats()}")
    print(f"   {freq.total_ayahs} ayahs in {freq.total_surahs} surahs")

    # Step 3: Structured query
    print("\n🔎 Step 3: Querying...")

    parsed = parse_search_query(f"root:{root} pos:n")
    ids = query(indexes, parsed.to_filters())
    print(f"   {len(ids)} nouns with root {root}")
    for token_id in ids[:5]:
        print(f"   - {token_id}")

    # Step 4: Collocations
    print("\n🔗 Step 4: Collocations (ayah window)...")

    options = CollocationOptions(window_type=WindowType.AYAH, min_frequency=3)
    results = get_collocations(root, tokens, freq, options)
    for result in results[:10]:
        print(f"   {result.term}: count={result.count}, pmi={result.pmi:.2f}")

    if results:
        partner = CollocationTerm(kind=TermKind.ROOT, value=results[0].term)
        pair = get_pair_cooccurrence(root, partner, tokens, {"window_type": "ayah"})
        print(f"\n   {root} + {partner.value}: {pair.cooccurrence_count} shared ayahs")

    return [r.model_dump(mode="json") for r in results[:10]]


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    configure(morphology_path=sys.argv[1])
    configure_logging()
    output = analyse(sys.argv[1], *sys.argv[2:3])
    print(json.dumps(output, ensure_ascii=False, indent=2))
