"""
Root to lemma flow aggregation.
"""

from typing import Iterable

from mufahris.models import CorpusToken, RootWordFlow


def build_root_word_flows(tokens: Iterable[CorpusToken]) -> list[RootWordFlow]:
    """
    Group tokens by their (root, lemma) pair.

    Returns:
        Flows sorted by count descending, then root ascending
    """
    flows: dict[tuple[str, str], RootWordFlow] = {}

    for token in tokens:
        key = (token.root, token.lemma)
        flow = flows.get(key)
        if flow is None:
            flow = RootWordFlow(root=token.root, lemma=token.lemma)
            flows[key] = flow
        flow.count += 1
        flow.token_ids.append(token.id)

    return sorted(flows.values(), key=lambda f: (-f.count, f.root))


def unique_roots(tokens: Iterable[CorpusToken]) -> list[str]:
    """Distinct roots in sorted order (the empty root included if present)."""
    return sorted({token.root for token in tokens})
