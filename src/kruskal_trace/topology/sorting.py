from __future__ import annotations

from typing import List, Sequence

from kruskal_trace.models import Edge


def _merge(left: List[Edge], right: List[Edge]) -> List[Edge]:
    out: List[Edge] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # left run wins on equal weight
        if right[j].weight < left[i].weight:
            out.append(right[j])
            j += 1
        else:
            out.append(left[i])
            i += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def stable_sort_by_weight(edges: Sequence[Edge]) -> List[Edge]:
    """Bottom-up merge sort by ascending weight.

    Equal-weight edges keep their input order, which makes every Kruskal
    trace reproducible. The input sequence is not modified.
    """
    runs: List[List[Edge]] = [[e] for e in edges]
    while len(runs) > 1:
        merged: List[List[Edge]] = []
        for k in range(0, len(runs) - 1, 2):
            merged.append(_merge(runs[k], runs[k + 1]))
        if len(runs) % 2:
            merged.append(runs[-1])
        runs = merged
    return runs[0] if runs else []
