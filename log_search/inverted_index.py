from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence


class InvertedIndex:
    """Term -> postings list of record positions, in ingestion order."""

    def __init__(self) -> None:
        self._postings: Dict[str, List[int]] = defaultdict(list)

    def add(self, position: int, terms: Iterable[str]) -> None:
        # callers pass each term once per position
        for term in terms:
            self._postings[term].append(position)

    def postings(self, term: str) -> List[int]:
        # .get so lookups never create empty entries
        return self._postings.get(term, [])

    def __contains__(self, term: str) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)


def intersect(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Positions present in both lists.

    A membership set is built from the smaller list and the larger one is
    probed against it, so the result follows the larger list's order.
    """
    if len(a) > len(b):
        a, b = b, a
    if not a:
        return []
    members = set(a)
    return [p for p in b if p in members]

