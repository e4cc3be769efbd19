from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from log_search.datastore import Record, RecordStore
from log_search.errors import EngineSealedError
from log_search.inverted_index import InvertedIndex, intersect
from log_search.preprocess import TextPreprocessor
from log_search.ranking import rank


@dataclass
class SearchResponse:
    results: List[Record] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def time_ms(self) -> int:
        # whole milliseconds, truncated
        return int(self.elapsed_ms)

    @property
    def count(self) -> int:
        return len(self.results)

    def to_dict(self) -> Dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "count": self.count,
            "time_ms": self.time_ms,
        }


class SearchEngine:
    """In-memory AND search over log records.

    Records are loaded with ingest() in one or more batches, then the engine
    is sealed and only read from. Queries never write, so a sealed engine
    can be queried from many threads at once without locking.
    """

    def __init__(self, preprocessor: TextPreprocessor | None = None) -> None:
        self.preprocessor = preprocessor or TextPreprocessor()
        self.store = RecordStore()
        self.index = InvertedIndex()
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def ingest(self, batch: Iterable[Record]) -> None:
        if self._sealed:
            raise EngineSealedError("engine is serving queries; ingestion is closed")
        for record in batch:
            position = self.store.append(record)
            terms = self.preprocessor.distinct_terms(record.indexable_text())
            self.index.add(position, terms)

    def _matching_positions(self, terms: List[str]) -> List[int]:
        positions = self.index.postings(terms[0])
        for term in terms[1:]:
            positions = intersect(positions, self.index.postings(term))
        return positions

    def query(self, text: str) -> List[Record]:
        terms = self.preprocessor.tokenize(text)
        if not terms:
            return []
        positions = self._matching_positions(terms)
        return rank(self.store.get(p) for p in positions)

    def search(self, text: str) -> SearchResponse:
        t0 = time.perf_counter()
        results = self.query(text)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return SearchResponse(results=results, elapsed_ms=elapsed_ms)

    def __len__(self) -> int:
        return len(self.store)
