from __future__ import annotations

from dataclasses import dataclass
from typing import List

from nltk.tokenize import WhitespaceTokenizer


@dataclass(frozen=True)
class PreprocessConfig:
    lowercase: bool = True


class TextPreprocessor:
    """Turns free text into index terms.

    Terms are runs of non-whitespace characters. Punctuation is kept as part
    of the term and nothing is stemmed or dropped, so ``"Disk:"`` and
    ``"disk"`` are different terms.
    """

    def __init__(self, config: PreprocessConfig | None = None) -> None:
        self.config = config or PreprocessConfig()
        self._splitter = WhitespaceTokenizer()

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        if self.config.lowercase:
            text = text.lower()
        return self._splitter.tokenize(text)

    def distinct_terms(self, text: str) -> List[str]:
        # first-occurrence order
        return list(dict.fromkeys(self.tokenize(text)))


_DEFAULT = TextPreprocessor()


def tokenize(text: str) -> List[str]:
    return _DEFAULT.tokenize(text)
