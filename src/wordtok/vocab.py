"""Bidirectional word <-> id mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from wordtok.errors import VocabularyOverflow


@dataclass
class Vocabulary:
    """Dense, append-only vocabulary.

    ``forward`` and ``reverse`` are kept as exact inverses: ids run from 0 in
    registration order and are never reassigned or removed.
    """

    forward: Dict[str, int] = field(default_factory=dict)
    reverse: Dict[int, str] = field(default_factory=dict)
    max_size: Optional[int] = None

    @classmethod
    def from_words(cls, words: Iterable[str], max_size: Optional[int] = None) -> "Vocabulary":
        vocab = cls(max_size=max_size)
        for word in words:
            vocab.add(word)
        return vocab

    def add(self, word: str) -> int:
        existing = self.forward.get(word)
        if existing is not None:
            return existing
        new_id = len(self.forward)
        if self.max_size is not None and new_id >= self.max_size:
            raise VocabularyOverflow(
                f"Cannot add {word!r}: vocabulary is full at {self.max_size} entries"
            )
        self.forward[word] = new_id
        self.reverse[new_id] = word
        return new_id

    def id_of(self, word: str) -> Optional[int]:
        return self.forward.get(word)

    def word_of(self, idx: int) -> Optional[str]:
        return self.reverse.get(idx)

    def words(self) -> List[str]:
        return [self.reverse[i] for i in range(len(self.reverse))]

    def __contains__(self, word: object) -> bool:
        return word in self.forward

    def __len__(self) -> int:
        return len(self.forward)
