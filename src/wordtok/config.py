"""Configuration dataclasses for the word tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

UNKNOWN_OFFSET = 1000

SEED_TOKENS: Tuple[str, ...] = (
    # Articles
    "a", "an", "the",
    # Prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "down",
    # Conjunctions
    "and", "or", "but", "if", "when", "while", "because", "although",
    # Common verbs
    "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "can", "may", "might", "must",
    # Common words
    "hello", "world", "test", "text", "token", "encode", "decode", "this", "that", "these", "those",
    "here", "there", "where", "what", "why", "how", "who", "which", "whose",
)


@dataclass
class TokenizerConfig:
    # Added to a character's code point when its word is out of vocabulary.
    # Doubles as the vocabulary capacity: real ids must stay below it.
    unknown_offset: int = UNKNOWN_OFFSET

    # Registered in order as ids 0..N-1. Changing this breaks existing id streams.
    seed_tokens: Tuple[str, ...] = SEED_TOKENS

    def __post_init__(self) -> None:
        if self.unknown_offset <= 0:
            raise ValueError(f"unknown_offset must be positive, got {self.unknown_offset}")
        self.seed_tokens = tuple(self.seed_tokens)
        lowered = [tok.lower() for tok in self.seed_tokens]
        if any(not tok for tok in lowered):
            raise ValueError("seed_tokens must not contain empty strings")
        if len(set(lowered)) != len(lowered):
            raise ValueError("seed_tokens must be unique after lowercasing")
        if len(lowered) >= self.unknown_offset:
            raise ValueError(
                f"{len(lowered)} seed tokens would collide with unknown_offset={self.unknown_offset}"
            )
