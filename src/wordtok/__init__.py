"""Minimal word-level tokenizer with a per-character fallback."""

from wordtok.config import SEED_TOKENS, UNKNOWN_OFFSET, TokenizerConfig
from wordtok.errors import InvalidInput, VocabularyOverflow
from wordtok.tokenizer import Tokenizer
from wordtok.tokens import KnownToken, RawChar
from wordtok.vocab import Vocabulary

__all__ = [
    "InvalidInput",
    "KnownToken",
    "RawChar",
    "SEED_TOKENS",
    "Tokenizer",
    "TokenizerConfig",
    "UNKNOWN_OFFSET",
    "Vocabulary",
    "VocabularyOverflow",
]

__version__ = "0.1.0"
