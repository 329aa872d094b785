"""Word-level tokenizer with a per-character fallback for unknown words."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Dict, Iterable, List, Optional

import torch

from wordtok.config import TokenizerConfig
from wordtok.errors import InvalidInput
from wordtok.tokens import KnownToken, RawChar, Token
from wordtok.vocab import Vocabulary

MAX_CODEPOINT = 0x10FFFF


def _require_text(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidInput(f"{what} must be a non-empty string, got {value!r}")
    return value


def _check_codepoint(codepoint: int, token: int) -> int:
    if not 0 <= codepoint <= MAX_CODEPOINT:
        raise InvalidInput(f"Token {token} does not map to a vocabulary entry or a valid character")
    return codepoint


def _as_id_list(tokens: Any) -> List[int]:
    if isinstance(tokens, torch.Tensor):
        if tokens.dim() != 1:
            raise InvalidInput(f"Token tensor must be 1D, got shape {tuple(tokens.shape)}")
        if tokens.dtype == torch.bool or tokens.is_floating_point() or tokens.is_complex():
            raise InvalidInput(f"Token tensor must have an integer dtype, got {tokens.dtype}")
        return tokens.tolist()
    if isinstance(tokens, (str, bytes, bytearray)) or not isinstance(tokens, Sequence):
        raise InvalidInput(f"Tokens must be a sequence of ints, got {type(tokens).__name__}")
    for tok in tokens:
        if isinstance(tok, bool) or not isinstance(tok, int):
            raise InvalidInput(f"Tokens must be ints, got {tok!r}")
    return list(tokens)


class Tokenizer:
    """Maps lowercased whitespace-separated words to ids and back.

    Known words encode to their vocabulary id. Unknown words encode to one id
    per character, ``ord(ch) + unknown_offset``. Decoding joins every piece
    with a single space, so an unknown word comes back as spaced-out
    characters ("xyz" -> "x y z").

    Instances are not thread-safe; share one only within a single owner.
    """

    def __init__(self, cfg: Optional[TokenizerConfig] = None):
        self.cfg = cfg or TokenizerConfig()
        self.unknown_offset = self.cfg.unknown_offset
        self._vocab = Vocabulary.from_words(
            (tok.lower() for tok in self.cfg.seed_tokens),
            max_size=self.unknown_offset,
        )

    # ---------- encoding ----------
    def encode_tokens(self, text: str) -> List[Token]:
        text = _require_text(text, "Input")
        out: List[Token] = []
        for word in text.lower().split():
            idx = self._vocab.id_of(word)
            if idx is not None:
                out.append(KnownToken(idx))
            else:
                out.extend(RawChar(ord(ch)) for ch in word)
        return out

    def encode(self, text: str) -> List[int]:
        return [tok.to_id(self.unknown_offset) for tok in self.encode_tokens(text)]

    def encode_tensor(self, text: str) -> torch.Tensor:
        return torch.tensor(self.encode(text), dtype=torch.long)

    # ---------- decoding ----------
    def decode(self, tokens: Any) -> str:
        pieces: List[str] = []
        for tok in _as_id_list(tokens):
            word = self._vocab.word_of(tok)
            if word is not None:
                pieces.append(word)
            else:
                pieces.append(chr(_check_codepoint(tok - self.unknown_offset, tok)))
        return " ".join(pieces)

    def decode_tokens(self, tokens: Iterable[Token]) -> str:
        pieces: List[str] = []
        for tok in tokens:
            if isinstance(tok, KnownToken):
                word = self._vocab.word_of(tok.id)
                if word is None:
                    raise InvalidInput(f"Unknown vocabulary id {tok.id}")
                pieces.append(word)
            elif isinstance(tok, RawChar):
                _check_codepoint(tok.codepoint, tok.to_id(self.unknown_offset))
                pieces.append(tok.char)
            else:
                raise InvalidInput(f"Expected KnownToken or RawChar, got {tok!r}")
        return " ".join(pieces)

    # ---------- vocabulary ----------
    def add_token(self, token: str) -> None:
        token = _require_text(token, "Token")
        self._vocab.add(token.lower())

    def has_token(self, token: str) -> bool:
        if not isinstance(token, str):
            return False
        return token.lower() in self._vocab

    def get_vocabulary_size(self) -> int:
        return len(self._vocab)

    @property
    def vocab_size(self) -> int:
        return len(self._vocab)

    def token_id(self, word: str) -> Optional[int]:
        if not isinstance(word, str):
            return None
        return self._vocab.id_of(word.lower())

    def id_to_token(self, idx: int) -> Optional[str]:
        return self._vocab.word_of(idx)

    @property
    def vocabulary(self) -> Dict[str, int]:
        return dict(self._vocab.forward)
