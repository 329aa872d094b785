import pytest
import torch

from wordtok import InvalidInput, KnownToken, RawChar, Tokenizer


def test_encode_tokens_tags_pieces():
    tok = Tokenizer()
    pieces = tok.encode_tokens("hello ok")
    assert pieces == [KnownToken(42), RawChar(ord("o")), RawChar(ord("k"))]
    assert tok.encode("hello ok") == [p.to_id(tok.unknown_offset) for p in pieces]


def test_decode_tokens_matches_decode():
    tok = Tokenizer()
    text = "what is zeta"
    assert tok.decode_tokens(tok.encode_tokens(text)) == tok.decode(tok.encode(text))


def test_decode_tokens_rejects_unknown_id():
    tok = Tokenizer()
    with pytest.raises(InvalidInput):
        tok.decode_tokens([KnownToken(500)])
    with pytest.raises(InvalidInput):
        tok.decode_tokens([RawChar(-1)])
    with pytest.raises(InvalidInput):
        tok.decode_tokens([42])


def test_decode_tokens_mixes_chars_and_words():
    tok = Tokenizer()
    assert tok.decode_tokens([RawChar(0x41), KnownToken(0)]) == "A a"


def test_encode_tensor():
    tok = Tokenizer()
    ids = tok.encode_tensor("hello world")
    assert ids.dtype == torch.long
    assert ids.tolist() == [42, 43]
    assert tok.decode(ids) == "hello world"


def test_decode_rejects_bad_tensors():
    tok = Tokenizer()
    with pytest.raises(InvalidInput):
        tok.decode(torch.tensor([[42, 43]]))
    with pytest.raises(InvalidInput):
        tok.decode(torch.tensor([42.0]))
