"""Exceptions raised by the tokenizer."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when a public operation receives a malformed argument."""


class VocabularyOverflow(RuntimeError):
    """Raised when a new id would reach the unknown-word offset range."""
