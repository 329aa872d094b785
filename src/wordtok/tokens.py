"""Tagged token variants.

A flat id stream tells known words and raw characters apart only by numeric
range. These variants carry the distinction explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class KnownToken:
    id: int

    def to_id(self, offset: int) -> int:
        return self.id


@dataclass(frozen=True)
class RawChar:
    codepoint: int

    def to_id(self, offset: int) -> int:
        return self.codepoint + offset

    @property
    def char(self) -> str:
        return chr(self.codepoint)


Token = Union[KnownToken, RawChar]
