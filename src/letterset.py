# src/letterset.py
"""
Bit set over the 26 lowercase letters.
"""

import string
from typing import Iterator, Optional

ALPHABET = string.ascii_lowercase
FULL_MASK = (1 << len(ALPHABET)) - 1


def letter_index(c: str) -> Optional[int]:
    """Return 0-25 for 'a'-'z', None for anything else."""
    if len(c) != 1 or not ("a" <= c <= "z"):
        return None
    return ord(c) - ord("a")


class LetterSet:
    """
    Immutable set of letters packed into a 26-bit mask.
    Every "modifying" operation returns a new set. Characters outside
    'a'-'z' contribute nothing.
    """

    __slots__ = ("_mask",)

    def __init__(self, mask: int = 0) -> None:
        self._mask = mask & FULL_MASK

    @classmethod
    def none(cls) -> "LetterSet":
        return cls(0)

    @classmethod
    def all(cls) -> "LetterSet":
        return cls(FULL_MASK)

    @classmethod
    def of(cls, c: str) -> "LetterSet":
        index = letter_index(c)
        if index is None:
            return cls(0)
        return cls(1 << index)

    @classmethod
    def from_str(cls, chars: str) -> "LetterSet":
        mask = 0
        for c in chars:
            mask |= cls.of(c)._mask
        return cls(mask)

    @property
    def mask(self) -> int:
        return self._mask

    def include(self, c: str) -> "LetterSet":
        return LetterSet(self._mask | LetterSet.of(c)._mask)

    def exclude(self, c: str) -> "LetterSet":
        return LetterSet(self._mask & ~LetterSet.of(c)._mask)

    def complement(self) -> "LetterSet":
        return LetterSet(self._mask ^ FULL_MASK)

    def contains_all(self, other: "LetterSet") -> bool:
        return self._mask & other._mask == other._mask

    def contains_any(self, other: "LetterSet") -> bool:
        return self._mask & other._mask != 0

    def __contains__(self, c: str) -> bool:
        return self._mask & LetterSet.of(c)._mask != 0

    def __or__(self, other: "LetterSet") -> "LetterSet":
        return LetterSet(self._mask | other._mask)

    def __and__(self, other: "LetterSet") -> "LetterSet":
        return LetterSet(self._mask & other._mask)

    def __iter__(self) -> Iterator[str]:
        for i, c in enumerate(ALPHABET):
            if self._mask & (1 << i):
                yield c

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __bool__(self) -> bool:
        return self._mask != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterSet):
            return NotImplemented
        return self._mask == other._mask

    def __hash__(self) -> int:
        return hash(self._mask)

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"LetterSet('{self}')"
