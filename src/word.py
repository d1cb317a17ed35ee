# src/word.py
"""
Five-slot words packed into a single integer.

Slot i occupies bits 5*i .. 5*i+4 and holds 0 when unset or the letter
index + 1 otherwise, so only 25 bits are ever used.
"""

from typing import Iterator, Union

from config import WORD_LENGTH
from letterset import ALPHABET, LetterSet, letter_index

BLANK = " "
SLOT_BITS = 5
SLOT_MASK = (1 << SLOT_BITS) - 1
WORD_MASK = (1 << (SLOT_BITS * WORD_LENGTH)) - 1


def _check_slot(i: int) -> None:
    if not 0 <= i < WORD_LENGTH:
        raise IndexError(f"Slot {i} is out of range for a {WORD_LENGTH}-letter word.")


def _slot_value(c: str) -> int:
    index = letter_index(c)
    return 0 if index is None else index + 1


class Word:
    """
    A value type: set/put/erase hand back a new Word and leave the
    receiver untouched, so words are safe to use as dict keys.
    """

    __slots__ = ("_bits",)

    def __init__(self, text: str = "") -> None:
        bits = 0
        # Anything past the fifth character is ignored.
        for i, c in enumerate(text[:WORD_LENGTH]):
            bits |= _slot_value(c) << (SLOT_BITS * i)
        self._bits = bits

    @classmethod
    def empty(cls) -> "Word":
        return cls()

    @classmethod
    def from_bits(cls, bits: int) -> "Word":
        word = cls()
        word._bits = bits & WORD_MASK
        return word

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def length(self) -> int:
        """Index one past the last filled slot."""
        for i in range(WORD_LENGTH - 1, -1, -1):
            if self._raw(i):
                return i + 1
        return 0

    def _raw(self, i: int) -> int:
        return (self._bits >> (SLOT_BITS * i)) & SLOT_MASK

    def at(self, i: int) -> str:
        _check_slot(i)
        value = self._raw(i)
        return ALPHABET[value - 1] if value else BLANK

    def set(self, i: int, c: str) -> "Word":
        _check_slot(i)
        shift = SLOT_BITS * i
        bits = self._bits & ~(SLOT_MASK << shift)
        return Word.from_bits(bits | (_slot_value(c) << shift))

    def put(self, c: str) -> "Word":
        length = self.length
        if length == WORD_LENGTH:
            return self
        return self.set(length, c)

    def erase(self) -> "Word":
        length = self.length
        if length == 0:
            return self
        return self.set(length - 1, BLANK)

    def is_complete(self) -> bool:
        return all(self._raw(i) for i in range(WORD_LENGTH))

    def contains(self, c: str) -> bool:
        return any(self.at(i) == c for i in range(WORD_LENGTH))

    def charset(self) -> LetterSet:
        """Distinct letters of the word; repeats collapse to a single bit."""
        charset = LetterSet.none()
        for c in self:
            charset = charset.include(c)
        return charset

    def __iter__(self) -> Iterator[str]:
        for i in range(WORD_LENGTH):
            yield self.at(i)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"Word('{self}')"


def as_word(value: Union[Word, str]) -> Word:
    if isinstance(value, Word):
        return value
    return Word(value)
