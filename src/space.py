# src/space.py
"""
Per-slot sets of letters that are still allowed.
"""

from typing import List, Optional

from config import WORD_LENGTH
from letterset import LetterSet
from word import Word


class PositionSpace:
    def __init__(self, slots: Optional[List[LetterSet]] = None) -> None:
        if slots is None:
            slots = [LetterSet.all() for _ in range(WORD_LENGTH)]
        if len(slots) != WORD_LENGTH:
            raise ValueError(f"A position space needs exactly {WORD_LENGTH} slots.")
        self._slots = list(slots)

    def _check_slot(self, i: int) -> None:
        if not 0 <= i < WORD_LENGTH:
            raise IndexError(f"Slot {i} is out of range for a {WORD_LENGTH}-letter word.")

    def allowed(self, i: int) -> LetterSet:
        self._check_slot(i)
        return self._slots[i]

    def exclude(self, i: int, c: str) -> None:
        """Forbid `c` at slot `i` only."""
        self._check_slot(i)
        self._slots[i] = self._slots[i].exclude(c)

    def restrict(self, i: int, c: str) -> None:
        """Narrow slot `i` to the single letter `c`, if it is still allowed."""
        self._check_slot(i)
        # Intersect so a letter already excluded here stays excluded.
        self._slots[i] = self._slots[i] & LetterSet.of(c)

    def matches(self, word: Word) -> bool:
        # Blanks are never members of a letter set, so incomplete words fail.
        return all(c in allowed for c, allowed in zip(word, self._slots))

    def copy(self) -> "PositionSpace":
        return PositionSpace(self._slots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositionSpace):
            return NotImplemented
        return self._slots == other._slots

    def __repr__(self) -> str:
        return "PositionSpace([" + ", ".join(f"'{s}'" for s in self._slots) + "])"
