"""
Module for accumulating guess feedback into Wordle constraints.
"""

import logging
from typing import Iterable, List, Sequence, Union

from config import WORD_LENGTH
from letterset import LetterSet
from space import PositionSpace
from word import Word, as_word

logger = logging.getLogger(__name__)

CORRECT = 'G'
PRESENT = 'Y'
ABSENT = 'B'

_PATTERN_DIGITS = {ABSENT: 0, PRESENT: 1, CORRECT: 2}
NUM_PATTERNS = 3 ** WORD_LENGTH


def get_feedback(guess: Union[Word, str], target: Union[Word, str]) -> List[str]:
    """
    Classify each slot of `guess` against `target`.
    Feedback codes:
     - 'G': letter matches the target at this slot.
     - 'Y': letter occurs somewhere in the target.
     - 'B': letter does not occur in the target.

    Occurrences are not counted: every copy of a letter the target contains
    is reported as 'Y' (or 'G'), even when the guess repeats it more often
    than the target does.
    """
    guess, target = as_word(guess), as_word(target)
    feedback = []
    for i, c in enumerate(guess):
        if c == target.at(i):
            feedback.append(CORRECT)
        elif target.contains(c):
            feedback.append(PRESENT)
        else:
            feedback.append(ABSENT)
    return feedback


def pattern_code(feedback: Sequence[str]) -> int:
    """Pack a feedback list base-3, slot i weighted 3**i."""
    return sum(_PATTERN_DIGITS[f] * 3 ** i for i, f in enumerate(feedback))


class ConstraintFilter:
    """
    Everything known about one hidden target after the guesses applied so far.
    Constraints only ever tighten; `matches` never modifies the filter.
    """

    def __init__(self, target: Union[Word, str]) -> None:
        self._target = as_word(target)
        # Letters proven absent from the target
        self.rejected = LetterSet.none()
        # Letters proven present somewhere in the target
        self.required = LetterSet.none()
        # Letters still allowed at each slot
        self.space = PositionSpace()
        # Letters proven correct at their exact slot (blank if unknown)
        self.correct = Word.empty()
        self.guesses_applied = 0

    @property
    def accepted(self) -> LetterSet:
        return self.rejected.complement()

    def apply(self, guess: Union[Word, str]) -> "ConstraintFilter":
        """Fold the feedback for `guess` into the constraints."""
        guess = as_word(guess)
        for i, (c, f) in enumerate(zip(guess, get_feedback(guess, self._target))):
            if f == CORRECT:
                logger.debug("position %d is %s", i, c)
                self.correct = self.correct.set(i, c)
                self.required = self.required.include(c)
                self.space.restrict(i, c)
            elif f == PRESENT:
                logger.debug("requires %s, not at position %d", c, i)
                self.required = self.required.include(c)
                self.space.exclude(i, c)
            else:
                logger.debug("rejecting %s", c)
                self.rejected = self.rejected.include(c)
                for j in range(WORD_LENGTH):
                    self.space.exclude(j, c)
        self.guesses_applied += 1
        return self

    def matches(self, word: Union[Word, str]) -> bool:
        """
        Determine if a given word is compatible with the current constraints.
        """
        word = as_word(word)
        letters = word.charset()
        if letters.contains_any(self.rejected):
            return False
        if not letters.contains_all(self.required):
            return False
        return self.space.matches(word)

    def filter_words(self, words: Iterable[Union[Word, str]]) -> List[Word]:
        """
        Filter a list of words, returning only those that satisfy the constraints.
        """
        return [w for w in map(as_word, words) if self.matches(w)]

    def copy(self) -> "ConstraintFilter":
        clone = ConstraintFilter(self._target)
        clone.rejected = self.rejected
        clone.required = self.required
        clone.space = self.space.copy()
        clone.correct = self.correct
        clone.guesses_applied = self.guesses_applied
        return clone

    def __repr__(self) -> str:
        return (f"ConstraintFilter(rejected='{self.rejected}', required='{self.required}', "
                f"correct='{self.correct}', space={self.space!r})")
