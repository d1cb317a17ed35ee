# src/gameplay.py

import logging
import random
import threading
from enum import Enum
from typing import List, Optional, Tuple, Union

import torch

from config import FIRST_GUESS, MAX_GUESSES
from constraints import ConstraintFilter, get_feedback
from data_loader import Dictionary
from ranking import best_guess, rank
from word import Word, as_word

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GuessError(Enum):
    NONE = "none"
    INVALID_GUESS = "invalid_guess"


class GameState:
    """
    One game against a fixed answer. Keys are fed in through `input`; the
    word being typed lives in `guess` until it is submitted.
    """

    def __init__(self, answer: Union[Word, str], dictionary: Dictionary, max_guesses: int = MAX_GUESSES) -> None:
        self.answer = as_word(answer)
        self.dictionary = dictionary
        self.max_guesses = max_guesses
        self.phase = Phase.PLAYING
        self.guess = Word.empty()
        self.guesses: List[Word] = []
        self.error = GuessError.NONE

    @classmethod
    def new_random(cls, dictionary: Dictionary, rng: Optional[random.Random] = None) -> "GameState":
        answer = dictionary.random(rng)
        logger.debug("New game: %s", answer)
        return cls(answer, dictionary)

    def input(self, key: str) -> None:
        if self.phase != Phase.PLAYING:
            return
        if key == "enter":
            self.submit()
        elif key == "backspace":
            self.guess = self.guess.erase()
            self.error = GuessError.NONE
        elif key:
            self.guess = self.guess.put(key[0])
            self.error = GuessError.NONE

    def is_full(self) -> bool:
        return len(self.guesses) >= self.max_guesses

    def submit(self) -> None:
        if not self.guess.is_complete() or self.is_full():
            return
        if not self.dictionary.contains(self.guess):
            self.error = GuessError.INVALID_GUESS
            return
        self.error = GuessError.NONE

        guess = self.guess
        self.guess = Word.empty()
        self.guesses.append(guess)

        if self.is_full():
            self.phase = Phase.LOST
        if guess == self.answer:
            self.phase = Phase.WON

    def constraint_filter(self) -> ConstraintFilter:
        constraints = ConstraintFilter(self.answer)
        for guess in self.guesses:
            constraints.apply(guess)
        return constraints

    def remaining(self) -> List[Word]:
        """Answers still consistent with every guess made so far."""
        return self.constraint_filter().filter_words(self.dictionary.answers)

    def hints(self, limit: int = 10, device: Optional[torch.device] = None) -> List[Tuple[Word, int]]:
        return rank(self.constraint_filter(), self.dictionary.answers, device=device)[:limit]

    def rows(self) -> List[Tuple[Word, List[str]]]:
        return [(guess, get_feedback(guess, self.answer)) for guess in self.guesses]


class GameSession:
    """
    A single shared game. Every read and write goes through one lock, so
    concurrent callers see whole moves only.
    """

    def __init__(self, dictionary: Dictionary, rng: Optional[random.Random] = None) -> None:
        self._dictionary = dictionary
        self._rng = rng
        self._lock = threading.Lock()
        self._state = GameState.new_random(dictionary, rng)

    def input(self, key: str) -> Phase:
        with self._lock:
            self._state.input(key)
            return self._state.phase

    def reset(self) -> None:
        with self._lock:
            self._state = GameState.new_random(self._dictionary, self._rng)

    def rows(self) -> List[Tuple[Word, List[str]]]:
        with self._lock:
            return self._state.rows()

    def phase(self) -> Phase:
        with self._lock:
            return self._state.phase

    def remaining(self) -> List[Word]:
        with self._lock:
            if self._state.phase != Phase.PLAYING:
                return []
            return self._state.remaining()


def play_wordle(target: Union[Word, str], dictionary: Dictionary,
                device: Optional[torch.device] = None, verbose: bool = True,
                max_guesses: int = MAX_GUESSES) -> int:
    """
    Solve `target` by always guessing the best-ranked remaining answer.
    Returns the number of guesses used, or max_guesses + 1 on failure.
    """
    target = as_word(target)
    constraints = ConstraintFilter(target)
    current_possible = list(dictionary.answers)

    # Opening move is fixed when the word list allows it.
    guess = as_word(FIRST_GUESS)
    if not dictionary.contains(guess):
        guess = best_guess(constraints, current_possible, device=device)

    for attempt in range(1, max_guesses + 1):
        if guess is None:
            logger.debug("No candidates left for %s.", target)
            break
        if verbose:
            logger.info("Attempt %d: Guess = %s, Feedback = %s",
                        attempt, guess, "".join(get_feedback(guess, target)))
        if guess == target:
            if verbose:
                logger.info("Solved!")
            return attempt

        constraints.apply(guess)
        current_possible = constraints.filter_words(current_possible)
        guess = best_guess(constraints, current_possible, device=device)

    if verbose:
        logger.info("Failed to solve. The word was: %s", target)
    return max_guesses + 1
