# data_loader.py

import logging
import os
import random
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from config import WORD_LENGTH
from word import Word, as_word

logger = logging.getLogger(__name__)


def load_words(file_path: str) -> List[str]:
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"The words file '{file_path}' does not exist.")
    with open(file_path, 'r', encoding='utf-8') as f:
        words = [w for w in (line.strip().lower() for line in f)
                 if len(w) == WORD_LENGTH and w.isascii() and w.isalpha()]
    if not words:
        raise ValueError(f"The words file '{file_path}' is empty or improperly formatted.")
    logger.info("Loaded %d words from %s.", len(words), file_path)
    return words


def _complete_words(words: Iterable[Union[Word, str]]) -> FrozenSet[Word]:
    return frozenset(w for w in map(as_word, words) if w.is_complete())


class Dictionary:
    """
    Immutable set of valid words built from two lists:
      - answers: words that may be picked as the hidden target.
      - guesses: extra words accepted as input but never picked as target.
    Build it once and hand it to whatever needs it.
    """

    def __init__(self, answers: Iterable[Union[Word, str]], guesses: Iterable[Union[Word, str]] = ()) -> None:
        # Entries that are not five lowercase letters would become part-blank words.
        self._answers: Tuple[Word, ...] = tuple(sorted(_complete_words(answers), key=str))
        self._words: FrozenSet[Word] = frozenset(self._answers) | _complete_words(guesses)
        self._ordered: Tuple[Word, ...] = tuple(sorted(self._words, key=str))

    @classmethod
    def from_files(cls, answers_file: str, guesses_file: Optional[str] = None) -> "Dictionary":
        answers = load_words(answers_file)
        guesses = load_words(guesses_file) if guesses_file else []
        dictionary = cls(answers, guesses)
        logger.info("Dictionary ready: %d answers, %d valid words.", len(dictionary.answers), len(dictionary))
        return dictionary

    @property
    def answers(self) -> Tuple[Word, ...]:
        return self._answers

    def contains(self, word: Union[Word, str]) -> bool:
        # Strings are not truncated here: "cranes" is not "crane".
        if isinstance(word, str) and len(word) != WORD_LENGTH:
            return False
        return as_word(word) in self._words

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, (Word, str)):
            return False
        return self.contains(word)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._words)

    def random(self, rng: Optional[random.Random] = None) -> Word:
        """Uniform pick among the answers."""
        return (rng or random).choice(self._answers)
