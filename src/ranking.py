# src/ranking.py
"""
Ranks candidate guesses by how well they split the remaining pool.

Guessing `g` partitions the pool by the feedback each word would produce
if it were the target. A candidate's score is the size of its largest
partition: the number of words that could still be left after guessing it,
in the worst case. Lower is better.
"""

import logging
import time
from collections import Counter
from typing import Iterable, List, Optional, Tuple, Union

import torch

from config import RANK_BATCH_SIZE
from constraints import ConstraintFilter, get_feedback
from encoding import encode_batch_words, worst_case_partition_sizes
from word import Word, as_word

logger = logging.getLogger(__name__)


def worst_case_partition(guess: Union[Word, str], pool: Iterable[Union[Word, str]]) -> int:
    """Largest group of `pool` that `guess` cannot tell apart. Pure-Python reference."""
    groups = Counter(tuple(get_feedback(guess, w)) for w in pool)
    return max(groups.values(), default=0)


def rank(constraints: ConstraintFilter, pool: Iterable[Union[Word, str]],
         device: Optional[torch.device] = None,
         batch_size: int = RANK_BATCH_SIZE) -> List[Tuple[Word, int]]:
    """
    Score every word of `pool` still allowed by `constraints` and return
    (word, score) pairs, best first. Ties are ordered alphabetically so the
    result is fully deterministic.
    """
    # Repeated pool entries would be counted twice in every partition.
    candidates = constraints.filter_words(dict.fromkeys(map(as_word, pool)))
    if not candidates:
        return []

    start = time.time()
    encoded = encode_batch_words(candidates, device=device)
    with torch.no_grad():
        scores = worst_case_partition_sizes(encoded, encoded, batch_size=batch_size).tolist()
    logger.debug("Scored %d candidates in %.3fs", len(candidates), time.time() - start)

    return sorted(zip(candidates, scores), key=lambda item: (item[1], str(item[0])))


def best_guess(constraints: ConstraintFilter, pool: Iterable[Union[Word, str]],
               device: Optional[torch.device] = None) -> Optional[Word]:
    ranked = rank(constraints, pool, device=device)
    return ranked[0][0] if ranked else None

