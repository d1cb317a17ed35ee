# src/encoding.py
import torch
from typing import Optional, Sequence

from config import RANK_BATCH_SIZE, WORD_LENGTH
from constraints import NUM_PATTERNS
from word import SLOT_BITS, SLOT_MASK, Word

# Slot values 1-26 are letters, 0 is a blank; index 26 stands for the blank.
BLANK_INDEX = 26
NUM_SYMBOLS = 27


def encode_word(word: Word) -> torch.Tensor:
    """
    Encodes a word into a tensor of letter indices.
    Each letter a–z is mapped to 0–25, an unset slot to 26.

    Returns:
        Tensor of shape (5,) with dtype=torch.long.
    """
    indices = []
    for i in range(WORD_LENGTH):
        value = (word.bits >> (SLOT_BITS * i)) & SLOT_MASK
        indices.append(value - 1 if value else BLANK_INDEX)
    return torch.tensor(indices, dtype=torch.long)


def encode_batch_words(words: Sequence[Word], device: Optional[torch.device] = None) -> torch.Tensor:
    if not words:
        return torch.zeros(0, WORD_LENGTH, dtype=torch.long, device=device)
    encoded = torch.stack([encode_word(w) for w in words], dim=0)
    if device is not None:
        encoded = encoded.to(device)
    return encoded


def encode_presence(encoded: torch.Tensor) -> torch.Tensor:
    """
    (N, 5) letter indices -> (N, 27) boolean table of which symbols each word contains.
    """
    presence = torch.zeros(encoded.size(0), NUM_SYMBOLS, dtype=torch.bool, device=encoded.device)
    rows = torch.arange(encoded.size(0), device=encoded.device).unsqueeze(1)
    presence[rows, encoded] = True
    return presence


def pattern_matrix(guesses: torch.Tensor, targets: torch.Tensor,
                   target_presence: Optional[torch.Tensor] = None) -> torch.Tensor:
    """
    Feedback pattern codes for every (guess, target) pair.

    A slot scores 2 when the letters match, 1 when the target contains the
    guessed letter anywhere and 0 otherwise, slot i weighted 3**i, the same
    packing as constraints.pattern_code.

    Returns:
        Tensor of shape (len(guesses), len(targets)) with dtype=torch.long.
    """
    if target_presence is None:
        target_presence = encode_presence(targets)
    codes = torch.zeros(guesses.size(0), targets.size(0), dtype=torch.long, device=guesses.device)
    for i in range(WORD_LENGTH):
        green = guesses[:, i].unsqueeze(1) == targets[:, i].unsqueeze(0)
        # A match implies presence, so green slots come out as 1 + 1.
        present = target_presence[:, guesses[:, i]].t()
        codes += (present.long() + green.long()) * 3 ** i
    return codes


def worst_case_partition_sizes(guesses: torch.Tensor, targets: torch.Tensor,
                               batch_size: int = RANK_BATCH_SIZE) -> torch.Tensor:
    """
    For each guess, the size of the largest group of targets that share a
    feedback pattern. Guesses are processed `batch_size` rows at a time to
    bound the size of the pattern matrix.
    """
    target_presence = encode_presence(targets)
    sizes = []
    for start in range(0, guesses.size(0), batch_size):
        batch = guesses[start:start + batch_size]
        codes = pattern_matrix(batch, targets, target_presence)
        rows = batch.size(0)
        offsets = torch.arange(rows, device=codes.device).unsqueeze(1) * NUM_PATTERNS
        counts = torch.bincount((codes + offsets).flatten(), minlength=rows * NUM_PATTERNS)
        sizes.append(counts.view(rows, NUM_PATTERNS).max(dim=1).values)
    if not sizes:
        return torch.zeros(0, dtype=torch.long, device=guesses.device)
    return torch.cat(sizes)
