"""
Main entry point for the Wordle engine.
Handles solve, hint, and test modes.
"""

import argparse
import logging
import random
import sys
from multiprocessing import Pool

import torch
from tqdm import tqdm

from config import (ANSWERS_FILE, FAST_MODE, GUESSES_FILE, LOG_FORMAT, MAX_GUESSES, NUM_WORKERS,
                    TEST_SAMPLE_SIZE, WORD_LENGTH)
from constraints import ConstraintFilter
from data_loader import Dictionary
from gameplay import play_wordle
from ranking import rank

logger = logging.getLogger("main")

# Global variables for multiprocessing workers.
GLOBAL_DICTIONARY = None


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    if FAST_MODE:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _valid_word(word: str) -> bool:
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


def run_solve(dictionary: Dictionary, device: torch.device, args: argparse.Namespace) -> int:
    if not args.game:
        logger.error("Please provide a target word using --game")
        return 1
    target = args.game.lower()
    if not _valid_word(target):
        logger.error("Please provide a valid 5-letter target word.")
        return 1

    logger.info("Starting game with target: %s", target)
    attempts = play_wordle(target, dictionary, device=device)
    if attempts <= MAX_GUESSES:
        logger.info("Solved '%s' in %d attempts.", target, attempts)
    return 0


def run_hint(dictionary: Dictionary, device: torch.device, args: argparse.Namespace) -> int:
    if not args.game:
        logger.error("Please provide a target word using --game")
        return 1

    constraints = ConstraintFilter(args.game.lower())
    for guess in args.guesses:
        guess = guess.lower()
        if not dictionary.contains(guess):
            logger.warning("'%s' is not in the word list; applying it anyway.", guess)
        constraints.apply(guess)

    ranked = rank(constraints, dictionary.answers, device=device)
    logger.info("%d choices remain.", len(ranked))
    for word, score in ranked[:args.top]:
        print(f"{word}  {score}")
    return 0


# --- Multiprocessing Helpers for Parallel Test Mode ---

def init_worker(dictionary: Dictionary) -> None:
    global GLOBAL_DICTIONARY
    GLOBAL_DICTIONARY = dictionary
    # One ranking at a time per worker process.
    torch.set_num_threads(1)


def simulate_game(target_word):
    """
    Worker function that plays a single game against the shared dictionary.
    Returns a tuple (target_word, attempts).
    """
    attempts = play_wordle(target_word, GLOBAL_DICTIONARY, verbose=False)
    return (target_word, attempts)


def run_test(dictionary: Dictionary, args: argparse.Namespace) -> int:
    if args.sample < 1 or args.workers < 1:
        logger.error("--sample and --workers must both be at least 1.")
        return 1

    answers = list(dictionary.answers)
    if len(answers) > args.sample:
        sampled_solutions = random.sample(answers, args.sample)
    else:
        sampled_solutions = answers

    total_words = len(sampled_solutions)
    logger.info("Starting parallel testing over a random sample of %d words...", total_words)

    with Pool(processes=args.workers, initializer=init_worker, initargs=(dictionary,)) as pool:
        results = list(tqdm(pool.imap(simulate_game, sampled_solutions), total=total_words,
                            desc="Testing Progress", disable=FAST_MODE))

    total_attempts = 0
    total_solved = 0
    failed = []
    for target_word, attempts in results:
        if attempts <= MAX_GUESSES:
            total_solved += 1
            total_attempts += attempts
        else:
            total_attempts += MAX_GUESSES
            failed.append(str(target_word))

    average_guesses = total_attempts / total_words
    accuracy = (total_solved / total_words) * 100

    print("\n[RESULTS]")
    print(f"Total Words Tested: {total_words}")
    print(f"Words Solved: {total_solved}")
    print(f"Words Failed: {len(failed)}")
    if failed:
        print(f"Failed Words: {', '.join(sorted(failed))}")
    print(f"Accuracy: {accuracy:.2f}%")
    print(f"Average Guesses: {average_guesses:.2f}")
    return 0


# --- Main Entry ---
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Wordle constraint engine and solver")
    parser.add_argument(
        "--mode", type=str, choices=["solve", "hint", "test"], default="solve",
        help="Mode to run: solve, hint, or test."
    )
    parser.add_argument("--game", type=str, help="Target word (required for 'solve' and 'hint' modes).")
    parser.add_argument("--guesses", nargs="*", default=[], help="Guesses already made ('hint' mode).")
    parser.add_argument("--top", type=int, default=10, help="Number of ranked candidates to show.")
    parser.add_argument("--sample", type=int, default=TEST_SAMPLE_SIZE, help="Number of answers to play in 'test' mode.")
    parser.add_argument("--workers", type=int, default=NUM_WORKERS, help="Worker processes for 'test' mode.")
    parser.add_argument("--answers", type=str, default=ANSWERS_FILE, help="Answer word list.")
    parser.add_argument("--guesses-file", type=str, default=GUESSES_FILE, help="Extra valid guesses word list (empty to skip).")
    parser.add_argument("--verbose", action="store_true", help="Log every constraint update.")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        dictionary = Dictionary.from_files(args.answers, args.guesses_file)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1

    if args.mode == "test":
        return run_test(dictionary, args)

    device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    logger.info("Using device: %s", device)
    if args.mode == "hint":
        return run_hint(dictionary, device, args)
    return run_solve(dictionary, device, args)


if __name__ == "__main__":
    sys.exit(main())
