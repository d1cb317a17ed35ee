# src/config.py
"""
Shared constants for the Wordle engine.
Values that depend on the machine (data location, quiet mode) can be
overridden from the environment.
"""

import os

# Set WORDLE_FAST_MODE=1 to silence everything below WARNING.
FAST_MODE = os.environ.get("WORDLE_FAST_MODE", "0") == "1"

WORD_LENGTH = 5
MAX_GUESSES = 6

# --- Word lists ---
DATA_DIR = os.environ.get("WORDLE_DATA_DIR", os.path.join("..", "data"))
ANSWERS_FILE = os.path.join(DATA_DIR, "answers.txt")
GUESSES_FILE = os.path.join(DATA_DIR, "allowed_guesses.txt")

# --- Solver ---
FIRST_GUESS = "crane"
RANK_BATCH_SIZE = 512  # guesses scored per tensor batch
TEST_SAMPLE_SIZE = 1000
NUM_WORKERS = 8

LOG_FORMAT = "[%(levelname)s] %(message)s"
