"""Brute-force search over the 26 Caesar shifts.

Every shift is decrypted and scored against the word set. The winner is the
first shift whose score is strictly greater than every score before it, so
ties go to the lowest shift and a text with no dictionary hits keeps shift 0.
"""

import logging
import multiprocessing
from functools import partial
from typing import AbstractSet, List

from .ciphers import M, caesar_decrypt
from .scoring import score_words

logger = logging.getLogger(__name__)


def shift_score(text: str, words: AbstractSet[str], shift: int) -> int:
    """Valid-word count of ``text`` decrypted with ``shift``."""
    count, _ = score_words(caesar_decrypt(text, shift), words)
    return count


def caesar_scores(text: str, words: AbstractSet[str], workers: int = 1) -> List[int]:
    """
    Scores all 26 shifts and returns the counts indexed by shift.
    With workers > 1 the shifts are spread over a process pool; Pool.map
    keeps the results in shift order.
    """
    func = partial(shift_score, text, words)
    if workers > 1:
        with multiprocessing.Pool(processes=workers) as pool:
            return pool.map(func, range(M))
    return [func(shift) for shift in range(M)]


def select_best_shift(scores: List[int]) -> int:
    best_shift = 0
    max_valid = 0
    for shift, count in enumerate(scores):
        logger.debug("shift %2d -> %d valid words", shift, count)
        if count > max_valid:
            max_valid = count
            best_shift = shift
    return best_shift


def best_caesar_shift(text: str, words: AbstractSet[str], workers: int = 1) -> int:
    """Returns the shift in [0, 25] giving the most dictionary words."""
    return select_best_shift(caesar_scores(text, words, workers=workers))
