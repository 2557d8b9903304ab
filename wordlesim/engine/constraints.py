"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the answers list)
  - a history of Guess entries (word + mask) from the game loop

Return:
  - words that are consistent with ALL feedback seen so far.

Solvers call this on every turn to shrink the answer space before choosing
their next guess.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TYPE_CHECKING

from .scoring import compute
from .validation import WORD_LENGTH

if TYPE_CHECKING:
    from wordlesim.harness.core import Guess


def filter_candidates(words: Iterable[str], history: Sequence["Guess"]) -> List[str]:
    """
    Keep only words that, taken as the answer, would produce exactly the
    recorded mask for every entry in `history`.

    Words that are not WORD_LENGTH long are skipped rather than rejected.
    Order is preserved as in `words`.
    """
    out: List[str] = []
    for w in words:
        if len(w) != WORD_LENGTH:
            continue
        if all(compute(w, entry.word) == entry.mask for entry in history):
            out.append(w)
    return out
