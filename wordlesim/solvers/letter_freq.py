"""
Letter-Frequency Solver (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidate set (already filtered
    by past feedback). Score each word as the sum of its DISTINCT letters'
    frequencies. Pick the max; break ties with seeded RNG.

Notes:
  - Ignores positions.
  - Scores the bigger allowed pool only while candidates are numerous; once
    the space is small, only candidates are considered so the guess can win.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Sequence
from .base import WordListSolver, register


def distinct_letter_score(w: str, counts: Counter) -> int:
    """Sum of per-letter counts with duplicate letters in `w` counted once."""
    return sum(counts[ch] for ch in set(w))


@register
class LetterFreqSolver(WordListSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    # Above this many candidates, probe with the allowed list instead.
    CAND_POOL_LIMIT = 200

    def guess(self, history: Sequence) -> str:
        candidates: List[str] = self.candidates(history)
        pool: List[str] = candidates if 0 < len(candidates) <= self.CAND_POOL_LIMIT else self.allowed
        if not pool:
            raise ValueError(f"{self.name}: no answers or allowed words to choose from")

        counts = Counter("".join(candidates or self.allowed))

        best_score = None
        best_words: List[str] = []
        for w in pool:
            s = distinct_letter_score(w, counts)
            if best_score is None or s > best_score:
                best_score, best_words = s, [w]
            elif s == best_score:
                best_words.append(w)

        return self.pick(best_words)
