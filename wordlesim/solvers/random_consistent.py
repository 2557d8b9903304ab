"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (answers still
    consistent with all feedback so far).
  - If the candidate set is empty (answer missing from the pool), fall back to
    the allowed list.

Notes:
  - Deterministic across runs with the same seed.
  - This is a baseline to verify the pipeline; it does not try to maximize
    information gain or positional coverage.
"""

from __future__ import annotations

from typing import List, Sequence
from .base import WordListSolver, register


@register
class RandomConsistentSolver(WordListSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def guess(self, history: Sequence) -> str:
        pool: List[str] = self.candidates(history) or self.allowed
        if not pool:
            raise ValueError(f"{self.name}: no answers or allowed words to choose from")
        return self.pick(pool)
