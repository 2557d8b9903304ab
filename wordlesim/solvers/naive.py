"""
Naive solver: always guesses the same word.

Useful as a pipeline check and as the worst-case baseline; unless the answer
happens to be that word, every game ends LOST after the full round budget.
"""

from __future__ import annotations

from typing import Sequence
from .base import BaseSolver, register


@register
class NaiveSolver(BaseSolver):
    id = "naive"
    name = "Naive (constant guess)"
    version = "1.0.0"

    def __init__(self, word: str = "huhuh", **_ignored):
        self.word = word

    def guess(self, history: Sequence) -> str:
        return self.word
