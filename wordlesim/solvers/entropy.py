"""
Entropy Solver (expected information gain).

Main idea:
  - For each candidate guess g, partition CURRENT candidates by the mask g
    would receive against each of them.
  - Compute Shannon entropy H over those buckets; pick g with max H.
Tie-break:
  - smaller worst-case bucket (minimax-ish), then seeded RNG.

Pool selection:
  - When the candidate set is large, don't evaluate the ENTIRE allowed list.
    Pre-rank allowed words by distinct-letter score w.r.t. CURRENT candidates,
    keep only the top-K (POOL_CAP), and always include top candidate words too.
"""

from __future__ import annotations
from collections import Counter, defaultdict
from typing import Dict, List, Sequence, Tuple

import numpy as np

from wordlesim.engine import Mask, compute
from .base import WordListSolver, register
from .letter_freq import distinct_letter_score


def entropy_of_guess(guess: str, candidates: List[str]) -> Tuple[float, int]:
    """Partition candidates by mask; return (entropy_bits, worst_bucket_size)."""
    if len(candidates) <= 1:
        return 0.0, len(candidates)

    buckets: Dict[Mask, int] = defaultdict(int)
    for ans in candidates:
        buckets[compute(ans, guess)] += 1

    sizes = np.fromiter(buckets.values(), dtype=np.float64, count=len(buckets))
    p = sizes / sizes.sum()
    return float(-(p * np.log2(p)).sum()), int(sizes.max())


@register
class EntropySolver(WordListSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "1.1.0"

    # If candidates <= this, search only among candidates
    CANDIDATE_ONLY_LIMIT = 200

    # When candidates are larger, cap the pool size after prefiltering
    POOL_CAP = 400

    # Top candidate words always merged into a capped pool
    INCLUDE_TOP_CANDIDATES = 100

    def _select_pool(self, candidates: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates

        counts = Counter("".join(candidates))

        def rank(w: str) -> int:
            return distinct_letter_score(w, counts)

        pool = sorted(self.allowed, key=rank, reverse=True)[: self.POOL_CAP]
        top_cands = sorted(candidates, key=rank, reverse=True)[: self.INCLUDE_TOP_CANDIDATES]

        # Stable union: top candidates first
        return list(dict.fromkeys(top_cands + pool))

    def guess(self, history: Sequence) -> str:
        candidates: List[str] = self.candidates(history)
        if len(candidates) == 1:
            return candidates[0]
        if not candidates:
            if not self.allowed:
                raise ValueError(f"{self.name}: no answers or allowed words to choose from")
            return self.pick(self.allowed)

        best_key = None
        best_words: List[str] = []
        for g in self._select_pool(candidates):
            H, worst = entropy_of_guess(g, candidates)
            key = (H, -worst)
            if best_key is None or key > best_key:
                best_key, best_words = key, [g]
            elif key == best_key:
                best_words.append(g)

        return self.pick(best_words)
