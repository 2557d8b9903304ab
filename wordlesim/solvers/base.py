from __future__ import annotations
import random
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Sequence, Type, TYPE_CHECKING

from wordlesim.engine import filter_candidates

if TYPE_CHECKING:
    from wordlesim.harness.core import Guess

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- The one capability the game loop relies on ----
class BaseSolver(ABC):
    id = ""
    name = "Base"
    version = "0.0.0"

    @abstractmethod
    def guess(self, history: Sequence["Guess"]) -> str:
        """Return the next guess given the (read-only) history so far."""


# ---- Shared plumbing for strategies that search a word list ----
class WordListSolver(BaseSolver):
    """
    Base for solvers that pick from an answers pool.

    Args:
        answers: candidate universe (words that may be the hidden answer)
        allowed: guess universe; defaults to `answers`
        seed:    seeds the private RNG used for tie-breaks
    """

    def __init__(self, answers: Iterable[str], allowed: Optional[Iterable[str]] = None,
                 seed: int | None = None):
        self.answers: List[str] = list(answers)
        self.allowed: List[str] = list(allowed) if allowed is not None else list(self.answers)
        self.rng = random.Random(seed)

    def candidates(self, history: Sequence["Guess"]) -> List[str]:
        """Answers still consistent with every mask in `history`."""
        return filter_candidates(self.answers, history)

    def pick(self, words: List[str]) -> str:
        """Seeded tie-break among equally good words."""
        return words[self.rng.randrange(len(words))]
