"""
Wordle-style feedback for a single (answer, guess) pair.

Conventions (pattern symbols are the Correctness values):
  - 'G'  : CORRECT   = same letter, same position
  - 'Y'  : MISPLACED = letter occurs elsewhere in the answer and that
                       occurrence was not already used by a stronger match
  - '-'  : WRONG     = no unused occurrence left in the answer

Algorithm (two-pass, duplicate-aware):
  1) First pass marks every exact match CORRECT and consumes that answer slot.
  2) Second pass walks the remaining guess positions left to right; each one
     takes the leftmost unconsumed answer slot holding the same letter
     (MISPLACED), or is WRONG if there is none.

The left-to-right order of both scans settles every duplicate-letter case:
an answer with one 'a' lets only the first unmatched guess 'a' be MISPLACED.
Characters are compared as-is; case folding is the caller's job.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from .validation import WORD_LENGTH, check_length


class Correctness(Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    WRONG = "-"


class Mask(tuple):
    """
    Immutable feedback for one guess: exactly WORD_LENGTH Correctness values.

    A tuple subclass, so it compares equal to a plain tuple holding the same
    states and can be used as a dict key when bucketing candidates.
    """

    __slots__ = ()

    def __new__(cls, states: Iterable[Correctness]) -> "Mask":
        states = tuple(states)
        if len(states) != WORD_LENGTH:
            raise ValueError(f"mask must have exactly {WORD_LENGTH} states; got {len(states)}")
        if not all(isinstance(s, Correctness) for s in states):
            raise ValueError(f"mask states must be Correctness values; got {states!r}")
        return super().__new__(cls, states)

    @classmethod
    def from_pattern(cls, pattern: str) -> "Mask":
        """Parse a pattern string such as "GY---"."""
        return cls(Correctness(ch) for ch in pattern)

    @property
    def pattern(self) -> str:
        return "".join(s.value for s in self)

    @property
    def is_win(self) -> bool:
        return all(s is Correctness.CORRECT for s in self)

    def __repr__(self) -> str:
        return f"Mask({self.pattern!r})"


def compute(answer: str, guess: str) -> Mask:
    """
    Compute the feedback mask of `guess` against `answer`.

    Raises InvalidWordError if either word is not exactly WORD_LENGTH long.

    Examples:
      compute("aabbb", "aaccc").pattern -> "GG---"
      compute("aabbb", "ccaac").pattern -> "--YY-"
      compute("xxyyy", "zxxzz").pattern -> "-GY--"
    """
    check_length(answer, "answer")
    check_length(guess, "guess")

    states: List[Correctness] = [Correctness.WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1: exact matches consume their own answer slot.
    for i, (a, g) in enumerate(zip(answer, guess)):
        if a == g:
            states[i] = Correctness.CORRECT
            used[i] = True

    # Pass 2: leftmost unconsumed occurrence wins.
    for i, g in enumerate(guess):
        if states[i] is Correctness.CORRECT:
            continue
        for j, a in enumerate(answer):
            if a == g and not used[j]:
                used[j] = True
                states[i] = Correctness.MISPLACED
                break

    return Mask(states)


def score(guess: str, answer: str) -> str:
    """Pattern string for `guess` against `answer`, e.g. score("belle", "level") -> "-GYYY"."""
    return compute(answer, guess).pattern
