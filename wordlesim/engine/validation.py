"""
Guess and answer legality checks.

Two kinds of failure are distinguished:
  - InvalidWordError  : a word is not exactly WORD_LENGTH characters. This is a
                        caller bug (bad answer list or a broken solver) and is
                        never recovered from inside the game.
  - IllegalGuessError : a solver produced a word that is not in the supplied
                        dictionary. Solvers are required to only emit legal
                        words, so this is a breach of the solver's contract.

Both subclass ValueError so callers that only care about "bad input" can catch
a single type.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

# Every answer and guess has exactly this many characters.
WORD_LENGTH = 5


class InvalidWordError(ValueError):
    """A word does not have exactly WORD_LENGTH characters."""


class IllegalGuessError(ValueError):
    """A solver guessed a word missing from the dictionary."""


def check_length(word: str, role: str = "word") -> str:
    """
    Return `word` unchanged if it has exactly WORD_LENGTH characters,
    otherwise raise InvalidWordError naming its `role` ("answer", "guess", ...).
    """
    if len(word) != WORD_LENGTH:
        raise InvalidWordError(
            f"{role} must have exactly {WORD_LENGTH} characters; got {word!r} ({len(word)})")
    return word


def check_legal(word: str, dictionary: Optional[AbstractSet[str]]) -> str:
    """
    Return `word` if `dictionary` is None or contains it.

    No normalization happens here: the dictionary and the solver are expected
    to agree on case already.
    """
    if dictionary is not None and word not in dictionary:
        raise IllegalGuessError(f"solver guessed {word!r}, which is not in the dictionary")
    return word
