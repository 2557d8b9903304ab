"""
Game loop primitives.

- Game:      one puzzle (one hidden answer) played by one solver, round by round.
- play:      run a Game to completion and return the winning round (or None).
- run_batch: play many answers back to back, a fresh solver per answer.
- Enforces the 6-round Wordle budget at the harness layer.

The loop only ever calls `solver.guess(history)`; it does not know or care
which strategy it is driving. These functions are UI-agnostic so they can be
reused by the CLI, a notebook, or tests without changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Callable, Iterable, List, Optional, Tuple

from wordlesim.engine import Mask, compute
from wordlesim.engine.validation import check_legal, check_length

log = logging.getLogger(__name__)

# Single source of truth for the Wordle round budget.
MAX_ROUNDS = 6


@dataclass(frozen=True)
class Guess:
    """One history entry: the guessed word and the feedback it received."""
    word: str
    mask: Mask


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameOverError(RuntimeError):
    """step() was called on a game that already finished."""


class Game:
    """
    A single game as an explicit state machine.

        PLAYING(r) --match-->                      WON (winning_round = r + 1)
        PLAYING(r) --miss, r + 1 < max_rounds-->   PLAYING(r + 1)
        PLAYING(r) --miss, r + 1 == max_rounds-->  LOST

    The history is owned by the game; the solver only ever sees a tuple
    snapshot of it.
    """

    def __init__(
            self,
            answer: str,
            solver,
            dictionary: Optional[AbstractSet[str]] = None,
            max_rounds: int = MAX_ROUNDS,
    ) -> None:
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1; got {max_rounds}")
        self.answer = check_length(answer, "answer")
        self.solver = solver
        self.dictionary = dictionary
        self.max_rounds = max_rounds

        self.round = 0
        self.state = GameState.PLAYING
        self.winning_round: Optional[int] = None
        self._history: List[Guess] = []

    @property
    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    @property
    def finished(self) -> bool:
        return self.state is not GameState.PLAYING

    def step(self) -> GameState:
        """Play exactly one round and return the resulting state."""
        if self.finished:
            raise GameOverError(f"game for {self.answer!r} is already {self.state.value}")

        word = self.solver.guess(self.history)
        check_legal(word, self.dictionary)

        if word == self.answer:
            self.round += 1
            self.winning_round = self.round
            self.state = GameState.WON
            log.debug("answer=%s round=%d word=%s won", self.answer, self.round, word)
            return self.state

        mask = compute(self.answer, word)
        self._history.append(Guess(word, mask))
        self.round += 1
        log.debug("answer=%s round=%d word=%s mask=%s", self.answer, self.round, word, mask.pattern)

        if self.round >= self.max_rounds:
            self.state = GameState.LOST
            log.debug("answer=%s lost after %d rounds", self.answer, self.round)
        return self.state

    def run(self) -> Optional[int]:
        """Step until the game is over; return the 1-indexed winning round or None."""
        while not self.finished:
            self.step()
        return self.winning_round


def play(
        answer: str,
        solver,
        dictionary: Optional[AbstractSet[str]] = None,
        max_rounds: int = MAX_ROUNDS,
) -> Optional[int]:
    """
    Execute one game until the solver wins or the round budget is exhausted.

    Args:
        answer:      the hidden word for this game
        solver:      any object with guess(history) -> str
        dictionary:  optional set of legal guesses; a guess outside it raises
                     IllegalGuessError
        max_rounds:  round budget (Wordle uses 6)

    Returns:
        the round (1..max_rounds) in which the answer was guessed, or None if
        the budget ran out.
    """
    return Game(answer, solver, dictionary=dictionary, max_rounds=max_rounds).run()


def run_batch(
        answers: Iterable[str],
        solver_factory: Callable[[], object],
        *,
        dictionary: Optional[AbstractSet[str]] = None,
        max_rounds: int = MAX_ROUNDS,
) -> List[Tuple[str, Optional[int]]]:
    """
    Play one game per answer, in order, building a fresh solver for each so no
    state leaks between games.

    Returns (answer, winning_round) pairs; winning_round is None for a loss.
    """
    out: List[Tuple[str, Optional[int]]] = []
    for answer in answers:
        out.append((answer, play(answer, solver_factory(), dictionary=dictionary, max_rounds=max_rounds)))
    return out
