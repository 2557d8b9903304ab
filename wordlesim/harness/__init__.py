from .core import MAX_ROUNDS, Game, GameOverError, GameState, Guess, play, run_batch

__all__ = ["MAX_ROUNDS", "Game", "GameOverError", "GameState", "Guess", "play", "run_batch"]
