from .scoring import Correctness, Mask, compute, score
from .constraints import filter_candidates
from .validation import (
    WORD_LENGTH,
    IllegalGuessError,
    InvalidWordError,
    check_legal,
    check_length,
)

__all__ = [
    "Correctness", "Mask", "compute", "score", "filter_candidates",
    "WORD_LENGTH", "IllegalGuessError", "InvalidWordError", "check_legal", "check_length",
]
