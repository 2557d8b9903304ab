"""
Word-list loading.

Two text formats are read:
  - dictionary: one entry per line, "<word> <frequency>". Only the word is
    kept; the frequency column is ignored.
  - answers:    whitespace-delimited tokens, one answer per token, order and
    duplicates preserved (each token is one game).

The parse_* functions work on text already in memory; load_* read a UTF-8 file
first and raise FileNotFoundError if the path doesn't exist.
"""

from __future__ import annotations
from pathlib import Path
from typing import FrozenSet, List


def _read_text(p: Path | str) -> str:
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8")


def parse_dictionary(text: str) -> FrozenSet[str]:
    """Collect the first token of every non-blank line into a frozenset."""
    words = set()
    for line in text.splitlines():
        fields = line.split()
        if fields:
            words.add(fields[0])
    return frozenset(words)


def parse_answers(text: str) -> List[str]:
    return text.split()


def load_dictionary(p: Path | str) -> FrozenSet[str]:
    return parse_dictionary(_read_text(p))


def load_answers(p: Path | str) -> List[str]:
    return parse_answers(_read_text(p))
