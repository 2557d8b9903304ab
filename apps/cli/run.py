# apps/cli/run.py
"""
CLI entry point for simulating games.

This script:
  1) Loads the dictionary ("<word> <frequency>" lines) and the answers
     (whitespace-separated tokens).
  2) Plays one game per answer with a fresh instance of the requested solver.
  3) Logs each game's outcome (winning round or "lost") once the batch is done.

Answers missing from the dictionary are dropped from the solvers' candidate
pool (with a warning) unless --skip-legality is given.

Usage:
    python -m apps.cli.run --dictionary dictionary.txt --answers answers.txt --solver entropy
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from wordlesim.datasets import load_answers, load_dictionary
from wordlesim.harness import MAX_ROUNDS, run_batch
from wordlesim.solvers import REGISTRY, create_solver, get_solver_ids

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlesim — simulate Wordle games")
    ap.add_argument("--dictionary", required=True,
                    help="path to the allowed-guess list ('<word> <frequency>' per line)")
    ap.add_argument("--answers", required=True,
                    help="path to the answers to play (whitespace-separated)")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--sample", type=int, help="play only the first K answers")
    ap.add_argument("--skip-legality", action="store_true",
                    help="don't reject guesses missing from the dictionary")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar (auto=bar when stderr is a terminal).",
    )
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity (DEBUG shows every round)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    dictionary = load_dictionary(args.dictionary)
    answers = load_answers(args.answers)
    log.info("Loaded %d dictionary words and %d answers", len(dictionary), len(answers))

    cases = answers[: args.sample] if args.sample else answers
    pool = list(dict.fromkeys(answers))
    allowed = sorted(dictionary)

    # Answers outside the dictionary can never be guessed legally; keep them
    # out of the solvers' candidate pool so they don't sink other games.
    missing = sorted(set(pool) - dictionary)
    if missing and not args.skip_legality:
        log.warning("%d answer(s) not in the dictionary, dropped from the solver pool: %s",
                    len(missing), missing[:5])
        pool = [w for w in pool if w in dictionary]

    solver_cls = REGISTRY.get(args.solver)
    if solver_cls is not None:
        log.info("Solver %s v%s (%s)", solver_cls.id, solver_cls.version, solver_cls.name)

    seeds = itertools.count(args.seed + 1)

    def make_solver():
        # Per-game seed keeps games reproducible and independent
        return create_solver(args.solver, answers=pool, allowed=allowed, seed=next(seeds))

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    with logging_redirect_tqdm():
        results = run_batch(
            tqdm(cases, ncols=80, desc="Playing", unit="game", disable=(mode == "off")),
            make_solver,
            dictionary=None if args.skip_legality else dictionary,
            max_rounds=MAX_ROUNDS,
        )

    for answer, won in results:
        log.info("%s: %s", answer, f"won in {won}" if won is not None else "lost")

    return 0


if __name__ == "__main__":
    sys.exit(main())
