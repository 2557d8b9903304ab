import logging
from pathlib import Path
import pytest
from apps.cli.run import main
from wordlesim.engine import IllegalGuessError


@pytest.fixture
def wordlists(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    a = tmp_path / "answers.txt"
    d.write_text("crane 50\nraise 40\nstare 30\ntrace 20\nslate 10\n", encoding="utf-8")
    a.write_text("crane stare\ntrace\n", encoding="utf-8")
    return str(d), str(a)


@pytest.mark.parametrize("solver_id", ["random_consistent", "letter_freq", "entropy"])
def test_run_logs_each_game(wordlists, caplog, solver_id):
    d, a = wordlists
    caplog.set_level(logging.INFO)
    rc = main(["--dictionary", d, "--answers", a, "--solver", solver_id, "--progress", "off"])
    assert rc == 0
    games = [r.getMessage() for r in caplog.records
             if r.name == "apps.cli.run" and r.levelno == logging.INFO and ": " in r.getMessage()]
    assert [m.split(":")[0] for m in games] == ["crane", "stare", "trace"]
    assert all("won in" in m for m in games)


def test_run_sample(wordlists, caplog):
    d, a = wordlists
    caplog.set_level(logging.INFO)
    main(["--dictionary", d, "--answers", a, "--sample", "1", "--progress", "off"])
    assert any(r.getMessage().startswith("crane: ") for r in caplog.records)
    assert not any(r.getMessage().startswith("stare: ") for r in caplog.records)


def test_naive_guess_outside_dictionary(wordlists, caplog):
    d, a = wordlists
    with pytest.raises(IllegalGuessError):
        main(["--dictionary", d, "--answers", a, "--solver", "naive", "--progress", "off"])

    caplog.set_level(logging.INFO)
    assert main(["--dictionary", d, "--answers", a, "--solver", "naive",
                 "--skip-legality", "--progress", "off"]) == 0
    assert any(r.getMessage() == "crane: lost" for r in caplog.records)


@pytest.mark.parametrize("solver_id", ["random_consistent", "letter_freq", "entropy"])
@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_answer_missing_from_dictionary_is_dropped_from_pool(tmp_path: Path, caplog, solver_id, seed):
    d = tmp_path / "dictionary.txt"
    a = tmp_path / "answers.txt"
    d.write_text("crane 3\nslate 2\ntrace 1\n", encoding="utf-8")
    a.write_text("crane trace zzzzz\n", encoding="utf-8")

    caplog.set_level(logging.INFO)
    rc = main(["--dictionary", str(d), "--answers", str(a), "--solver", solver_id,
               "--seed", str(seed), "--progress", "off"])
    assert rc == 0

    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("zzzzz" in m for m in warnings)
    messages = [r.getMessage() for r in caplog.records]
    assert "zzzzz: lost" in messages
    assert any(m.startswith("crane: won in") for m in messages)
    assert any(m.startswith("trace: won in") for m in messages)


def test_startup_logs_solver_version(wordlists, caplog):
    d, a = wordlists
    caplog.set_level(logging.INFO)
    main(["--dictionary", d, "--answers", a, "--solver", "entropy", "--progress", "off"])
    assert any(r.getMessage().startswith("Solver entropy v1.1.0") for r in caplog.records)
