from pathlib import Path
import pytest
from wordlesim.datasets import load_answers, load_dictionary, parse_answers, parse_dictionary


def test_parse_dictionary_keeps_words_only():
    text = "crane 1204\nslate 987\n\n  trace 12  \ncrane 5\n"
    assert parse_dictionary(text) == frozenset({"crane", "slate", "trace"})


def test_parse_answers_keeps_order_and_duplicates():
    assert parse_answers("crane slate\n\ttrace\ncrane\n") == ["crane", "slate", "trace", "crane"]


def test_load_from_files(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    a = tmp_path / "answers.txt"
    d.write_text("crane 10\nslate 3\n", encoding="utf-8")
    a.write_text("slate\ncrane\n", encoding="utf-8")

    assert load_dictionary(d) == frozenset({"crane", "slate"})
    assert load_answers(str(a)) == ["slate", "crane"]


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")
    with pytest.raises(FileNotFoundError):
        load_answers(tmp_path / "nope.txt")
