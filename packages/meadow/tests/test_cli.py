"""Tests for the command-line entry point."""
from __future__ import annotations

from pathlib import Path

import pytest
from meadow.cli import DEFAULT_INPUT, main, parse_args


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "input.txt"
    path.write_text(text)
    return str(path)


def test_default_input_path():
    args = parse_args([])
    assert args.input == DEFAULT_INPUT == "input.txt"
    assert not args.trace


def test_verbose_and_log_level_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["--verbose", "--log-level", "INFO"])


def test_prints_survivor_signals(tmp_path, capsys):
    path = _write(tmp_path, "1\n100\n2\nPredator 50 20 60\nGrazer 30 30 50\n")
    assert main([path]) == 0
    assert capsys.readouterr().out == "Roar\n"


def test_prints_violations_then_signals(tmp_path, capsys):
    path = _write(tmp_path, "2\n50\n2\nPredator 50 20 60\nPredator 60 25 70\n")
    assert main([path]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Cannibalism is not allowed",
        "Cannibalism is not allowed",
        "Cannibalism is not allowed",
        "Cannibalism is not allowed",
        "Roar",
        "Roar",
    ]


def test_survivors_in_roster_order(tmp_path, capsys):
    path = _write(tmp_path, "1\n100\n3\nGrazer 30 30 50\nOmnivore 40 50 90\nGrazer 20 30 50\n")
    assert main([path]) == 0
    # the boar eats the second zebra; the first zebra survives
    assert capsys.readouterr().out.splitlines() == ["Ihoho", "Oink"]


@pytest.mark.parametrize("text, message", [
    ("0\n50\n1\nGrazer 30 30 50\n", "Invalid inputs"),
    ("1\n150\n1\nGrazer 30 30 50\n", "The grass is out of bounds"),
    ("1\n50\n21\n", "Invalid inputs"),
    ("1\n50\n1\nGrazer 30 30\n", "Invalid number of animal parameters"),
    ("1\n50\n2\nGrazer 30 30 50\n", "Invalid number of animal parameters"),
    ("1\n50\n1\nZebra 30 30 50\n", "Invalid inputs"),
    ("1\n50\n1\nGrazer 3 30 50\n", "The weight is out of bounds"),
    ("1\n50\n1\nGrazer 30 3 50\n", "The speed is out of bounds"),
    ("1\n50\n1\nGrazer 30 30 101\n", "The energy is out of bounds"),
    ("1\n50\n", "Invalid inputs"),
])
def test_fatal_input_prints_one_line(tmp_path, capsys, text, message):
    path = _write(tmp_path, text)
    assert main([path]) == 1
    assert capsys.readouterr().out == message + "\n"


def test_undecodable_bytes_are_invalid_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_bytes(b"1\n50\n1\nGrazer 30 30 5\xff0\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Invalid inputs\n"


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing)]) == 1
    out = capsys.readouterr().out
    assert out.startswith(str(missing))
    assert len(out.splitlines()) == 1


def test_trace_goes_to_stderr(tmp_path, capsys):
    path = _write(tmp_path, "2\n10\n1\nGrazer 20 30 50\n")
    assert main([path, "--trace"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Ihoho\n"
    lines = captured.err.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("day  1  grass  16.00")
    assert "Grazer(" in lines[1]
