"""Tests for scenario parsing and input validation."""
from __future__ import annotations

from pathlib import Path

import pytest
from meadow.animals import Grazer, Omnivore, Predator
from meadow.errors import (
    EnergyOutOfBounds,
    GrassOutOfBounds,
    InvalidInputs,
    InvalidNumberOfAnimalParameters,
    SpeedOutOfBounds,
    WeightOutOfBounds,
)
from meadow.scenario import (
    Scenario,
    load_scenario,
    parse_animal,
    parse_animal_count,
    parse_days,
    parse_grass,
    parse_number,
    read_scenario,
)


class TestParseNumber:
    @pytest.mark.parametrize("token, value", [
        ("12", 12.0),
        ("12.5", 12.5),
        ("12.5F", 12.5),
        ("12.5f", 12.5),
        ("-3", -3.0),
        ("7F", 7.0),
        ("1.", 1.0),
        (".5f", 0.5),
        ("2e1", 20.0),
    ])
    def test_valid(self, token: str, value: float) -> None:
        assert parse_number(token) == value

    @pytest.mark.parametrize("token", [
        "", "F", "abc", "1.2.3", "12FF", "nan", "inf", "-infF",
        "1_0", "\u0661\u0662", "1e999",
    ])
    def test_invalid(self, token: str) -> None:
        with pytest.raises(InvalidInputs):
            parse_number(token)


class TestHeaderLines:
    @pytest.mark.parametrize("line, days", [("1", 1), ("30\n", 30), ("  7  ", 7), ("+5", 5)])
    def test_days(self, line: str, days: int) -> None:
        assert parse_days(line) == days

    @pytest.mark.parametrize("line", ["0", "31", "-2", "3.0", "three", "", "1_0"])
    def test_days_invalid(self, line: str) -> None:
        with pytest.raises(InvalidInputs):
            parse_days(line)

    @pytest.mark.parametrize("line, grass", [("0", 0.0), ("100", 100.0), ("55.5f\n", 55.5)])
    def test_grass(self, line: str, grass: float) -> None:
        assert parse_grass(line) == grass

    @pytest.mark.parametrize("line", ["-1", "100.5", "lots", ""])
    def test_grass_invalid_is_out_of_bounds(self, line: str) -> None:
        with pytest.raises(GrassOutOfBounds):
            parse_grass(line)

    @pytest.mark.parametrize("line, count", [("1", 1), ("20", 20)])
    def test_animal_count(self, line: str, count: int) -> None:
        assert parse_animal_count(line) == count

    @pytest.mark.parametrize("line", ["0", "21", "two"])
    def test_animal_count_invalid(self, line: str) -> None:
        with pytest.raises(InvalidInputs):
            parse_animal_count(line)


class TestParseAnimal:
    def test_predator(self) -> None:
        a = parse_animal("Predator 50F 20 60.5f")
        assert isinstance(a, Predator)
        assert (a.weight, a.speed, a.energy) == (50.0, 20.0, 60.5)

    def test_extra_whitespace(self) -> None:
        assert isinstance(parse_animal("  Grazer\t30   30 50 \n"), Grazer)

    @pytest.mark.parametrize("line", ["", "Grazer 30 30", "Grazer 30 30 50 1"])
    def test_wrong_token_count(self, line: str) -> None:
        with pytest.raises(InvalidNumberOfAnimalParameters):
            parse_animal(line)

    def test_bad_number(self) -> None:
        with pytest.raises(InvalidInputs):
            parse_animal("Omnivore 30 fast 50")

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidInputs):
            parse_animal("Lion 30 30 50")

    def test_number_checked_before_kind(self) -> None:
        with pytest.raises(InvalidInputs) as info:
            parse_animal("Lion 30 x 50")
        assert info.value.value == "x"

    def test_kind_checked_before_bounds(self) -> None:
        with pytest.raises(InvalidInputs):
            parse_animal("Lion 1000 30 50")

    @pytest.mark.parametrize("line, error", [
        ("Grazer 1 1 500", WeightOutOfBounds),
        ("Grazer 30 1 500", SpeedOutOfBounds),
        ("Grazer 30 30 500", EnergyOutOfBounds),
    ])
    def test_bound_order(self, line: str, error: type) -> None:
        with pytest.raises(error):
            parse_animal(line)


class TestReadScenario:
    def test_full_scenario(self) -> None:
        s = read_scenario([
            "3\n", "80.0F\n", "3\n",
            "Predator 50 20 60\n",
            "Grazer 30 30 50\n",
            "Omnivore 40 25 45\n",
        ])
        assert isinstance(s, Scenario)
        assert s.days == 3
        assert s.grass == 80.0
        assert [type(a) for a in s.roster] == [Predator, Grazer, Omnivore]

    def test_extra_lines_ignored(self) -> None:
        s = read_scenario(["1", "10", "1", "Grazer 30 30 50", "garbage"])
        assert len(s.roster) == 1

    @pytest.mark.parametrize("lines", [[], ["1"], ["1", "10"]])
    def test_missing_header(self, lines: list[str]) -> None:
        with pytest.raises(InvalidInputs):
            read_scenario(lines)

    def test_missing_animal_line(self) -> None:
        with pytest.raises(InvalidNumberOfAnimalParameters):
            read_scenario(["1", "10", "2", "Grazer 30 30 50"])

    def test_days_checked_first(self) -> None:
        with pytest.raises(InvalidInputs):
            read_scenario(["0", "500", "0"])

    def test_grass_checked_before_count(self) -> None:
        with pytest.raises(GrassOutOfBounds):
            read_scenario(["1", "500", "0"])

    def test_first_bad_animal_wins(self) -> None:
        with pytest.raises(SpeedOutOfBounds):
            read_scenario(["1", "10", "2", "Grazer 30 99 50", "Lion 1 1"])


def test_load_scenario(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("2\n40\n2\nPredator 50 20 60\nGrazer 30 30 50\n")
    s = load_scenario(path)
    assert s.days == 2
    assert s.grass == 40.0
    assert len(s.roster) == 2


def test_load_scenario_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_scenario(tmp_path / "nope.txt")


def test_load_scenario_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes(b"1\n50\n1\nGrazer 30 30 5\xff0\n")
    with pytest.raises(InvalidInputs):
        load_scenario(path)
