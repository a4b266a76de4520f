"""Scenario input: parsing and validation of the plain-text scenario format.

The format is line based::

    <days>                       integer in [1, 30]
    <grass>                      number in [0, 100]
    <count>                      integer in [1, 20]
    <kind> <weight> <speed> <energy>    repeated <count> times

Numbers may carry one trailing ``F`` or ``f`` (``12.5F``). Every error
here is fatal and raised as soon as it is found, in the order the lines are
read.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from meadow.animals import Animal, make_animal
from meadow.bounds import ANIMAL_COUNT, DAYS, GRASS
from meadow.errors import GrassOutOfBounds, InvalidInputs, InvalidNumberOfAnimalParameters

ANIMAL_FIELDS = 4

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass
class Scenario:
    days: int
    grass: float
    roster: list[Animal] = field(default_factory=list)


def parse_number(token: str) -> float:
    """Parse a finite decimal float, dropping one trailing ``F``/``f``. Raises InvalidInputs."""
    text = token[:-1] if token.endswith(("F", "f")) else token
    if not _DECIMAL.fullmatch(text):
        raise InvalidInputs(token)
    value = float(text)
    if not math.isfinite(value):
        raise InvalidInputs(token)
    return value


def _parse_integer(line: str) -> int:
    text = line.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidInputs(text)
    return int(text)


def parse_days(line: str) -> int:
    return DAYS.check(_parse_integer(line), InvalidInputs)


def parse_grass(line: str) -> float:
    """Any problem with the grass line, unparseable included, is GrassOutOfBounds."""
    try:
        value = parse_number(line.strip())
    except InvalidInputs:
        raise GrassOutOfBounds(line.strip()) from None
    return GRASS.check(value, GrassOutOfBounds)


def parse_animal_count(line: str) -> int:
    return ANIMAL_COUNT.check(_parse_integer(line), InvalidInputs)


def parse_animal(line: str) -> Animal:
    """Build an animal from ``<kind> <weight> <speed> <energy>``.

    Checks, in order: token count, the three numbers, the kind, then the
    weight, speed and energy bounds.
    """
    tokens = line.split()
    if len(tokens) != ANIMAL_FIELDS:
        raise InvalidNumberOfAnimalParameters(line.strip())
    kind, *numbers = tokens
    weight, speed, energy = (parse_number(token) for token in numbers)
    return make_animal(kind, weight, speed, energy)


def read_scenario(lines: Iterable[str]) -> Scenario:
    """Parse a whole scenario. A missing header line is InvalidInputs; a
    missing animal line is InvalidNumberOfAnimalParameters."""
    it = iter(lines)
    header = [next(it, None) for _ in range(3)]
    days_line, grass_line, count_line = header
    if days_line is None or grass_line is None or count_line is None:
        raise InvalidInputs()

    scenario = Scenario(
        days=parse_days(days_line),
        grass=parse_grass(grass_line),
    )
    count = parse_animal_count(count_line)
    for _ in range(count):
        line = next(it, None)
        if line is None:
            raise InvalidNumberOfAnimalParameters()
        scenario.roster.append(parse_animal(line))
    return scenario


def load_scenario(path: str | Path) -> Scenario:
    """Read a scenario file. OSError propagates unchanged.

    Undecodable bytes become U+FFFD, so they fail as InvalidInputs when parsed.
    """
    with open(path, encoding="utf-8", errors="replace") as f:
        return read_scenario(f)
