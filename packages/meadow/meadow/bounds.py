"""Closed numeric ranges and the checks built on them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from meadow.errors import MeadowError

N = TypeVar("N", int, float)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Inclusive range ``[low, high]``.

    NaN is never contained, so it fails :meth:`check` like any other
    out-of-range value.
    """

    low: float
    high: float

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"low must be <= high, got [{self.low}, {self.high}]")

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def clamp(self, value: float) -> float:
        return min(max(value, self.low), self.high)

    def check(self, value: N, error: Callable[[N], MeadowError]) -> N:
        """Return *value* unchanged, or raise ``error(value)`` if it is out of range."""
        if not self.contains(value):
            raise error(value)
        return value


GRASS = Bounds(0.0, 100.0)
WEIGHT = Bounds(5.0, 200.0)
SPEED = Bounds(5.0, 60.0)
ENERGY = Bounds(0.0, 100.0)

DAYS = Bounds(1, 30)
ANIMAL_COUNT = Bounds(1, 20)
