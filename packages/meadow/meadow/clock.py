"""DayClock - counts simulated days up to a fixed total."""

from meadow.bounds import DAYS
from meadow.errors import InvalidInputs
from meadow.types import DayContext


class DayClock:
    def __init__(self, days: int) -> None:
        if isinstance(days, bool) or not isinstance(days, int):
            raise InvalidInputs(days)
        self._days = DAYS.check(days, InvalidInputs)
        self._day = 0

    @property
    def days(self) -> int:
        return self._days

    @property
    def day(self) -> int:
        return self._day

    @property
    def days_remaining(self) -> int:
        return self._days - self._day

    @property
    def finished(self) -> bool:
        return self._day >= self._days

    def advance(self) -> int:
        if self.finished:
            raise RuntimeError(f"All {self._days} days have already run")
        self._day += 1
        return self._day

    def context(self) -> DayContext:
        return DayContext(day=self._day, days_total=self._days)
