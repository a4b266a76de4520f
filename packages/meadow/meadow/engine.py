"""Engine - the daily tick loop and run lifecycle."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from meadow.animals import Animal
from meadow.clock import DayClock
from meadow.field import Field, make_field
from meadow.roster import Roster
from meadow.systems import (
    make_cull_system,
    make_decay_system,
    make_feeding_system,
    make_regrowth_system,
)
from meadow.types import (
    DayContext,
    DeathHandler,
    SimulationState,
    System,
    ViolationHandler,
)

logger = logging.getLogger(__name__)


class Engine:
    """Owns one field and one roster and advances them a day at a time.

    The engine is ``RUNNING`` while days remain and ``TERMINAL`` once they
    have all run; a terminal engine cannot be stepped again.
    """

    def __init__(
        self,
        field: Field,
        roster: Roster | Iterable[Animal],
        days: int,
        on_violation: ViolationHandler | None = None,
        on_death: DeathHandler | None = None,
    ) -> None:
        self._field = field
        self._roster = roster if isinstance(roster, Roster) else Roster(roster)
        self._clock = DayClock(days)
        self._systems: list[System] = [
            make_feeding_system(on_violation),
            make_decay_system(),
            make_cull_system(on_death),
            make_regrowth_system(),
        ]
        self._day_end_hooks: list[System] = []
        self._start_hooks: list[Callable[[Engine], None]] = []
        self._stop_hooks: list[Callable[[Engine], None]] = []
        self._started = False

    @property
    def field(self) -> Field:
        return self._field

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def clock(self) -> DayClock:
        return self._clock

    @property
    def day(self) -> int:
        return self._clock.day

    @property
    def days_remaining(self) -> int:
        return self._clock.days_remaining

    @property
    def state(self) -> SimulationState:
        if self._clock.finished:
            return SimulationState.TERMINAL
        return SimulationState.RUNNING

    def on_start(self, hook: Callable[[Engine], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Engine], None]) -> None:
        self._stop_hooks.append(hook)

    def on_day_end(self, hook: System) -> None:
        """Register an observer called after regrowth, with the same arguments as a system."""
        self._day_end_hooks.append(hook)

    def _start(self) -> None:
        self._started = True
        logger.info(
            "starting run: %d days, %d animals, grass %s",
            self._clock.days,
            len(self._roster),
            self._field.grass,
        )
        for hook in self._start_hooks:
            hook(self)

    def _stop(self) -> None:
        logger.info(
            "run finished after %d days: %d survivors, grass %s",
            self._clock.day,
            len(self._roster),
            self._field.grass,
        )
        for hook in self._stop_hooks:
            hook(self)

    def _tick(self) -> DayContext:
        self._clock.advance()
        ctx = self._clock.context()
        for system in self._systems:
            system(self._roster, self._field, ctx)
        for hook in self._day_end_hooks:
            hook(self._roster, self._field, ctx)
        logger.debug(
            "day %d done: %d animals, grass %s",
            ctx.day,
            len(self._roster),
            self._field.grass,
        )
        return ctx

    def step(self) -> DayContext:
        """Run exactly one day. Raises RuntimeError once the engine is terminal."""
        if self.state is SimulationState.TERMINAL:
            raise RuntimeError("Simulation has already finished")
        if not self._started:
            self._start()
        ctx = self._tick()
        if self.state is SimulationState.TERMINAL:
            self._stop()
        return ctx

    def run(self) -> list[Animal]:
        """Run every remaining day. Returns the survivors in roster order."""
        while self.state is SimulationState.RUNNING:
            self.step()
        return self.survivors()

    def survivors(self) -> list[Animal]:
        return self._roster.alive()

    def signal_survivors(self, emit: Callable[[str], None] = print) -> None:
        for animal in self._roster:
            animal.signal(emit)


def run(
    days: int,
    initial_grass: float,
    roster: list[Animal],
    on_violation: ViolationHandler | None = None,
) -> list[Animal]:
    """Simulate *days* days on a fresh field holding *initial_grass*.

    *roster* is updated in place: dead animals are removed from it. Returns
    the survivors. Raises GrassOutOfBounds or InvalidInputs before anything
    is simulated if the grass or the day count is out of range.
    """
    field = make_field(initial_grass)
    engine = Engine(field, roster, days, on_violation=on_violation)
    survivors = engine.run()
    roster[:] = list(engine.roster)
    return survivors
