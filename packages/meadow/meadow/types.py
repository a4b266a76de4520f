"""Shared enums, context and type aliases for the meadow engine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from meadow.errors import InvalidInputs

if TYPE_CHECKING:
    from meadow.animals import Animal
    from meadow.errors import HuntingError
    from meadow.field import Field
    from meadow.roster import Roster


class Species(Enum):
    """Identity tag of each variant: input token and the sound it makes."""

    PREDATOR = ("Predator", "Roar")
    GRAZER = ("Grazer", "Ihoho")
    OMNIVORE = ("Omnivore", "Oink")

    def __init__(self, token: str, sound: str) -> None:
        self.token = token
        self.sound = sound

    @classmethod
    def from_token(cls, token: str) -> Species:
        """Look up a species by its exact input token. Raises InvalidInputs."""
        for species in cls:
            if species.token == token:
                return species
        raise InvalidInputs(token)


class SimulationState(Enum):
    RUNNING = "running"
    TERMINAL = "terminal"


@dataclass(frozen=True, slots=True)
class DayContext:
    day: int
    days_total: int

    @property
    def days_remaining(self) -> int:
        return self.days_total - self.day


System = Callable[["Roster", "Field", DayContext], None]

ViolationHandler = Callable[[DayContext, "Animal", "HuntingError"], None]
DeathHandler = Callable[[DayContext, "Animal"], None]
