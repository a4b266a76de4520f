"""Animal base contract, capability protocols and the three variants."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Protocol, Sequence, runtime_checkable

from meadow import feeding
from meadow.bounds import ENERGY, SPEED, WEIGHT
from meadow.errors import (
    EnergyOutOfBounds,
    HuntingError,
    SpeedOutOfBounds,
    WeightOutOfBounds,
)
from meadow.types import Species

if TYPE_CHECKING:
    from meadow.field import Field

DECAY_RATE = 0.01


@runtime_checkable
class Carnivore(Protocol):
    """Capability: picks the next animal on the roster as prey and kills it."""

    def choose_prey(
        self, roster: Sequence[Animal], index: int
    ) -> Animal | HuntingError | None: ...

    def hunt(self, prey: Animal) -> None: ...


@runtime_checkable
class Herbivore(Protocol):
    """Capability: eats grass from the field."""

    def graze(self, field: Field) -> bool: ...


class Animal:
    """Common attributes and lifecycle of every roster member.

    Weight, speed and energy are validated in that order; the first one out
    of range decides the error. Only energy changes afterwards, always
    clamped to ``[0, 100]``. Only the concrete variants can be built.
    """

    species: ClassVar[Species]

    __slots__ = ("_weight", "_speed", "_energy")

    def __init__(self, weight: float, speed: float, energy: float) -> None:
        if getattr(type(self), "species", None) is None:
            raise TypeError(f"{type(self).__name__} has no species; build a Predator, Grazer or Omnivore")
        WEIGHT.check(weight, WeightOutOfBounds)
        SPEED.check(speed, SpeedOutOfBounds)
        ENERGY.check(energy, EnergyOutOfBounds)
        self._weight = weight
        self._speed = speed
        self._energy = energy

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def energy(self) -> float:
        return self._energy

    def set_energy(self, energy: float) -> None:
        self._energy = ENERGY.clamp(energy)

    def is_alive(self) -> bool:
        return self._energy > 0

    def decay(self) -> None:
        """Lose 1% of current energy. A dead animal stays at 0."""
        self.set_energy(self._energy - self._energy * DECAY_RATE)

    def act(
        self, roster: Sequence[Animal], index: int, field: Field
    ) -> HuntingError | None:
        """Take this animal's turn: graze if it is a Herbivore, then make one
        hunting attempt if it is a Carnivore. Returns the hunting violation, if any.
        """
        if isinstance(self, Herbivore):
            self.graze(field)
        if isinstance(self, Carnivore):
            return feeding.stalk(self, roster, index)
        return None

    def signal(self, emit: Callable[[str], None] = print) -> None:
        """Emit this animal's sound if it is alive; silent otherwise."""
        if self.is_alive():
            emit(self.species.sound)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(weight={self._weight!r}, "
            f"speed={self._speed!r}, energy={self._energy!r})"
        )


class Predator(Animal):
    """Hunts only."""

    species = Species.PREDATOR
    __slots__ = ()

    def choose_prey(
        self, roster: Sequence[Animal], index: int
    ) -> Animal | HuntingError | None:
        return feeding.choose_prey(self, roster, index)

    def hunt(self, prey: Animal) -> None:
        feeding.hunt(self, prey)


class Grazer(Animal):
    """Grazes only."""

    species = Species.GRAZER
    __slots__ = ()

    def graze(self, field: Field) -> bool:
        return feeding.graze(self, field)


class Omnivore(Animal):
    """Grazes, then makes exactly one hunting attempt, every turn.

    The hunt happens even if grazing already filled its energy.
    """

    species = Species.OMNIVORE
    __slots__ = ()

    def graze(self, field: Field) -> bool:
        return feeding.graze(self, field)

    def choose_prey(
        self, roster: Sequence[Animal], index: int
    ) -> Animal | HuntingError | None:
        return feeding.choose_prey(self, roster, index)

    def hunt(self, prey: Animal) -> None:
        feeding.hunt(self, prey)


_VARIANTS: dict[Species, type[Animal]] = {
    Species.PREDATOR: Predator,
    Species.GRAZER: Grazer,
    Species.OMNIVORE: Omnivore,
}


def make_animal(kind: str, weight: float, speed: float, energy: float) -> Animal:
    """Build the variant named by *kind* (``"Predator"``, ``"Grazer"`` or ``"Omnivore"``).

    Raises InvalidInputs for an unknown kind, otherwise the matching
    ``*OutOfBounds`` error for the first attribute out of range.
    """
    return _VARIANTS[Species.from_token(kind)](weight, speed, energy)
