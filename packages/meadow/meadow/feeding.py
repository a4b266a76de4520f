"""Feeding rules shared by the variants: prey selection, the kill, grazing."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from meadow.errors import Cannibalism, HuntingError, SelfHunting, TooStrongPrey

if TYPE_CHECKING:
    from meadow.animals import Animal, Carnivore
    from meadow.field import Field

GRAZE_DIVISOR = 10.0


def choose_prey(
    hunter: Animal, roster: Sequence[Animal], index: int
) -> Animal | HuntingError | None:
    """Pick the hunter's prey: the next animal in roster order, wrapping around.

    Checks run in a fixed order and the first match decides:

    1. the neighbour is the hunter itself -> :class:`SelfHunting`
    2. the neighbour is dead -> ``None`` (no target, not an error)
    3. same species -> :class:`Cannibalism`
    4. faster *and* more energetic than the hunter -> :class:`TooStrongPrey`
    5. otherwise the neighbour is returned.

    Violations are returned, not raised.
    """
    if roster[index] is not hunter:
        raise ValueError(f"{hunter!r} is not at roster index {index}")
    prey = roster[(index + 1) % len(roster)]

    if prey is hunter:
        return SelfHunting(hunter, prey)
    if not prey.is_alive():
        return None
    if prey.species is hunter.species:
        return Cannibalism(hunter, prey)
    if prey.speed > hunter.speed and prey.energy > hunter.energy:
        return TooStrongPrey(hunter, prey)
    return prey


def hunt(hunter: Animal, prey: Animal) -> None:
    """Kill *prey* outright; the hunter gains the prey's full weight as energy."""
    prey.set_energy(0.0)
    hunter.set_energy(hunter.energy + prey.weight)


def graze(grazer: Animal, field: Field) -> bool:
    """Eat ``weight / 10`` grass if the field has strictly more than that.

    All or nothing: returns False and changes nothing when the field is
    short.
    """
    required = grazer.weight / GRAZE_DIVISOR
    if field.grass > required:
        grazer.set_energy(grazer.energy + required)
        field.deplete(required)
        return True
    return False


def stalk(
    hunter: Carnivore, roster: Sequence[Animal], index: int
) -> HuntingError | None:
    """One prey selection and, if it yields a living prey, the kill."""
    choice = hunter.choose_prey(roster, index)
    if isinstance(choice, HuntingError):
        return choice
    if choice is not None and choice.is_alive():
        hunter.hunt(choice)
    return None
