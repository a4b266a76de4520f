"""meadow - predators, grazers and omnivores sharing a field of grass, day by day."""

from meadow.animals import (
    Animal,
    Carnivore,
    Grazer,
    Herbivore,
    Omnivore,
    Predator,
    make_animal,
)
from meadow.engine import Engine, run
from meadow.errors import (
    Cannibalism,
    EnergyOutOfBounds,
    GrassOutOfBounds,
    HuntingError,
    InputError,
    InvalidInputs,
    InvalidNumberOfAnimalParameters,
    MeadowError,
    SelfHunting,
    SpeedOutOfBounds,
    TooStrongPrey,
    WeightOutOfBounds,
)
from meadow.field import Field, make_field
from meadow.roster import Roster
from meadow.types import DayContext, SimulationState, Species

__all__ = [
    "Animal",
    "Carnivore",
    "Herbivore",
    "Predator",
    "Grazer",
    "Omnivore",
    "Species",
    "make_animal",
    "Field",
    "make_field",
    "Roster",
    "Engine",
    "run",
    "DayContext",
    "SimulationState",
    "MeadowError",
    "InputError",
    "GrassOutOfBounds",
    "WeightOutOfBounds",
    "SpeedOutOfBounds",
    "EnergyOutOfBounds",
    "InvalidNumberOfAnimalParameters",
    "InvalidInputs",
    "HuntingError",
    "SelfHunting",
    "Cannibalism",
    "TooStrongPrey",
]
