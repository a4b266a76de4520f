"""Error taxonomy for the meadow engine.

Two branches hang off :class:`MeadowError`:

- :class:`InputError` -- fatal. Raised while building the field or the
  roster; a run never starts after one.
- :class:`HuntingError` -- recoverable. Returned (not raised) by prey
  selection and reported by the feeding system; the day goes on.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from meadow.animals import Animal


class MeadowError(Exception):
    """Root of all meadow domain errors. ``str(err)`` is the user-facing message."""

    message = "Meadow error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


# -- Fatal input errors --


class InputError(MeadowError):
    """Invalid scenario input. Carries the offending value when there is one."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        super().__init__()


class OutOfBoundsError(InputError):
    """A numeric value outside its closed range at construction time."""


class GrassOutOfBounds(OutOfBoundsError):
    message = "The grass is out of bounds"


class WeightOutOfBounds(OutOfBoundsError):
    message = "The weight is out of bounds"


class SpeedOutOfBounds(OutOfBoundsError):
    message = "The speed is out of bounds"


class EnergyOutOfBounds(OutOfBoundsError):
    message = "The energy is out of bounds"


class InvalidNumberOfAnimalParameters(InputError):
    message = "Invalid number of animal parameters"


class InvalidInputs(InputError):
    message = "Invalid inputs"


# -- Recoverable hunting errors --


class HuntingError(MeadowError):
    """A hunting rule was violated. The hunter's turn ends, nothing changes."""

    def __init__(self, hunter: Animal | None = None, prey: Animal | None = None) -> None:
        self.hunter = hunter
        self.prey = prey
        super().__init__()


class SelfHunting(HuntingError):
    message = "Self-hunting is not allowed"


class Cannibalism(HuntingError):
    message = "Cannibalism is not allowed"


class TooStrongPrey(HuntingError):
    message = "The prey is too strong or too fast to attack"
