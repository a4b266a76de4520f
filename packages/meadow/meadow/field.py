"""Field - the shared, regrowing grass resource."""
from __future__ import annotations

from meadow.bounds import GRASS
from meadow.errors import GrassOutOfBounds

GROWTH_FACTOR = 2.0


class Field:
    """Holds the grass amount, always within ``[0, 100]``.

    Construction rejects an out-of-range amount; every later mutation
    clamps instead.
    """

    __slots__ = ("_grass",)

    def __init__(self, grass: float) -> None:
        self._grass = GRASS.check(grass, GrassOutOfBounds)

    @property
    def grass(self) -> float:
        return self._grass

    def set_grass(self, amount: float) -> None:
        self._grass = GRASS.clamp(amount)

    def deplete(self, amount: float) -> float:
        """Remove *amount* of grass. Returns the new level."""
        self.set_grass(self._grass - amount)
        return self._grass

    def replenish(self, amount: float) -> float:
        """Add *amount* of grass. Returns the new level."""
        self.set_grass(self._grass + amount)
        return self._grass

    def grow(self) -> None:
        self.set_grass(self._grass * GROWTH_FACTOR)

    def __repr__(self) -> str:
        return f"Field(grass={self._grass!r})"


def make_field(amount: float) -> Field:
    """Build a field. Raises GrassOutOfBounds unless ``0 <= amount <= 100``."""
    return Field(amount)
