"""Roster - ordered, index-addressable storage of the simulated animals."""
from __future__ import annotations

from typing import Iterable, Iterator, overload

from meadow.animals import Animal


class Roster:
    """Stable-ordered animal collection.

    Animals that die mid-day keep their slot until :meth:`compact` runs at
    the end of the day, so indices taken from a day's :meth:`snapshot` stay
    valid for that whole day.
    """

    def __init__(self, animals: Iterable[Animal] = ()) -> None:
        self._animals: list[Animal] = []
        for animal in animals:
            self.add(animal)

    def add(self, animal: Animal) -> int:
        if not isinstance(animal, Animal):
            raise TypeError(f"Expected an Animal, got {type(animal).__name__}")
        if any(a is animal for a in self._animals):
            raise ValueError(f"{animal!r} is already on the roster")
        self._animals.append(animal)
        return len(self._animals) - 1

    def index(self, animal: Animal) -> int:
        for i, a in enumerate(self._animals):
            if a is animal:
                return i
        raise ValueError(f"{animal!r} is not on the roster")

    def snapshot(self) -> tuple[Animal, ...]:
        return tuple(self._animals)

    def alive(self) -> list[Animal]:
        return [a for a in self._animals if a.is_alive()]

    def compact(self) -> list[Animal]:
        """Drop every dead animal for good. Returns the removed ones, in order."""
        removed = [a for a in self._animals if not a.is_alive()]
        if removed:
            self._animals = [a for a in self._animals if a.is_alive()]
        return removed

    def __len__(self) -> int:
        return len(self._animals)

    def __iter__(self) -> Iterator[Animal]:
        return iter(self._animals)

    @overload
    def __getitem__(self, index: int) -> Animal: ...

    @overload
    def __getitem__(self, index: slice) -> list[Animal]: ...

    def __getitem__(self, index: int | slice) -> Animal | list[Animal]:
        return self._animals[index]

    def __contains__(self, animal: object) -> bool:
        return any(a is animal for a in self._animals)

    def __repr__(self) -> str:
        return f"Roster({self._animals!r})"
