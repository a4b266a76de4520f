"""System factories for the four phases of a simulated day.

Each factory returns a ``system(roster, field, ctx)`` callable. The engine
runs them in a fixed order: feeding, decay, cull, regrowth.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meadow.field import Field
    from meadow.roster import Roster
    from meadow.types import DayContext, DeathHandler, System, ViolationHandler

logger = logging.getLogger(__name__)


def make_feeding_system(on_violation: ViolationHandler | None = None) -> System:
    """Return a system that lets every living animal act once, in roster order.

    The order is fixed from a snapshot taken at the start of the phase. An
    animal killed earlier in the same phase is skipped. A hunting violation
    ends only that animal's turn: it is logged, passed to
    ``on_violation(ctx, animal, error)`` and the phase moves on.
    """

    def feeding_system(roster: Roster, field: Field, ctx: DayContext) -> None:
        order = roster.snapshot()
        for index, animal in enumerate(order):
            if not animal.is_alive():
                continue
            violation = animal.act(order, index, field)
            if violation is None:
                continue
            logger.info("day %d: %r: %s", ctx.day, animal, violation)
            if on_violation is not None:
                on_violation(ctx, animal, violation)

    return feeding_system


def make_decay_system() -> System:
    """Return a system that applies daily energy decay to the whole roster."""

    def decay_system(roster: Roster, field: Field, ctx: DayContext) -> None:
        for animal in roster:
            animal.decay()

    return decay_system


def make_cull_system(on_death: DeathHandler | None = None) -> System:
    """Return a system that permanently removes animals with no energy left.

    ``on_death(ctx, animal)`` fires for each removed animal, in roster order.
    """

    def cull_system(roster: Roster, field: Field, ctx: DayContext) -> None:
        for animal in roster.compact():
            logger.debug("day %d: %r removed", ctx.day, animal)
            if on_death is not None:
                on_death(ctx, animal)

    return cull_system


def make_regrowth_system() -> System:
    def regrowth_system(roster: Roster, field: Field, ctx: DayContext) -> None:
        field.grow()

    return regrowth_system
