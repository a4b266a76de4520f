"""Command-line entry point: run a scenario file and print the survivors.

Run:
    python -m meadow [INPUT] [--trace] [--verbose | --log-level LEVEL]

stdout carries only the program output: hunting violations as they happen,
then one sound per surviving animal. On bad input exactly one line is
printed and the exit status is 1. Logs and ``--trace`` go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from meadow.animals import Animal
from meadow.engine import Engine
from meadow.errors import HuntingError, MeadowError
from meadow.field import Field, make_field
from meadow.roster import Roster
from meadow.scenario import load_scenario
from meadow.types import DayContext

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "input.txt"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="meadow",
        description="Predators, grazers and omnivores sharing a field of grass",
    )
    p.add_argument("input", nargs="?", default=DEFAULT_INPUT,
                   help=f"Scenario file (default: {DEFAULT_INPUT})")
    p.add_argument("--trace", action="store_true",
                   help="Print the roster and grass level after every day to stderr")
    level = p.add_mutually_exclusive_group()
    level.add_argument("-v", "--verbose", action="store_true",
                       help="Log engine activity to stderr (same as --log-level DEBUG)")
    level.add_argument("--log-level", default=None,
                       choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                       help="Log engine activity at this level to stderr")
    return p.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    level = "DEBUG" if args.verbose else args.log_level
    if level is None:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_violation(ctx: DayContext, animal: Animal, error: HuntingError) -> None:
    print(error)


def _trace_day(roster: Roster, field: Field, ctx: DayContext) -> None:
    animals = ", ".join(
        f"{a.species.token}({a.energy:.2f})" for a in roster
    ) or "-"
    print(f"day {ctx.day:>2}  grass {field.grass:6.2f}  {animals}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args)

    try:
        scenario = load_scenario(args.input)
        field = make_field(scenario.grass)
    except MeadowError as exc:
        logger.debug("rejected %s: %r", args.input, exc)
        print(exc)
        return 1
    except OSError as exc:
        print(f"{args.input}: {exc.strerror or exc}")
        return 1

    engine = Engine(field, scenario.roster, scenario.days, on_violation=_print_violation)
    if args.trace:
        engine.on_day_end(_trace_day)
    engine.run()
    engine.signal_survivors()
    return 0


if __name__ == "__main__":
    sys.exit(main())
