"""Demo scenario - a small savanna over a month.

Builds a mixed roster, attaches a census hook that prints the roster and
grass level at the end of every day, and logs every hunting violation as
it happens. No input file needed.

Run: python -m examples.savanna
"""

from meadow import DayContext, Engine, Field, HuntingError, Roster, make_animal, make_field
from meadow.animals import Animal


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------

ANIMALS = [
    ("Grazer", 120, 45, 40),
    ("Predator", 90, 35, 50),
    ("Grazer", 60, 30, 30),
    ("Omnivore", 70, 25, 45),
    ("Grazer", 40, 50, 70),
    ("Predator", 110, 55, 80),
    ("Grazer", 80, 20, 20),
]


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------

def report_violation(ctx: DayContext, animal: Animal, error: HuntingError) -> None:
    print(f"  day {ctx.day:>2}  {animal.species.token:<8}  {error}")


def report_death(ctx: DayContext, animal: Animal) -> None:
    print(f"  day {ctx.day:>2}  {animal.species.token:<8}  died")


def census(roster: Roster, field: Field, ctx: DayContext) -> None:
    if ctx.day % 5 != 0 and ctx.days_remaining:
        return
    counts: dict[str, int] = {}
    for animal in roster:
        counts[animal.species.token] = counts.get(animal.species.token, 0) + 1
    summary = "  ".join(f"{k}={v}" for k, v in sorted(counts.items())) or "empty"
    avg = sum(a.energy for a in roster) / len(roster) if len(roster) else 0.0
    print(f"  -- day {ctx.day:>2}: grass={field.grass:6.2f}  {summary}  avg energy={avg:.1f}")


def main() -> None:
    print("=== Savanna ===\n")

    roster = [make_animal(*row) for row in ANIMALS]
    engine = Engine(
        make_field(60.0),
        roster,
        days=30,
        on_violation=report_violation,
        on_death=report_death,
    )
    engine.on_day_end(census)
    engine.run()

    print(f"\nSurvivors after {engine.day} days:")
    engine.signal_survivors(lambda sound: print(f"  {sound}"))


if __name__ == "__main__":
    main()
