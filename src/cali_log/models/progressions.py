"""Exercise progressions and their target goals."""

from types import MappingProxyType

# Exercise -> ordered (level, goal) steps, easiest first
PROGRESSIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Pushups",
        (
            ("Wall", "50x3"),
            ("Incline", "40x3"),
            ("Kneeling", "30x3"),
            ("Half", "25x2"),
            ("Full", "20x2"),
            ("Close", "20x2"),
            ("Uneven", "20x2"),
            ("Half One-Arm", "20x2"),
            ("Lever", "20x2"),
            ("One-Arm", "100x1"),
        ),
    ),
    (
        "Squats",
        (
            ("Shoulderstand", "50x3"),
            ("Jackknife", "40x3"),
            ("Supported", "30x3"),
            ("Half", "50x2"),
            ("Full", "30x2"),
            ("Close", "20x2"),
            ("Uneven", "20x2"),
            ("Half One-Leg", "20x2"),
            ("Assisted One-Leg", "20x2"),
            ("One-Leg", "50x2"),
        ),
    ),
    (
        "Pullups",
        (
            ("Vertical", "40x3"),
            ("Horizontal", "30x3"),
            ("Jackknife", "20x3"),
            ("Half", "15x2"),
            ("Full", "10x2"),
            ("Close", "10x2"),
            ("Uneven", "9x2"),
            ("Half One-Arm", "8x2"),
            ("Assisted One-Arm", "7x2"),
            ("One-Arm", "6x2"),
        ),
    ),
    (
        "Leg Raises",
        (
            ("Knee Tuck", "40x3"),
            ("Knee Raise", "35x3"),
            ("Bent Leg", "30x3"),
            ("Frog", "25x3"),
            ("Flat", "20x2"),
            ("Hanging Knee", "15x2"),
            ("Hanging Bent", "15x2"),
            ("Partial", "15x2"),
            ("Hanging", "30x2"),
        ),
    ),
    (
        "Bridges",
        (
            ("Short", "50x3"),
            ("Straight", "40x3"),
            ("Angled", "30x3"),
            ("Head", "25x2"),
            ("Half", "20x2"),
            ("Full", "15x2"),
            ("Wall Down", "10x2"),
            ("Wall Up", "8x2"),
            ("Closing", "6x2"),
            ("Stand-to-Stand", "10-30x2"),
        ),
    ),
    (
        "Handstand Push-ups",
        (
            ("Wall Headstand", "2min"),
            ("Crow", "1min"),
            ("Wall", "2min"),
            ("Half", "20x2"),
            ("Full", "15x2"),
            ("Close", "12x2"),
            ("Uneven", "10x2"),
            ("Half One-Arm", "8x2"),
            ("Lever", "6x2"),
            ("One-Arm", "5x2"),
        ),
    ),
)

EXERCISES: tuple[str, ...] = tuple(name for name, _ in PROGRESSIONS)

LEVEL_ORDER: MappingProxyType = MappingProxyType(
    {name: tuple(level for level, _ in steps) for name, steps in PROGRESSIONS}
)

GOALS: MappingProxyType = MappingProxyType(
    {name: MappingProxyType(dict(steps)) for name, steps in PROGRESSIONS}
)

# Training day -> exercises trained that day
DAY_PLAN: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("A", ("Pushups", "Squats")),
    ("B", ("Pullups", "Leg Raises")),
    ("C", ("Bridges", "Handstand Push-ups")),
)

NO_GOAL = "-"


def resolve_goal(exercise: str, level: str) -> str:
    """Return the target goal for a level, or "-" if the pair is unknown."""
    return GOALS.get(exercise, {}).get(level, NO_GOAL)


def levels_for(exercise: str) -> tuple[str, ...]:
    """Return the levels of an exercise in progression order."""
    return LEVEL_ORDER.get(exercise, ())


def normalize_exercise(text: str) -> str | None:
    """Match free-form text to a canonical exercise name (case-insensitive)."""
    wanted = text.strip().lower()
    for exercise in EXERCISES:
        if exercise.lower() == wanted:
            return exercise
    return None


def normalize_level(exercise: str, text: str) -> str | None:
    """Match free-form text to a canonical level name of an exercise."""
    wanted = text.strip().lower()
    for level in levels_for(exercise):
        if level.lower() == wanted:
            return level
    return None
