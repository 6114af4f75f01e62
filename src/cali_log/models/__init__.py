"""Data models for cali-log."""

from .entry import WorkoutEntry
from .progressions import (
    DAY_PLAN,
    EXERCISES,
    GOALS,
    LEVEL_ORDER,
    levels_for,
    normalize_exercise,
    normalize_level,
    resolve_goal,
)
from .tutorials import (
    PLAYLISTS_URL,
    RESOURCES,
    TUTORIALS,
    parse_tutorial_args,
    resolve_tutorial,
    validate_tutorial_links,
)

__all__ = [
    "DAY_PLAN",
    "EXERCISES",
    "GOALS",
    "LEVEL_ORDER",
    "levels_for",
    "normalize_exercise",
    "normalize_level",
    "parse_tutorial_args",
    "PLAYLISTS_URL",
    "RESOURCES",
    "resolve_goal",
    "resolve_tutorial",
    "TUTORIALS",
    "validate_tutorial_links",
    "WorkoutEntry",
]
