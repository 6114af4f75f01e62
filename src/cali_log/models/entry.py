"""Workout entry model and its storage representations."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .progressions import resolve_goal

FIELD_SEPARATOR = "|"
FIELD_COUNT = 7
COLUMN_HEADERS = ["Date", "Day", "Exercise", "Level", "RepsxSets", "Goal", "Comment"]


@dataclass(frozen=True)
class WorkoutEntry:
    """One logged workout: a single exercise level trained on a given day.

    Entries have no identity of their own. The remote backend tags entries
    it reads with ``row_index``, the zero-based position of the row in the
    raw sheet range, which is what removal addresses.
    """

    date: str  # YYYY-MM-DD
    day: str  # conventionally A, B or C
    exercise: str
    level: str
    reps_sets: str  # e.g. "20x2"
    goal: str
    comment: str = ""
    row_index: int | None = None

    @classmethod
    def create(
        cls,
        date: str,
        day: str,
        exercise: str,
        level: str,
        reps_sets: str,
        comment: str = "",
    ) -> "WorkoutEntry":
        """Build a new entry, filling in the goal from the progression table."""
        return cls(
            date=date,
            day=day,
            exercise=exercise,
            level=level,
            reps_sets=reps_sets,
            goal=resolve_goal(exercise, level),
            comment=comment,
        )

    def fields(self) -> list[str]:
        """Return the seven stored fields in column order."""
        return [
            self.date,
            self.day,
            self.exercise,
            self.level,
            self.reps_sets,
            self.goal,
            self.comment,
        ]

    def to_line(self) -> str:
        """Serialize as one newline-terminated log file line.

        The separator is not escaped; a field containing it will not
        read back correctly.
        """
        return FIELD_SEPARATOR.join(self.fields()) + "\n"

    @classmethod
    def from_line(cls, line: str) -> "WorkoutEntry | None":
        """Parse a log file line, or return None if it is not a record."""
        parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
        if len(parts) < FIELD_COUNT:
            return None
        return cls(*parts[:FIELD_COUNT])

    def to_row(self) -> list[str]:
        """Convert to a spreadsheet row."""
        return self.fields()

    @classmethod
    def from_row(cls, row: Sequence[Any], row_index: int | None = None) -> "WorkoutEntry":
        """Create from a spreadsheet row; missing trailing cells read as ""."""
        cells = [str(row[i]) if i < len(row) else "" for i in range(FIELD_COUNT)]
        return cls(*cells, row_index=row_index)
