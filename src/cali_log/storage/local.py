"""Local backend: one pipe-delimited log file per calendar year."""

import logging
from collections.abc import Callable
from datetime import date as Date
from pathlib import Path

from ..exceptions import InvalidRemoveIndexError, StorageError
from ..models.entry import WorkoutEntry

log = logging.getLogger(__name__)


def year_from_date(date: str, today: Date) -> int:
    """Get the log year from a YYYY-MM-DD date, falling back to today's year."""
    prefix = date[:4]
    if len(prefix) == 4 and prefix.isdigit():
        return int(prefix)
    return today.year


class LocalFileStorage:
    """Workout log kept in ``workout-<year>.log`` files under one directory.

    ``recent`` and ``last_training_day`` only look at the current year's
    file. Removal rewrites the whole file from a fresh read, so a write from
    another process in between is lost.
    """

    def __init__(self, log_dir: Path, today: Callable[[], Date] = Date.today):
        self.log_dir = Path(log_dir)
        self._today = today

    def log_path(self, year: int | str) -> Path:
        """Get the log file path for a year."""
        return self.log_dir / f"workout-{year}.log"

    def append(self, entry: WorkoutEntry) -> None:
        path = self.log_path(year_from_date(entry.date, self._today()))
        log.debug("Appending %s entry to %s", entry.date, path)
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8", newline="") as f:
                f.write(entry.to_line())
        except OSError as e:
            raise StorageError(f"writing {path}: {e}") from e

    def recent(self, limit: int) -> list[WorkoutEntry]:
        if limit <= 0:
            return []
        entries = self._read_entries(self.log_path(self._today().year))
        return entries[-limit:]

    def search_by_date(self, date: str) -> list[WorkoutEntry]:
        entries = self._read_entries(self.log_path(date[:4]))
        return [entry for entry in entries if entry.date == date]

    def remove_by_date_index(self, date: str, index: int) -> None:
        year = date[:4]
        path = self.log_path(year)
        lines = self._read_lines(path)
        if lines is None:
            raise StorageError(f"no workout log found for year {year}")

        matching = [
            line_number
            for line_number, line in enumerate(lines)
            if self._entry_date(line) == date
        ]
        if not 0 <= index < len(matching):
            raise InvalidRemoveIndexError(index, len(matching))

        line_number = matching[index]
        log.debug("Removing line %d of %s", line_number, path)
        del lines[line_number]
        self._write_lines(path, lines)

    def last_training_day(self) -> tuple[str, str]:
        entries = self._read_entries(self.log_path(self._today().year))
        if not entries:
            return "", ""
        last = entries[-1]
        return last.day, last.date

    @staticmethod
    def _entry_date(line: str) -> str | None:
        entry = WorkoutEntry.from_line(line)
        return entry.date if entry else None

    def _read_lines(self, path: Path) -> list[str] | None:
        """Read the lines of a log file, or None if it is missing.

        Only a line feed ends a line, so other line-break characters inside a
        comment stay part of its record.
        """
        try:
            with open(path, encoding="utf-8", newline="") as f:
                lines = f.read().split("\n")
        except FileNotFoundError:
            log.debug("No log file at %s", path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"reading {path}: {e}") from e
        if lines[-1] == "":
            lines.pop()
        return lines

    def _read_entries(self, path: Path) -> list[WorkoutEntry]:
        lines = self._read_lines(path) or []
        entries = []
        for line in lines:
            entry = WorkoutEntry.from_line(line)
            if entry is not None:
                entries.append(entry)
        return entries

    def _write_lines(self, path: Path, lines: list[str]) -> None:
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.writelines(line + "\n" for line in lines)
        except OSError as e:
            raise StorageError(f"rewriting {path}: {e}") from e
