"""Storage contract shared by all workout log backends."""

from typing import Protocol, runtime_checkable

from ..models.entry import WorkoutEntry


@runtime_checkable
class WorkoutStorage(Protocol):
    """Protocol for workout log backends.

    Every query is a full scan; logs hold a few hundred entries a year.
    Failures to read or write raise ``StorageError``.
    """

    def append(self, entry: WorkoutEntry) -> None:
        """Add an entry at the end of the log."""
        ...

    def recent(self, limit: int) -> list[WorkoutEntry]:
        """Return up to ``limit`` of the latest entries, oldest first.

        An empty log gives an empty list.
        """
        ...

    def search_by_date(self, date: str) -> list[WorkoutEntry]:
        """Return every entry logged on ``date``, in storage order."""
        ...

    def remove_by_date_index(self, date: str, index: int) -> None:
        """Remove the ``index``-th (0-based) entry logged on ``date``.

        Raises:
            InvalidRemoveIndexError: If ``index`` is outside the matches;
                nothing is removed.
        """
        ...

    def last_training_day(self) -> tuple[str, str]:
        """Return (day, date) of the latest entry, or ("", "") if none."""
        ...
