"""Shared CLI utilities."""

import re
from datetime import datetime

import click

from ..config import Settings
from ..exceptions import CaliLogError
from ..models.entry import WorkoutEntry
from ..storage import WorkoutStorage, get_storage

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
INVALID_DATE_MESSAGE = "Invalid date format. Use YYYY-MM-DD (e.g., 2026-01-24)"

ENTRY_HEADERS = ["Day", "Exercise", "Level", "Reps×Sets", "Goal", "Comment"]


def get_settings(ctx: click.Context) -> Settings:
    """Get the settings resolved by the top-level command."""
    settings = ctx.find_object(Settings)
    if settings is None:
        settings = Settings.from_env()
    return settings


def open_storage(ctx: click.Context) -> WorkoutStorage:
    """Create the configured storage backend, exiting on configuration errors."""
    try:
        return get_storage(get_settings(ctx))
    except CaliLogError as e:
        echo_error(f"Error configuring storage: {e}")
        ctx.exit(1)


def is_valid_date(value: str) -> bool:
    """Check for a zero-padded YYYY-MM-DD calendar date."""
    if not DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def open_url(url: str) -> bool:
    """Open a URL in the default browser. Returns True on success."""
    return click.launch(url) == 0


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message, err=True)


def entry_cells(entry: WorkoutEntry) -> list[str]:
    """Get the displayed columns of an entry (date excluded)."""
    return [
        entry.day,
        entry.exercise,
        entry.level,
        entry.reps_sets,
        entry.goal,
        entry.comment,
    ]


def echo_numbered_entries(entries: list[WorkoutEntry]) -> None:
    """Print entries as a table numbered from 1."""
    rows = [[str(i)] + entry_cells(entry) for i, entry in enumerate(entries, start=1)]
    click.echo(format_table(["#"] + ENTRY_HEADERS, rows))


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
