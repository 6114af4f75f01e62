"""Workout history and search commands."""

import click

from ..exceptions import StorageError
from .base import (
    ENTRY_HEADERS,
    INVALID_DATE_MESSAGE,
    echo_error,
    echo_numbered_entries,
    entry_cells,
    format_table,
    is_valid_date,
    open_storage,
)

HISTORY_LIMIT = 10


@click.command()
@click.pass_context
def history(ctx: click.Context):
    """Show the last 10 workouts.

    With local storage only the current year's log is read.
    """
    storage = open_storage(ctx)

    try:
        entries = storage.recent(HISTORY_LIMIT)
    except StorageError as e:
        echo_error(f"Error reading workout history: {e}")
        ctx.exit(1)

    if not entries:
        click.echo("No workouts logged yet")
        return

    click.echo(click.style(f"Last {HISTORY_LIMIT} workouts:", bold=True))
    rows = [[entry.date] + entry_cells(entry) for entry in entries]
    click.echo(format_table(["Date"] + ENTRY_HEADERS, rows))
    click.echo()
    click.echo(f"Total: {len(entries)} workout(s)")


@click.command()
@click.argument("date")
@click.pass_context
def search(ctx: click.Context, date: str):
    """Show the workouts logged on DATE (YYYY-MM-DD).

    Example:
        cali search 2026-01-24
    """
    if not is_valid_date(date):
        echo_error(INVALID_DATE_MESSAGE)
        ctx.exit(1)

    storage = open_storage(ctx)

    try:
        entries = storage.search_by_date(date)
    except StorageError as e:
        echo_error(f"Error searching workouts: {e}")
        ctx.exit(1)

    if not entries:
        click.echo(f"No workouts found for {date}")
        return

    click.echo(click.style(f"Workouts for {date}:", bold=True))
    echo_numbered_entries(entries)
    click.echo()
    click.echo(f"Total: {len(entries)} workout(s)")
