"""Remove a logged workout."""

import click

from ..exceptions import InvalidRemoveIndexError, StorageError
from .base import (
    INVALID_DATE_MESSAGE,
    echo_error,
    echo_info,
    echo_numbered_entries,
    echo_success,
    is_valid_date,
    open_storage,
)


@click.command()
@click.pass_context
def remove(ctx: click.Context):
    """Remove a workout entry.

    Asks for a date, lists the workouts logged that day and removes the
    one you pick by number (0 cancels).
    """
    storage = open_storage(ctx)

    date = click.prompt("Enter date to search (YYYY-MM-DD)").strip()
    if not is_valid_date(date):
        echo_error(INVALID_DATE_MESSAGE)
        ctx.exit(1)

    try:
        entries = storage.search_by_date(date)
    except StorageError as e:
        echo_error(f"Error searching workouts: {e}")
        ctx.exit(1)

    if not entries:
        click.echo(f"No workouts found for {date}")
        return

    click.echo()
    click.echo(click.style(f"Workouts for {date}:", bold=True))
    echo_numbered_entries(entries)
    click.echo()

    answer = click.prompt("Enter number to remove (0 to cancel)", default="", show_default=False)
    try:
        choice = int(answer.strip())
    except ValueError:
        choice = -1

    if not 0 <= choice <= len(entries):
        click.echo("Invalid choice")
        return
    if choice == 0:
        echo_info("Cancelled")
        return

    try:
        storage.remove_by_date_index(date, choice - 1)
    except (InvalidRemoveIndexError, StorageError) as e:
        echo_error(f"Error removing entry: {e}")
        ctx.exit(1)

    click.echo()
    echo_success("Entry removed successfully")
