"""Interactive workout logging command."""

import logging
from collections.abc import Sequence
from datetime import date

import click

from ..exceptions import StorageError
from ..models.entry import WorkoutEntry
from ..models.progressions import DAY_PLAN, EXERCISES, levels_for, resolve_goal
from ..models.tutorials import resolve_tutorial
from .base import (
    DATE_FORMAT,
    echo_error,
    echo_success,
    echo_warning,
    get_settings,
    open_storage,
    open_url,
)

log = logging.getLogger(__name__)


def pick_option(options: Sequence[str], answer: str) -> str | None:
    """Map a 1-based menu answer to an option, or None if it is not valid."""
    try:
        choice = int(answer.strip())
    except ValueError:
        return None
    if 1 <= choice <= len(options):
        return options[choice - 1]
    return None


def choose_from_menu(
    options: Sequence[str],
    labels: Sequence[str],
    fallback_notice: str,
    strict: bool,
) -> str:
    """Show a numbered menu and read a choice.

    An invalid answer re-prompts when ``strict`` is set; otherwise the first
    option is used and ``fallback_notice`` is printed.
    """
    for i, label in enumerate(labels, start=1):
        click.echo(f"  {i}. {label}")

    while True:
        answer = click.prompt("Enter number", default="", show_default=False)
        choice = pick_option(options, answer)
        if choice is not None:
            return choice
        if not strict:
            click.echo(fallback_notice)
            return options[0]
        click.echo(f"Invalid choice, enter a number from 1 to {len(options)}")


def choose_exercise(strict: bool) -> str:
    click.echo("\nChoose Exercise:")
    return choose_from_menu(
        EXERCISES,
        EXERCISES,
        f"Invalid choice, defaulting to {EXERCISES[0]}",
        strict,
    )


def choose_level(exercise: str, strict: bool) -> str:
    levels = levels_for(exercise)
    click.echo(f"\nChoose Level for {exercise}:")
    labels = [f"{level:<20} (goal: {resolve_goal(exercise, level)})" for level in levels]
    return choose_from_menu(
        levels,
        labels,
        "Invalid choice, defaulting to first level",
        strict,
    )


def echo_day_plan() -> None:
    click.echo("Day plan:")
    for day, exercises in DAY_PLAN:
        click.echo(f"  Day {day}")
        for exercise in exercises:
            click.echo(f"    - {exercise}")
    click.echo()


@click.command("log")
@click.option(
    "--strict-menus",
    is_flag=True,
    help="Re-prompt on an invalid menu number instead of using the first option.",
)
@click.pass_context
def log_workout(ctx: click.Context, strict_menus: bool):
    """Log a new workout (the default command).

    Prompts for the training day, exercise, level, reps and an optional
    comment. The goal for the chosen level is filled in automatically and
    the entry is stored with today's date.

    If a tutorial exists for the chosen level you are offered to open it;
    when it opens, the session ends without logging.
    """
    strict = strict_menus or get_settings(ctx).strict_menus
    storage = open_storage(ctx)

    echo_day_plan()

    try:
        last_day, last_date = storage.last_training_day()
    except StorageError as e:
        log.warning("Could not read previous training day: %s", e)
    else:
        if last_day:
            click.echo(f"Previous training day: {last_day} ({last_date})\n")

    day = click.prompt("Day (A/B/C)", default="", show_default=False).strip()

    exercise = choose_exercise(strict)
    level = choose_level(exercise, strict)

    tutorial_url = resolve_tutorial(exercise, level)
    if tutorial_url and click.confirm(f"Open tutorial for {exercise} - {level}?", default=False):
        if open_url(tutorial_url):
            click.echo("Tutorial opened. Exiting without logging.")
            return
        echo_warning(f"Failed to open tutorial: {tutorial_url}")

    reps_sets = click.prompt("Reps×Sets", default="", show_default=False).strip()
    comment = click.prompt("Comment (optional)", default="", show_default=False).strip()

    entry = WorkoutEntry.create(
        date=date.today().strftime(DATE_FORMAT),
        day=day,
        exercise=exercise,
        level=level,
        reps_sets=reps_sets,
        comment=comment,
    )

    try:
        storage.append(entry)
    except StorageError as e:
        echo_error(f"Error writing workout: {e}")
        ctx.exit(1)

    click.echo()
    echo_success("Logged successfully")
