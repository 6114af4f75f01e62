"""Commands that open external resources in the browser."""

import click
import questionary
from questionary import Style

from ..models.progressions import EXERCISES, levels_for
from ..models.tutorials import (
    PLAYLISTS_URL,
    RESOURCES,
    TUTORIALS,
    parse_tutorial_args,
    resolve_tutorial,
)
from .base import echo_error, echo_info, open_url

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def launch_or_exit(ctx: click.Context, url: str, what: str) -> None:
    """Open a URL, exiting with an error if no browser could be started."""
    if not open_url(url):
        echo_error(f"Error opening {what}: {url}")
        ctx.exit(1)


def pick_tutorial() -> tuple[str, str] | None:
    """Ask for an exercise and level that have a tutorial.

    Returns:
        (exercise, level), or None if the questionnaire was cancelled
    """
    exercise = questionary.select(
        "Exercise:",
        choices=[exercise for exercise in EXERCISES if exercise in TUTORIALS],
        style=custom_style,
    ).ask()
    if exercise is None:
        return None

    level = questionary.select(
        f"Level for {exercise}:",
        choices=[level for level in levels_for(exercise) if level in TUTORIALS[exercise]],
        style=custom_style,
    ).ask()
    if level is None:
        return None

    return exercise, level


@click.command("open")
@click.argument("resource")
@click.pass_context
def open_resource(ctx: click.Context, resource: str):
    """Open a named resource (workout-template)."""
    url = RESOURCES.get(resource)
    if url is None:
        known = ", ".join(sorted(RESOURCES))
        echo_error(f"unknown resource {resource!r} (use {known})")
        ctx.exit(1)

    launch_or_exit(ctx, url, "resource")


@click.command()
@click.pass_context
def template(ctx: click.Context):
    """Open the workout template."""
    launch_or_exit(ctx, RESOURCES["workout-template"], "resource")


@click.command()
@click.pass_context
def playlists(ctx: click.Context):
    """Open the Convicted Condition YouTube playlists."""
    launch_or_exit(ctx, PLAYLISTS_URL, "playlists")


@click.command()
@click.argument("words", nargs=-1)
@click.pass_context
def tutorial(ctx: click.Context, words: tuple[str, ...]):
    """Open the tutorial video for an exercise level.

    Words may be quoted or not; the exercise and level are told apart by
    name. Without arguments an interactive picker is shown.

    Examples:
        cali tutorial Pushups Half One-Arm

        cali tutorial "Handstand Push-ups" "Wall Headstand"
    """
    if words:
        try:
            exercise, level = parse_tutorial_args(words)
        except ValueError as e:
            echo_error(str(e))
            ctx.exit(1)
    else:
        picked = pick_tutorial()
        if picked is None:
            echo_info("Cancelled")
            return
        exercise, level = picked

    link = resolve_tutorial(exercise, level)
    if not link:
        echo_error(f"no tutorial mapped for {exercise} - {level}")
        ctx.exit(1)

    click.echo(f"Opening tutorial for {exercise} - {level}...")
    click.echo(link)
    launch_or_exit(ctx, link, "tutorial")
