"""CLI entry point for cali-log."""

import logging

import click

from . import __version__
from .commands import (
    history,
    log_workout,
    open_resource,
    playlists,
    remove,
    search,
    template,
    tutorial,
)
from .commands.base import echo_error
from .config import Settings
from .exceptions import TutorialMappingError
from .models.tutorials import validate_tutorial_links


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cali")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """cali: Calisthenics Workout Logger.

    Run without a command to log a new workout.

    \b
    Storage backends:
      Default: Google Sheets
      Local files: set CALI_STORAGE=local
      Local path: ~/cali-logger/workout (override with CALI_LOG_DIR)

    \b
    Google Sheets environment variables:
      CALI_SHEET_ID=<spreadsheet-id>   (required)
      CALI_SHEET_NAME=<tab-name>       (optional, default: Log)
      CALI_GOOGLE_CREDENTIALS_JSON=<service-account-json-path>
      or GOOGLE_APPLICATION_CREDENTIALS can be used instead

    \b
    Examples:
      cali search 2026-01-24
      cali history
      CALI_STORAGE=local cali history
    """
    configure_logging(verbose)

    try:
        validate_tutorial_links()
    except TutorialMappingError as e:
        echo_error(f"Tutorial link mapping error: {e}")
        ctx.exit(1)

    ctx.obj = Settings.from_env()

    if ctx.invoked_subcommand is None:
        ctx.invoke(log_workout)


# Register commands
main.add_command(log_workout)
main.add_command(history)
main.add_command(search)
main.add_command(remove)
main.add_command(open_resource)
main.add_command(template)
main.add_command(playlists)
main.add_command(tutorial)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
