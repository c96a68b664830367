"""Render calendar options to iCalendar text on stdout."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from icsmaker.calendar_builder import get_calendar
from icsmaker.exceptions import CalendarError
from icsmaker.options_reader import read_options

logger = logging.getLogger(__name__)


def render_command(
    options_file: Annotated[
        str,
        typer.Argument(help="JSON file with calendar options ('-' for stdin)"),
    ],
) -> None:
    """
    Print the iCalendar document for the given options.

    Nothing is written to disk; redirect stdout to save the result.
    """
    ctx = get_context()

    try:
        options = read_options(options_file)
        content = get_calendar(options, config=ctx.config)
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    typer.echo(content)
