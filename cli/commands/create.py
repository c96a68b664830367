"""Create an .ics file from calendar options."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import EventTableRenderer
from icsmaker.calendar_builder import create_calendar, load_calendar_options
from icsmaker.exceptions import CalendarError
from icsmaker.options_reader import read_options

logger = logging.getLogger(__name__)


def create_command(
    options_file: Annotated[
        str,
        typer.Argument(help="JSON file with calendar options ('-' for stdin)"),
    ],
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Destination path (overrides --filename)"),
    ] = None,
    filename: Annotated[
        str | None,
        typer.Option(
            "--filename", "-f", help="File name inside the output directory (.ics added if missing)"
        ),
    ] = None,
) -> None:
    """
    Write calendar options to an .ics file.

    Without --output the file goes to the output directory (ICS_OUTPUT_DIR,
    the system temp directory by default).

    Example:
        ics-maker create meeting.json --filename team-sync
    """
    ctx = get_context()

    try:
        options = read_options(options_file)
        if filename:
            options = {**options, "filename": filename}
        calendar = load_calendar_options(options, output, config=ctx.config)
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    result = create_calendar(calendar, config=ctx.config)
    if not result.ok:
        logger.error(f"Export failed: {result.error}")
        raise typer.Exit(1)

    if not ctx.quiet:
        EventTableRenderer().render(calendar)

    print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Exported ICS")
    print(f"  {result.path}")
    logger.info(f"Exported {calendar.event_count} event(s) to {result.path}")
