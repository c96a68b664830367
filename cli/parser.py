"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import create_command, render_command
from cli.context import CLIContext, set_context

# Commands that only print; they leave no log file behind
READ_ONLY_COMMANDS = {"render"}

app = typer.Typer(
    name="ics-maker",
    help="Build iCalendar (.ics) files from JSON event options.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    typer_ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Set up the shared context and logging before any command runs."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(
        verbose=verbose,
        quiet=quiet,
        config=ctx.config,
        log_file=typer_ctx.invoked_subcommand not in READ_ONLY_COMMANDS,
    )


app.command("render")(render_command)
app.command("create")(create_command)
