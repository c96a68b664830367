"""Table renderer for the events of a calendar."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.display.formatters import format_attendees, format_timestamp
from icsmaker.models import CalendarOptions


class EventTableRenderer:
    """Render the events of a validated calendar as a table."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def render(self, calendar: CalendarOptions) -> None:
        """Render events with their resolved times and timezone.

        Args:
            calendar: Validated calendar options.
        """
        if not calendar.events:
            self.console.print("No events in calendar")
            return

        self.console.print(f"Events ({calendar.time_zone}):")
        self.console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("SUMMARY", style="cyan")
        table.add_column("START", style="dim")
        table.add_column("END", style="dim")
        table.add_column("LOCATION", style="dim")
        table.add_column("ATTENDEES", style="dim")

        for event in calendar.events:
            table.add_row(
                escape(event.summary),
                format_timestamp(event.dtstart),
                format_timestamp(event.dtend),
                escape(event.location or "-"),
                format_attendees(len(event.attendees)),
            )

        self.console.print(table)
        self.console.print()
