"""CLI commands package."""

from cli.commands.create import create_command
from cli.commands.render import render_command

__all__ = [
    "create_command",
    "render_command",
]
