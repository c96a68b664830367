"""Shared CLI context with lazy-initialized dependencies."""

from icsmaker.config import CalendarConfig


class CLIContext:
    """Shared context for CLI commands.

    Usage:
        ctx = CLIContext()
        path = ctx.config.output_dir
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.verbose = verbose
        self.quiet = quiet
        self._config: CalendarConfig | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
