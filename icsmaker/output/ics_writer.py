"""ICS file writer for rendered calendars."""

import logging
from dataclasses import dataclass
from pathlib import Path

from icsmaker.exceptions import ExportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a single write: the destination path or the error."""

    path: str | None = None
    error: OSError | UnicodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the written path.

        Raises:
            ExportError: If the write failed (chained from the original error)
        """
        if self.error is not None:
            raise ExportError(f"Failed to write calendar: {self.error}") from self.error
        return self.path


class ICSWriter:
    """Writer for ICS calendar files."""

    def write(self, content: str, path: str | Path) -> WriteResult:
        """Write rendered calendar text to a file in one go.

        The text is encoded before the file is opened, so text that cannot be
        encoded leaves no file behind. Line separators in ``content`` are
        written untouched. Errors are returned in the result, never raised.
        """
        path = Path(path)
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.error(f"Calendar for {path} is not valid UTF-8 text: {e}")
            return WriteResult(error=e)

        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.error(f"Failed to write calendar to {path}: {e}")
            self._remove_empty(path)
            return WriteResult(error=e)

        logger.info(f"Wrote {len(data)} bytes to {path}")
        return WriteResult(path=str(path))

    @staticmethod
    def _remove_empty(path: Path) -> None:
        """Remove a zero-byte file left behind by a failed write."""
        try:
            if path.is_file() and path.stat().st_size == 0:
                path.unlink()
        except OSError:
            logger.debug(f"Could not remove partial file {path}")
