"""JSON reader for raw calendar options."""

import json
import sys
from pathlib import Path
from typing import Any

from icsmaker.exceptions import OptionsFileError

STDIN_PATH = "-"


def read_options(path: str | Path) -> dict[str, Any]:
    """Read raw calendar options from a JSON file (``-`` reads stdin).

    Supports two formats:
    - Object with calendar options: {"filename": ..., "events": [...]}
    - Array of events: [{event1}, {event2}, ...]

    Raises:
        OptionsFileError: If the file cannot be read, is not JSON, or holds
            neither an object nor an array
    """
    try:
        if str(path) == STDIN_PATH:
            data = json.load(sys.stdin)
        else:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
    except OSError as e:
        raise OptionsFileError(f"Failed to read options file: {e}") from e
    except json.JSONDecodeError as e:
        raise OptionsFileError(f"Options file is not valid JSON: {e}") from e

    if isinstance(data, list):
        return {"events": data}
    if isinstance(data, dict):
        return data

    raise OptionsFileError(
        "Options format not recognized. Expected an object with calendar "
        "options or an array of events."
    )
