"""Lenient coercions shared by the raw input models.

Raw options come from JSON files, HTTP bodies and Python callers alike, so a
field of the wrong shape is turned into ``None`` (and logged) rather than
failing the whole calendar.
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def coerce_text(value: Any, field: str) -> str | None:
    """Accept strings and plain numbers as text."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    logger.warning(f"Ignoring {field}: expected text, got {type(value).__name__}")
    return None


def coerce_timestamp(value: Any, field: str) -> str | datetime | None:
    """Accept ISO-8601 strings and datetime objects."""
    if value is None or isinstance(value, (str, datetime)):
        return value
    logger.warning(f"Ignoring {field}: expected a date string, got {type(value).__name__}")
    return None


def coerce_record(value: Any, field: str) -> Mapping | BaseModel | None:
    """Accept mappings and already-built models."""
    if value is None or isinstance(value, (Mapping, BaseModel)):
        return value
    logger.warning(f"Ignoring {field}: expected an object, got {type(value).__name__}")
    return None


def coerce_records(value: Any, field: str) -> list | None:
    """Accept a list of mappings/models, dropping entries of any other shape."""
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        logger.warning(f"Ignoring {field}: expected a list, got {type(value).__name__}")
        return None

    records = []
    for index, item in enumerate(value):
        if isinstance(item, (Mapping, BaseModel)):
            records.append(item)
        else:
            logger.warning(f"Dropping {field}[{index}]: expected an object, got {type(item).__name__}")
    return records
