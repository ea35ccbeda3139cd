"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("youtrack-client")


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a YouTrack timestamp to a datetime object.

    YouTrack reports timestamps as epoch milliseconds, either as JSON numbers
    or as digit strings. Anything else is handed to `dateutil.parser`.

    Args:
        date_str: Epoch milliseconds or a date string

    Returns:
        Parsed datetime or None if date_str is None / empty string
    """
    if date_str is None or date_str == "":
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def to_epoch_millis(value: datetime) -> int:
    """
    Convert a datetime to epoch milliseconds.

    Naive datetimes are interpreted in the local timezone.

    Args:
        value: The datetime to convert

    Returns:
        Milliseconds since the Unix epoch
    """
    return int(value.timestamp() * 1000)
