"""Query string encoding for YouTrack REST calls."""

from collections.abc import Collection, Sequence
from datetime import datetime
from typing import Any
from urllib.parse import quote_plus

from ..utils.date import to_epoch_millis


def encode_query_value(value: Any, raw: bool = False) -> str | None:
    """
    Render a single query parameter value.

    Args:
        value: The value to render
        raw: Whether to skip percent-encoding of text values

    Returns:
        The rendered value, or None if the value is absent (None or an empty
        string)
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(to_epoch_millis(value))
    if isinstance(value, int):
        return str(value)

    text = str(value)
    if not text:
        return None
    return text if raw else quote_plus(text)


def build_query(
    params: Sequence[tuple[str, Any]], raw: Collection[str] = ()
) -> str:
    """
    Build a query string from optional parameters.

    Parameters are emitted in the given order and only when present; absent
    parameters leave no trace in the output.

    Args:
        params: Ordered (name, value) pairs
        raw: Names of parameters whose values are emitted without encoding

    Returns:
        The query string without a leading '?'
    """
    parts = []
    for name, value in params:
        rendered = encode_query_value(value, raw=name in raw)
        if rendered is not None:
            parts.append(f"{name}={rendered}")
    return "&".join(parts)
