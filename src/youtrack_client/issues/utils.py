"""Utility functions for YouTrack issue operations."""

import logging
import re

from requests import Response

from ..exceptions import YouTrackProtocolError
from .constants import ISSUE_LOCATION_MARKER, UNKNOWN_ERROR_MESSAGE

logger = logging.getLogger("youtrack-issues")


def extract_issue_id(
    location: str | None, marker: str = ISSUE_LOCATION_MARKER
) -> str:
    """
    Extract the id of a newly created issue from a Location header.

    Args:
        location: The Location header value, e.g.
            'https://youtrack.example.com/rest/issue/DEMO-42'
        marker: The path prefix that precedes the issue id (matched
            case-insensitively)

    Returns:
        The text following the marker

    Raises:
        YouTrackProtocolError: If the header is missing or lacks the marker
    """
    if not location:
        raise YouTrackProtocolError(
            "Issue creation response has no Location header", location
        )

    match = re.search(re.escape(marker), location, re.IGNORECASE)
    if match is None:
        raise YouTrackProtocolError(
            f"Location header '{location}' does not contain '{marker}'", location
        )

    return location[match.end() :]


def extract_error_message(response: Response) -> str:
    """
    Read the error message from a YouTrack error response.

    YouTrack reports command errors as ``{"value": "<message>"}``.

    Args:
        response: The error response

    Returns:
        The reported message, or a generic message if the body has none
    """
    try:
        body = response.json()
    except ValueError:
        logger.debug(f"Error response body is not JSON: {response.text!r}")
        return UNKNOWN_ERROR_MESSAGE

    if isinstance(body, dict) and body.get("value") is not None:
        return str(body["value"])
    return UNKNOWN_ERROR_MESSAGE
