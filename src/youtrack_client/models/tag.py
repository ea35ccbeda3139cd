"""
YouTrack tag models.
"""

import logging
from typing import Any

from .base import ApiModel
from .constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class YouTrackTag(ApiModel):
    """
    Model representing a tag attached to a YouTrack issue.
    """

    value: str = EMPTY_STRING
    css_class: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "YouTrackTag":
        """
        Create a YouTrackTag from a YouTrack API response.

        Args:
            data: The tag data from the YouTrack API

        Returns:
            A YouTrackTag instance
        """
        if not data:
            return cls()

        if isinstance(data, str):
            return cls(value=data)

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            value=str(data.get("value", EMPTY_STRING)),
            css_class=data.get("cssClass"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary."""
        return {"value": self.value}
