"""
YouTrack comment models.

This module provides Pydantic models for YouTrack issue comments.
"""

import logging
from datetime import datetime
from typing import Any

from ..utils.date import parse_date
from .base import ApiModel
from .constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class YouTrackComment(ApiModel):
    """
    Model representing a YouTrack issue comment.

    When a comment is added while creating an issue, only ``text`` and
    ``author`` matter: ``author`` is the login the comment is attributed to,
    and None means the authenticated user.
    """

    id: str | None = None
    text: str = EMPTY_STRING
    author: str | None = None
    author_full_name: str | None = None
    issue_id: str | None = None
    parent_id: str | None = None
    deleted: bool = False
    created: datetime | None = None
    updated: datetime | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackComment":
        """
        Create a YouTrackComment from a YouTrack API response.

        Args:
            data: The comment data from the YouTrack API

        Returns:
            A YouTrackComment instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        comment_id = data.get("id")
        if comment_id is not None:
            comment_id = str(comment_id)

        return cls(
            id=comment_id,
            text=str(data.get("text") or EMPTY_STRING),
            author=data.get("author"),
            author_full_name=data.get("authorFullName"),
            issue_id=data.get("issueId"),
            parent_id=data.get("parentId"),
            deleted=bool(data.get("deleted", False)),
            created=parse_date(data.get("created")),
            updated=parse_date(data.get("updated")),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary."""
        result: dict[str, Any] = {"text": self.text}

        if self.id:
            result["id"] = self.id

        if self.author:
            result["author"] = self.author

        if self.created:
            result["created"] = self.created.isoformat()

        if self.updated:
            result["updated"] = self.updated.isoformat()

        return result
