"""Module for YouTrack comment operations."""

import logging

from ..models import YouTrackComment
from .client import YouTrackClient
from .constants import ISSUE_PATH
from .query import build_query

logger = logging.getLogger("youtrack-issues")


class CommentsMixin(YouTrackClient):
    """Mixin for YouTrack comment operations."""

    def get_comments_for_issue(
        self, issue_id: str, wikify_description: bool = False
    ) -> list[YouTrackComment]:
        """
        Get comments for a specific issue.

        Args:
            issue_id: The issue id (e.g. 'DEMO-42')
            wikify_description: Whether YouTrack should render the comment
                text as markup

        Returns:
            The issue's comments in the order YouTrack returns them

        Raises:
            ValueError: If issue_id is empty
            requests.HTTPError: If the call failed, including for an unknown issue
        """
        if not issue_id:
            raise ValueError("Issue id is required")

        query = build_query([("wikifyDescription", wikify_description)])
        response = self._request("GET", f"{ISSUE_PATH}/{issue_id}/comment", query)
        response.raise_for_status()

        comments = response.json()
        if not isinstance(comments, list):
            msg = f"Unexpected comments payload type: {type(comments)}"
            logger.error(msg)
            raise TypeError(msg)

        return [YouTrackComment.from_api_response(comment) for comment in comments]
