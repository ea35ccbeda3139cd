"""YouTrack issues API module for youtrack_client.

This module provides the YouTrack issues client implementations.
"""

from .client import YouTrackClient
from .commands import CommandsMixin
from .comments import CommentsMixin
from .config import YouTrackConfig
from .issues import IssuesMixin


class IssuesService(
    CommandsMixin,
    CommentsMixin,
    IssuesMixin,
):
    """
    The main YouTrack client class providing access to all issue operations.

    This class inherits from mixins that provide specific functionality:
    - CommandsMixin: Applying commands to issues
    - CommentsMixin: Comment operations
    - IssuesMixin: Issue lookups, creation and updates
    """

    pass


__all__ = ["IssuesService", "YouTrackConfig", "YouTrackClient"]
