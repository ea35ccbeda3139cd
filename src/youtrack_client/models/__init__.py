"""
Pydantic models for YouTrack API responses and requests.

This package provides the data models used to send issues to YouTrack and to
interpret what the server returns.
"""

from .base import ApiModel
from .command import Command
from .comment import YouTrackComment
from .issue import (
    FieldValue,
    IssueField,
    MultiFieldValue,
    SingleFieldValue,
    YouTrackIssue,
    to_field_value,
)
from .tag import YouTrackTag

__all__ = [
    "ApiModel",
    "Command",
    "FieldValue",
    "IssueField",
    "MultiFieldValue",
    "SingleFieldValue",
    "YouTrackComment",
    "YouTrackIssue",
    "YouTrackTag",
    "to_field_value",
]
