"""Rendering of issue fields, comments and tags as YouTrack commands."""

from ..models import Command, IssueField, YouTrackComment, YouTrackTag
from .constants import COMMENT_COMMAND, RESERVED_FIELDS, TAG_COMMAND


def is_reserved_field(name: str) -> bool:
    """Check whether a field is set by the creation call rather than a command."""
    return name.lower() in RESERVED_FIELDS


def format_field_command(issue_id: str, field: IssueField) -> Command | None:
    """
    Render a field assignment as a command.

    Args:
        issue_id: The issue the command targets
        field: The field to set

    Returns:
        The command, e.g. 'Platform linux mac', or None for reserved fields
    """
    if is_reserved_field(field.name):
        return None
    return Command(
        issue_id=issue_id,
        command=f"{field.name} {field.value.render()}",
        comment="",
    )


def format_comment_command(issue_id: str, comment: YouTrackComment) -> Command:
    """
    Render a comment as a command.

    The comment text travels as the command's comment payload and the
    comment is attributed to its author, if any.
    """
    return Command(
        issue_id=issue_id,
        command=COMMENT_COMMAND,
        comment=comment.text,
        run_as=comment.author,
    )


def format_tag_command(issue_id: str, tag: YouTrackTag) -> Command:
    return Command(issue_id=issue_id, command=f"{TAG_COMMAND} {tag.value}")
