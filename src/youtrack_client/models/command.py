"""
YouTrack command model.

A command is built for a single field, comment or tag while an issue is being
created and is discarded once it has been applied.
"""

from pydantic import BaseModel, ConfigDict


class Command(BaseModel):
    """A single command to apply to an issue through the execute endpoint."""

    model_config = ConfigDict(frozen=True)

    issue_id: str
    command: str
    comment: str | None = None
    disable_notifications: bool = False
    run_as: str | None = None
