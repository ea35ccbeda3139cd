"""Module for YouTrack command operations."""

import logging

from ..exceptions import YouTrackCommandError
from ..models import Command
from .client import YouTrackClient
from .constants import ISSUE_PATH
from .query import build_query
from .utils import extract_error_message

logger = logging.getLogger("youtrack-issues")


class CommandsMixin(YouTrackClient):
    """Mixin for YouTrack command operations."""

    def apply_command(
        self,
        issue_id: str,
        command: str,
        comment: str | None = None,
        disable_notifications: bool = False,
        run_as: str | None = None,
    ) -> None:
        """
        Apply a command to an issue.

        A command may change several fields at once, e.g. 'Priority Critical
        Assignee john'.

        Args:
            issue_id: The issue id (e.g. 'DEMO-42')
            command: The command to apply
            comment: A comment to add along with the command
            disable_notifications: Whether to suppress notifications about
                the change
            run_as: Login of the user on whose behalf the command is applied

        Raises:
            ValueError: If issue_id or command is empty
            YouTrackCommandError: If YouTrack rejected the command
            requests.HTTPError: If the call failed for any other reason
        """
        if not issue_id:
            raise ValueError("Issue id is required")
        if not command:
            raise ValueError("Command is required")

        query = build_query(
            [
                ("command", command),
                ("comment", comment),
                ("disableNotifications", True if disable_notifications else None),
                ("runAs", run_as),
            ],
            raw=("runAs",),
        )

        response = self._request("POST", f"{ISSUE_PATH}/{issue_id}/execute", query)

        if response.status_code == 400:
            message = extract_error_message(response)
            logger.debug(f"Command '{command}' rejected for {issue_id}: {message}")
            raise YouTrackCommandError(message)

        response.raise_for_status()

    def execute_command(self, command: Command) -> None:
        """
        Apply a formatted command to its issue.

        Args:
            command: The command to apply

        Raises:
            ValueError: If the command has no issue id or text
            YouTrackCommandError: If YouTrack rejected the command
            requests.HTTPError: If the call failed for any other reason
        """
        self.apply_command(
            command.issue_id,
            command.command,
            command.comment,
            disable_notifications=command.disable_notifications,
            run_as=command.run_as,
        )
