"""Module for YouTrack protocol definitions."""

from abc import abstractmethod
from typing import Protocol

from ..models import Command


class CommandOperationsProto(Protocol):
    """Protocol defining command operations interface."""

    @abstractmethod
    def apply_command(
        self,
        issue_id: str,
        command: str,
        comment: str | None = None,
        disable_notifications: bool = False,
        run_as: str | None = None,
    ) -> None:
        """Apply a command to an issue."""

    @abstractmethod
    def execute_command(self, command: Command) -> None:
        """Apply a formatted command to its issue."""
