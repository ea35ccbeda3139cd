"""Module for YouTrack issue operations."""

import logging
from datetime import datetime

from ..models import YouTrackIssue
from .client import YouTrackClient
from .constants import ISSUE_PATH
from .formatting import (
    format_comment_command,
    format_field_command,
    format_tag_command,
)
from .protocols import CommandOperationsProto
from .query import build_query
from .utils import extract_issue_id

logger = logging.getLogger("youtrack-issues")


class IssuesMixin(YouTrackClient, CommandOperationsProto):
    """Mixin for YouTrack issue operations."""

    def get_issue(
        self, issue_id: str, wikify_description: bool = False
    ) -> YouTrackIssue | None:
        """
        Get a YouTrack issue by id.

        Args:
            issue_id: The issue id (e.g. 'DEMO-42')
            wikify_description: Whether YouTrack should render the description
                as markup

        Returns:
            The issue, or None if it does not exist

        Raises:
            ValueError: If issue_id is empty
            requests.HTTPError: If the call failed
        """
        if not issue_id:
            raise ValueError("Issue id is required")

        query = build_query([("wikifyDescription", wikify_description)])
        response = self._request("GET", f"{ISSUE_PATH}/{issue_id}", query)

        if response.status_code == 404:
            logger.debug(f"Issue {issue_id} not found")
            return None

        response.raise_for_status()
        return YouTrackIssue.from_api_response(response.json())

    def issue_exists(self, issue_id: str) -> bool:
        """
        Check whether an issue exists.

        Args:
            issue_id: The issue id (e.g. 'DEMO-42')

        Returns:
            True if the issue exists, False otherwise

        Raises:
            ValueError: If issue_id is empty
            requests.HTTPError: If the call failed
        """
        if not issue_id:
            raise ValueError("Issue id is required")

        response = self._request("GET", f"{ISSUE_PATH}/{issue_id}/exists")

        if response.status_code == 404:
            return False

        response.raise_for_status()
        return True

    def get_issues_in_project(
        self,
        project_id: str,
        filter: str | None = None,
        skip: int | None = None,
        take: int | None = None,
        updated_after: datetime | None = None,
        wikify_description: bool = False,
    ) -> list[YouTrackIssue]:
        """
        Get the issues of a project.

        Args:
            project_id: The project id (e.g. 'DEMO')
            filter: A YouTrack search query to filter the issues
            skip: Number of issues to skip
            take: Maximum number of issues to return (server default if None)
            updated_after: Only return issues updated after this moment
            wikify_description: Whether YouTrack should render descriptions
                as markup

        Returns:
            The matching issues, empty if the project does not exist

        Raises:
            ValueError: If project_id is empty
            requests.HTTPError: If the call failed
        """
        if not project_id:
            raise ValueError("Project id is required")

        query = build_query(
            [
                ("filter", filter),
                ("after", skip),
                ("max", take),
                ("updatedAfter", updated_after),
                ("wikifyDescription", wikify_description),
            ]
        )
        response = self._request("GET", f"{ISSUE_PATH}/byproject/{project_id}", query)

        if response.status_code == 404:
            logger.debug(f"Project {project_id} not found")
            return []

        response.raise_for_status()
        return [
            YouTrackIssue.from_api_response(issue) for issue in response.json() or []
        ]

    def get_issues(
        self,
        filter: str | None = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[YouTrackIssue]:
        """
        Get issues across all projects.

        Args:
            filter: A YouTrack search query to filter the issues
            skip: Number of issues to skip
            take: Maximum number of issues to return (server default if None)

        Returns:
            The matching issues

        Raises:
            requests.HTTPError: If the call failed
        """
        query = build_query([("filter", filter), ("after", skip), ("max", take)])
        response = self._request("GET", ISSUE_PATH, query)

        if response.status_code == 404:
            return []

        response.raise_for_status()
        wrapper = response.json() or {}
        return [
            YouTrackIssue.from_api_response(issue)
            for issue in wrapper.get("issue") or []
        ]

    def create_issue(self, project_id: str, issue: YouTrackIssue) -> str:
        """
        Create an issue in a project.

        The issue is created with its summary and description first. Every
        other field, every comment and every tag is then applied as a separate
        command, in that order. The first command that fails aborts the
        remaining ones; the issue stays created with whatever was applied
        until then.

        Args:
            project_id: The project id (e.g. 'DEMO')
            issue: The issue to create; should have a summary

        Returns:
            The id of the new issue (e.g. 'DEMO-42')

        Raises:
            ValueError: If project_id is empty
            requests.HTTPError: If creating the issue or applying a command
                failed
            YouTrackCommandError: If YouTrack rejected one of the commands
            YouTrackProtocolError: If the creation response does not tell the
                new issue id
        """
        if not project_id:
            raise ValueError("Project id is required")

        query = build_query(
            [
                ("project", project_id),
                ("summary", issue.summary),
                ("description", issue.description),
            ],
            raw=("project",),
        )
        response = self._request("PUT", ISSUE_PATH, query)
        response.raise_for_status()

        issue_id = extract_issue_id(response.headers.get("Location"))
        logger.info(f"Created issue {issue_id} in project {project_id}")

        for field in issue.fields:
            command = format_field_command(issue_id, field)
            if command is None:
                continue
            self.execute_command(command)

        for comment in issue.comments:
            self.execute_command(format_comment_command(issue_id, comment))

        for tag in issue.tags:
            self.execute_command(format_tag_command(issue_id, tag))

        return issue_id

    def update_issue(
        self,
        issue_id: str,
        summary: str | None = None,
        description: str | None = None,
    ) -> None:
        """
        Update the summary and/or description of an issue.

        Nothing is sent when both are None.

        Args:
            issue_id: The issue id (e.g. 'DEMO-42')
            summary: The new summary
            description: The new description

        Raises:
            ValueError: If issue_id is empty
            requests.HTTPError: If the call failed
        """
        if not issue_id:
            raise ValueError("Issue id is required")

        if summary is None and description is None:
            return

        query = build_query([("summary", summary), ("description", description)])
        response = self._request("POST", f"{ISSUE_PATH}/{issue_id}", query)
        response.raise_for_status()
