"""Test fixtures for YouTrack issues unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from youtrack_client.issues import IssuesService
from youtrack_client.issues.config import YouTrackConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "YOUTRACK_URL": "https://youtrack.example.com",
            "YOUTRACK_TOKEN": "perm:test-token",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a YouTrackConfig instance."""
    return YouTrackConfig(
        url="https://youtrack.example.com",
        auth_type="token",
        token="perm:test-token",
    )


@pytest.fixture
def mock_rest_api():
    """Mock the AtlassianRestAPI transport."""
    return MagicMock()


@pytest.fixture
def issues_service(mock_config, mock_rest_api):
    """Create an IssuesService with a mocked transport."""
    with patch(
        "youtrack_client.issues.client.AtlassianRestAPI", return_value=mock_rest_api
    ):
        yield IssuesService(config=mock_config)

