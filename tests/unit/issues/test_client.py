"""Tests for the YouTrack client module."""

from unittest.mock import MagicMock, patch

import pytest

from tests.fixtures.youtrack_mocks import make_response
from youtrack_client.issues.client import YouTrackClient
from youtrack_client.issues.config import YouTrackConfig


def test_init_with_token_auth(mock_config):
    with (
        patch("youtrack_client.issues.client.AtlassianRestAPI") as mock_api,
        patch(
            "youtrack_client.issues.client.configure_ssl_verification"
        ) as mock_configure_ssl,
    ):
        client = YouTrackClient(config=mock_config)

        mock_api.assert_called_once_with(
            url="https://youtrack.example.com",
            token="perm:test-token",
            timeout=75,
            verify_ssl=True,
            proxies=None,
        )
        mock_configure_ssl.assert_called_once_with(
            service_name="YouTrack",
            url="https://youtrack.example.com",
            session=mock_api.return_value._session,
            ssl_verify=True,
        )
        assert client.youtrack is mock_api.return_value


def test_init_with_basic_auth_and_proxies():
    config = YouTrackConfig(
        url="https://youtrack.example.com",
        auth_type="basic",
        username="root",
        password="secret",
        ssl_verify=False,
        timeout=10,
        https_proxy="http://proxy:8443",
    )
    with (
        patch("youtrack_client.issues.client.AtlassianRestAPI") as mock_api,
        patch("youtrack_client.issues.client.configure_ssl_verification"),
    ):
        YouTrackClient(config=config)

        mock_api.assert_called_once_with(
            url="https://youtrack.example.com",
            username="root",
            password="secret",
            timeout=10,
            verify_ssl=False,
            proxies={"https": "http://proxy:8443"},
        )


def test_init_from_env(mock_env_vars):
    with patch("youtrack_client.issues.client.AtlassianRestAPI"):
        client = YouTrackClient()

    assert client.config.url == "https://youtrack.example.com"
    assert client.config.auth_type == "token"


def test_init_with_incomplete_credentials():
    config = YouTrackConfig(url="https://youtrack.example.com", auth_type="basic")
    with patch("youtrack_client.issues.client.AtlassianRestAPI") as mock_api:
        with pytest.raises(ValueError, match="Incomplete credentials"):
            YouTrackClient(config=config)
        mock_api.assert_not_called()


def test_request_appends_query(mock_config):
    mock_rest_api = MagicMock()
    mock_rest_api.request.return_value = make_response(200)
    with patch(
        "youtrack_client.issues.client.AtlassianRestAPI", return_value=mock_rest_api
    ):
        client = YouTrackClient(config=mock_config)

    response = client._request("GET", "rest/issue/DEMO-1", "wikifyDescription=false")
    client._request("GET", "rest/issue/DEMO-1/exists")

    assert response.status_code == 200
    assert [c.kwargs for c in mock_rest_api.request.call_args_list] == [
        {
            "method": "GET",
            "path": "rest/issue/DEMO-1?wikifyDescription=false",
            "advanced_mode": True,
        },
        {"method": "GET", "path": "rest/issue/DEMO-1/exists", "advanced_mode": True},
    ]
