"""Base client module for YouTrack API interactions."""

import logging

from atlassian.rest_client import AtlassianRestAPI
from requests import Response

from ..utils.logging import log_config_param
from ..utils.ssl import configure_ssl_verification
from .config import YouTrackConfig

logger = logging.getLogger("youtrack-issues")


class YouTrackClient:
    """Base client for YouTrack API interactions."""

    config: YouTrackConfig

    def __init__(self, config: YouTrackConfig | None = None) -> None:
        """Initialize the YouTrack client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or YouTrackConfig.from_env()

        if not self.config.is_auth_configured():
            error_msg = f"Incomplete credentials for auth type '{self.config.auth_type}'"
            raise ValueError(error_msg)

        proxies = self.config.proxies or None

        if self.config.auth_type == "token":
            self.youtrack = AtlassianRestAPI(
                url=self.config.url,
                token=self.config.token,
                timeout=self.config.timeout,
                verify_ssl=self.config.ssl_verify,
                proxies=proxies,
            )
        else:  # basic auth
            self.youtrack = AtlassianRestAPI(
                url=self.config.url,
                username=self.config.username,
                password=self.config.password,
                timeout=self.config.timeout,
                verify_ssl=self.config.ssl_verify,
                proxies=proxies,
            )

        configure_ssl_verification(
            service_name="YouTrack",
            url=self.config.url,
            session=self.youtrack._session,
            ssl_verify=self.config.ssl_verify,
        )

        log_config_param(logger, "YouTrack", "URL", self.config.url)
        log_config_param(logger, "YouTrack", "Auth Type", self.config.auth_type)
        if self.config.auth_type == "token":
            log_config_param(
                logger, "YouTrack", "Token", self.config.token, sensitive=True
            )
        else:
            log_config_param(logger, "YouTrack", "Username", self.config.username)

    def _request(self, method: str, path: str, query: str = "") -> Response:
        """
        Send a request and return the raw response without checking its status.

        Args:
            method: The HTTP method
            path: The path relative to the YouTrack base URL
            query: An already encoded query string

        Returns:
            The raw response
        """
        url = f"{path}?{query}" if query else path
        logger.debug(f"{method} {url}")
        response = self.youtrack.request(method=method, path=url, advanced_mode=True)
        logger.debug(f"{method} {path} -> {response.status_code}")
        return response
