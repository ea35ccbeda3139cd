"""Configuration module for YouTrack API interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Literal

DEFAULT_TIMEOUT = 75


@dataclass
class YouTrackConfig:
    """YouTrack API configuration.

    Supports a permanent token (sent as a Bearer token) or a username and
    password (basic auth).
    """

    url: str  # Base URL for YouTrack
    auth_type: Literal["token", "basic"]  # Authentication type
    token: str | None = None  # Permanent token
    username: str | None = None  # Login (basic auth)
    password: str | None = None  # Password (basic auth)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: int = DEFAULT_TIMEOUT  # Request timeout in seconds
    http_proxy: str | None = None  # HTTP proxy URL
    https_proxy: str | None = None  # HTTPS proxy URL
    no_proxy: str | None = None  # Comma-separated list of hosts to bypass proxy

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy settings in the form expected by `requests`.

        Returns:
            Mapping with only the configured proxy entries
        """
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        if self.no_proxy:
            proxies["no_proxy"] = self.no_proxy
        return proxies

    @classmethod
    def from_env(cls) -> "YouTrackConfig":
        """Create configuration from environment variables.

        Returns:
            YouTrackConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("YOUTRACK_URL")
        if not url:
            error_msg = "Missing required YOUTRACK_URL environment variable"
            raise ValueError(error_msg)

        token = os.getenv("YOUTRACK_TOKEN")
        username = os.getenv("YOUTRACK_USERNAME")
        password = os.getenv("YOUTRACK_PASSWORD")

        if token:
            auth_type = "token"
        elif username and password:
            auth_type = "basic"
        else:
            error_msg = "YouTrack authentication requires YOUTRACK_TOKEN or YOUTRACK_USERNAME and YOUTRACK_PASSWORD"
            raise ValueError(error_msg)

        ssl_verify_env = os.getenv("YOUTRACK_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout_env = os.getenv("YOUTRACK_TIMEOUT")
        if timeout_env is None:
            timeout = DEFAULT_TIMEOUT
        elif timeout_env.isdigit() and int(timeout_env) > 0:
            timeout = int(timeout_env)
        else:
            error_msg = f"Invalid YOUTRACK_TIMEOUT value: {timeout_env}"
            raise ValueError(error_msg)

        # Proxy settings
        http_proxy = os.getenv("YOUTRACK_HTTP_PROXY", os.getenv("HTTP_PROXY"))
        https_proxy = os.getenv("YOUTRACK_HTTPS_PROXY", os.getenv("HTTPS_PROXY"))
        no_proxy = os.getenv("YOUTRACK_NO_PROXY", os.getenv("NO_PROXY"))

        return cls(
            url=url,
            auth_type=auth_type,
            token=token,
            username=username,
            password=password,
            ssl_verify=ssl_verify,
            timeout=timeout,
            http_proxy=http_proxy,
            https_proxy=https_proxy,
            no_proxy=no_proxy,
        )

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if authentication is fully configured, False otherwise.
        """
        logger = logging.getLogger("youtrack-client.issues.config")
        if self.auth_type == "token":
            return bool(self.token)
        elif self.auth_type == "basic":
            return bool(self.username and self.password)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in YouTrackConfig"
        )
        return False
