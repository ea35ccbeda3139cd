"""SSL handling for self-hosted YouTrack servers."""

import logging
import ssl
from typing import Any
from urllib.parse import urlparse

import urllib3
from requests.adapters import HTTPAdapter
from requests.sessions import Session
from urllib3.poolmanager import PoolManager

logger = logging.getLogger("youtrack-client")


class SSLIgnoreAdapter(HTTPAdapter):
    """Adapter that accepts any certificate, e.g. a self-signed one."""

    def init_poolmanager(
        self, connections: int, maxsize: int, block: bool = False, **pool_kwargs: Any
    ) -> None:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

        self.poolmanager = PoolManager(
            num_pools=connections,
            maxsize=maxsize,
            block=block,
            ssl_context=context,
            **pool_kwargs,
        )

    def cert_verify(self, conn: Any, url: str, verify: bool, cert: Any | None) -> None:
        super().cert_verify(conn, url, verify=False, cert=cert)


def configure_ssl_verification(
    service_name: str, url: str, session: Session, ssl_verify: bool
) -> None:
    """
    Turn off certificate checks for one server when ``ssl_verify`` is False.

    The adapter is mounted on the server's origin only, so other hosts the
    session may reach (e.g. through redirects) are still verified. urllib3's
    per-request InsecureRequestWarning is silenced in exchange for a single
    warning here.

    Args:
        service_name: Name of the service for logging
        url: The base URL of the server
        session: The transport's requests session
        ssl_verify: Whether certificates should be verified
    """
    if ssl_verify:
        return

    parsed = urlparse(url)
    origin = f"{parsed.scheme or 'https'}://{parsed.netloc}"
    logger.warning(
        f"{service_name} SSL verification disabled for {origin}. "
        "Only use this with a trusted self-hosted server."
    )

    session.mount(origin, SSLIgnoreAdapter())
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
