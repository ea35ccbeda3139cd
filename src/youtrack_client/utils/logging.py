"""Logging utilities for the YouTrack client.

The client logs through two named loggers, ``youtrack-client`` for setup and
the CLI and ``youtrack-issues`` for requests and commands. The transport
library logs under ``atlassian``; it writes a curl line for every request at
DEBUG, so it is kept one step quieter unless asked otherwise.
"""

import logging

CLIENT_LOGGERS = ("youtrack-client", "youtrack-issues")
TRANSPORT_LOGGER = "atlassian"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"
NOT_PROVIDED = "Not Provided"


def setup_logging(
    level: int = logging.WARNING, transport_level: int | None = None
) -> logging.Logger:
    """
    Configure YouTrack client logging.

    Args:
        level: The minimum level for the client loggers (default: WARNING)
        transport_level: The minimum level for the transport logger; defaults
            to ``level`` but never below INFO

    Returns:
        The ``youtrack-client`` logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    for logger_name in CLIENT_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)

    if transport_level is None:
        transport_level = max(level, logging.INFO)
    logging.getLogger(TRANSPORT_LOGGER).setLevel(transport_level)

    return logging.getLogger(CLIENT_LOGGERS[0])


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a token or password, keeping a few characters at each end."""
    if not value:
        return NOT_PROVIDED
    hidden = len(value) - keep_chars * 2
    if hidden <= 0:
        return "*" * len(value)
    return value[:keep_chars] + "*" * hidden + value[-keep_chars:]


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log one connection setting at INFO, masked when ``sensitive``."""
    display_value = mask_sensitive(value) if sensitive else (value or NOT_PROVIDED)
    logger.info(f"{service} {param}: {display_value}")
