"""
Utility functions for the YouTrack client.
This package provides various utility functions used throughout the codebase.
"""

from .date import parse_date, to_epoch_millis
from .logging import log_config_param, mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
    "to_epoch_millis",
]
