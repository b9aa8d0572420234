"""
Connection URL Checks

Shared by the MongoDB and Redis connection modules.
"""

import logging
import warnings
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

LOCAL_HOSTS = ("localhost", "127.0.0.1", "::1")


def check_connection_security(url: str, service: str) -> bool:
    """
    Warn when a store is reached without credentials on a non-local host.

    Args:
        url: Connection URL (``redis://``, ``mongodb://``, ...)
        service: Display name used in the warning

    Returns:
        bool: True if the URL is considered safe
    """
    parsed = urlparse(url)
    if parsed.password or parsed.hostname in LOCAL_HOSTS:
        return True

    warnings.warn(
        f"SECURITY WARNING: {service} connection has no password and is not "
        "connecting to localhost. Add credentials to the connection URL.",
        UserWarning,
        stacklevel=3,
    )
    logger.warning(
        "%s connection without password to non-localhost host detected",
        service,
    )
    return False
