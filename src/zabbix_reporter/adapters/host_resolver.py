"""
Host Name Resolution.

Resolves the host name samples are reported under when none is configured.
"""

from __future__ import annotations

import logging
import socket

logger = logging.getLogger(__name__)

FALLBACK_HOST_NAME = "localhost"


def detect_host_name() -> str:
    """
    Detect the local host name.

    Prefers the fully qualified name, falls back to the plain host name
    and finally to "localhost" when the resolver gives nothing usable.
    """
    try:
        host_name = socket.getfqdn() or socket.gethostname()
    except OSError as e:
        logger.warning(f"Host name detection failed: {e}")
        return FALLBACK_HOST_NAME
    return host_name or FALLBACK_HOST_NAME
