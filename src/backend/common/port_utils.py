# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT

"""Resolution of the listen port from the environment."""

import logging
from typing import Optional

DEFAULT_PORT = 3000
MIN_PORT = 1
MAX_PORT = 65535

logger = logging.getLogger(__name__)


def resolve_port(raw: Optional[str], default: int = DEFAULT_PORT) -> int:
    """Turn an optional environment value into a TCP port.

    Args:
        raw: Value of the ``PORT`` variable, or None when unset
        default: Port used when ``raw`` is missing or unusable

    Returns:
        The parsed port, or ``default`` when ``raw`` is absent, blank,
        not an integer or outside 1-65535
    """
    if raw is None or not raw.strip():
        return default
    try:
        port = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring non-numeric PORT value", extra={"value": raw, "port": default}
        )
        return default
    if not MIN_PORT <= port <= MAX_PORT:
        logger.warning(
            "Ignoring out-of-range PORT value", extra={"value": raw, "port": default}
        )
        return default
    return port
