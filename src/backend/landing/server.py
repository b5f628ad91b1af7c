# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT

"""Uvicorn server wrapper for the landing page service."""

import logging
import socket
from typing import Optional

import uvicorn

logger = logging.getLogger("landing")


class LandingServer(uvicorn.Server):
    """Uvicorn server that announces the listen port once it is bound.

    A failed bind makes uvicorn exit with status 1 from inside ``startup``,
    so the announcement is never reached in that case.
    """

    async def startup(self, sockets: Optional[list[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        port = self.config.port
        logger.info(f"Server running on port {port}", extra={"port": port})
