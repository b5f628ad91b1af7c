# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT
import os

from common.port_utils import DEFAULT_PORT, resolve_port


class Config:
    """Application configuration."""

    # Listener settings
    HOST: str = "0.0.0.0"
    PORT: int = resolve_port(os.getenv("PORT"), default=DEFAULT_PORT)

    # Deployment tag attached to logs and metrics
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


config = Config()
