# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT

"""CLI entry point for the landing page service."""


def main() -> None:
    """Start the landing page service on ``$PORT`` (default 3000)."""
    # Import here to avoid early initialization
    import uvicorn

    from common.config import config
    from landing.server import LandingServer

    server = LandingServer(
        uvicorn.Config(
            "landing.main:app",
            host=config.HOST,
            port=config.PORT,
            log_config=None,
        )
    )
    server.run()


if __name__ == "__main__":
    main()
