# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT

"""Landing page service main entrypoint."""

# Necessary for running stuff before other imports
# ruff: noqa: E402

from common import __version__
from common.config import config
from common.logging_config import configure_logging
from common.metrics import configure_metrics

# Initialize logging early
configure_logging(
    service_name="landing",
    service_version=__version__,
    environment=config.ENVIRONMENT,
)
configure_metrics(environment=config.ENVIRONMENT)

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from landing.page import use_host_locale
from landing.routes import router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    use_host_locale()
    yield


def create_app() -> FastAPI:
    """FastAPI factory for the landing page service."""
    app = FastAPI(
        title="HNG13 Stage 1",
        version=__version__,
        description="Static landing page stamped with the server time",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(router)
    return app


app = create_app()
