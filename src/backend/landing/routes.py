# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT
"""HTTP route for the landing page."""

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from common.metrics import page_views
from landing import page

logger = logging.getLogger("landing")
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index() -> HTMLResponse:
    """Serve the landing page with the current server time."""
    body = page.render_page(page.now_local())
    page_views().add(1, {"http.route": "/"})
    logger.debug("Rendered landing page", extra={"bytes": len(body)})
    return HTMLResponse(body)
