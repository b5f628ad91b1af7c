# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT
"""HTML for the landing page."""

import locale
import logging
from datetime import datetime
from string import Template

logger = logging.getLogger("landing.page")

PAGE_TITLE = "HNG13 Stage 1"
HEADING = "HNG13 Stage 1 DevOps Task"
AUTHOR_NAME = "Chuye Princely Tata"
SLACK_USERNAME = "@PrincelyT"
DEPLOY_MESSAGE = "Application successfully deployed!"

_PAGE = Template(
    f"""<!DOCTYPE html>
<html>
<head>
  <title>{PAGE_TITLE}</title>
  <style>
    body {{
      font-family: Arial, sans-serif;
      display: flex;
      justify-content: center;
      align-items: center;
      height: 100vh;
      margin: 0;
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      color: white;
    }}
    .container {{
      text-align: center;
      padding: 2rem;
      background: rgba(255, 255, 255, 0.1);
      border-radius: 10px;
    }}
  </style>
</head>
<body>
  <div class="container">
    <h1>{HEADING}</h1>
    <p>Name: {AUTHOR_NAME}</p>
    <p>Slack Username: {SLACK_USERNAME}</p>
    <p>{DEPLOY_MESSAGE}</p>
    <p>Timestamp: $timestamp</p>
  </div>
</body>
</html>
"""
)


def use_host_locale() -> None:
    """Format dates with the host's default locale instead of C."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as err:
        logger.warning(
            "Host locale unavailable; using C locale for timestamps",
            extra={"error": str(err)},
        )


def now_local() -> datetime:
    return datetime.now().astimezone()


def format_timestamp(now: datetime) -> str:
    """Human-readable date and time in the active ``LC_TIME`` locale."""
    return now.strftime("%c")


def render_page(now: datetime) -> str:
    """Render the landing page stamped with ``now``."""
    return _PAGE.substitute(timestamp=format_timestamp(now))
