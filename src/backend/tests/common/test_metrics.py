# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT
import pytest

from common import metrics
from common.metrics import configure_metrics, page_views


def test_configure_metrics_returns_same_meter() -> None:
    assert configure_metrics() is configure_metrics()


def test_page_views_counter_is_created_once() -> None:
    configure_metrics()
    counter = page_views()
    assert counter is page_views()
    counter.add(1, {"http.route": "/"})


def test_page_views_requires_configured_meter(monkeypatch) -> None:
    monkeypatch.setattr(metrics, "_meter", None)
    monkeypatch.setattr(metrics, "_page_views", None)
    with pytest.raises(RuntimeError):
        page_views()
