# SPDX-FileCopyrightText: 2025 hng13-stage1
#
# SPDX-License-Identifier: MIT
"""OpenTelemetry metrics for the landing service.

Nothing leaves the process unless ``OTEL_EXPORTER_OTLP_METRICS_ENDPOINT`` or
``OTEL_EXPORTER_OTLP_ENDPOINT`` is set.
"""

import logging
import os
from typing import Optional

from opentelemetry import metrics
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import ResourceAttributes

from common import __version__

EXPORT_INTERVAL_MS = 5000

_meter: Optional[metrics.Meter] = None
_page_views: Optional[metrics.Counter] = None


def _build_provider(resource: Resource) -> MeterProvider:
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_METRICS_ENDPOINT") or os.getenv(
        "OTEL_EXPORTER_OTLP_ENDPOINT"
    )
    if not endpoint:
        return MeterProvider(resource=resource)
    try:
        reader = PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=endpoint),
            export_interval_millis=EXPORT_INTERVAL_MS,
        )
    except Exception as err:  # pragma: no cover
        logging.getLogger(__name__).warning(
            "OTLP metrics exporter setup failed; metrics stay in-process",
            extra={"error": str(err), "endpoint": endpoint},
        )
        return MeterProvider(resource=resource)
    return MeterProvider(resource=resource, metric_readers=[reader])


def configure_metrics(
    service_name: str = "landing",
    service_version: str = __version__,
    environment: str | None = None,
) -> metrics.Meter:
    """Install the global MeterProvider once and return the service meter."""
    global _meter
    if _meter is not None:
        return _meter

    env = (
        os.getenv("ENVIRONMENT", "development") if environment is None else environment
    )
    resource = Resource.create(
        {
            ResourceAttributes.SERVICE_NAME: service_name,
            ResourceAttributes.SERVICE_VERSION: service_version,
            ResourceAttributes.DEPLOYMENT_ENVIRONMENT: env,
        }
    )
    metrics.set_meter_provider(_build_provider(resource))
    _meter = metrics.get_meter(service_name, service_version)
    return _meter


def page_views() -> metrics.Counter:
    """Counter of rendered landing pages, created on first use.

    Raises:
        RuntimeError: If metrics have not been configured yet
    """
    global _page_views
    if _meter is None:
        raise RuntimeError("Metrics not configured. Call configure_metrics() first.")
    if _page_views is None:
        _page_views = _meter.create_counter(
            "landing.page_views",
            unit="1",
            description="Number of landing page renders",
        )
    return _page_views
