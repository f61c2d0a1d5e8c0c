"""Datadog Metrics Client - Submits custom metrics to the Datadog intake API"""
import json
import logging
from typing import Any, Dict, List, Optional
from engagement_metrics.domain.entities.metric_datum import MetricDatum, MetricUnit
from engagement_metrics.infrastructure.datadog.base_client import BaseDatadogClient

logger = logging.getLogger(__name__)

SERIES_ENDPOINT = "/api/v2/series"

# Datadog metric intake type for a gauge
GAUGE = 3

# Unit names as Datadog knows them; NONE submits no unit at all
DATADOG_UNITS = {
    MetricUnit.SECONDS: "second",
    MetricUnit.MICROSECONDS: "microsecond",
    MetricUnit.MILLISECONDS: "millisecond",
    MetricUnit.BYTES: "byte",
    MetricUnit.KILOBYTES: "kibibyte",
    MetricUnit.MEGABYTES: "mebibyte",
    MetricUnit.GIGABYTES: "gibibyte",
    MetricUnit.TERABYTES: "tebibyte",
    MetricUnit.BITS: "bit",
    MetricUnit.PERCENT: "percent",
    MetricUnit.COUNT: "unit",
    # Datadog has no per-second rate units; submit these without a unit
    MetricUnit.BYTES_PER_SECOND: None,
    MetricUnit.COUNT_PER_SECOND: None,
    MetricUnit.NONE: None,
}


def metric_prefix(namespace: str) -> str:
    """Turn a namespace like ``AmygdalaBeta/Staging`` into a metric-name prefix."""
    return ".".join(part for part in namespace.replace("/", ".").split(".") if part)


class DatadogMetricsClient(BaseDatadogClient):
    """Client for submitting metric data points to Datadog."""

    def _build_series(self, namespace: str, datum: MetricDatum, tags: List[str]) -> Dict[str, Any]:
        series: Dict[str, Any] = {
            "metric": f"{metric_prefix(namespace)}.{datum.name}",
            "type": GAUGE,
            "points": [
                {
                    "timestamp": int(datum.timestamp.timestamp()),
                    "value": datum.value,
                }
            ],
            "tags": [f"namespace:{namespace}", *tags],
        }
        unit = DATADOG_UNITS.get(datum.unit)
        if unit:
            series["unit"] = unit
        return series

    def put_metric_data(self, namespace: str, metric_data: List[MetricDatum], tags: Optional[List[str]] = None) -> Dict[str, Any]:
        """Submit metric data in a single call to the series endpoint.

        Args:
            namespace: Grouping for the metrics, used as name prefix and tag
            metric_data: Data points to submit
            tags: Extra ``key:value`` tags applied to every series

        Returns:
            The decoded intake response body.
        """
        # json.dumps keeps NaN and Infinity so the backend applies its own validation
        payload = {
            "series": [self._build_series(namespace, datum, tags or []) for datum in metric_data]
        }
        logger.debug(f"📤 Submitting {len(metric_data)} series to {self.base_url}{SERIES_ENDPOINT}")

        response = self._make_request(
            "POST",
            SERIES_ENDPOINT,
            headers=self._get_headers(),
            content=json.dumps(payload),
        )
        if not response.content:
            return {}
        return response.json()
