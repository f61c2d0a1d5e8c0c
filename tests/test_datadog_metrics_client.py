from datetime import datetime, timezone

from engagement_metrics.domain.entities.metric_datum import MetricDatum, MetricUnit
from engagement_metrics.infrastructure.datadog.metrics_client import DatadogMetricsClient, metric_prefix


def test_metric_prefix():
    assert metric_prefix("AmygdalaBeta/Staging") == "AmygdalaBeta.Staging"
    assert metric_prefix("/Amygdala//Beta/") == "Amygdala.Beta"
    assert metric_prefix("app.metrics") == "app.metrics"


def test_series_without_unit():
    client = DatadogMetricsClient(api_key="k")
    datum = MetricDatum(
        name="Ratio",
        value=1.5,
        unit=MetricUnit.NONE,
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    series = client._build_series("ns", datum, ["a:b"])
    client.close()

    assert "unit" not in series
    assert series["metric"] == "ns.Ratio"
    assert series["points"] == [{"timestamp": 1704067200, "value": 1.5}]
    assert series["tags"] == ["namespace:ns", "a:b"]


def test_headers_omit_missing_app_key():
    client = DatadogMetricsClient(api_key="k")
    headers = client._get_headers()
    client.close()
    assert headers == {"DD-API-KEY": "k", "Content-Type": "application/json"}


def test_rate_units_are_submitted_without_unit():
    client = DatadogMetricsClient(api_key="k")
    for unit in (MetricUnit.BYTES_PER_SECOND, MetricUnit.COUNT_PER_SECOND):
        datum = MetricDatum(name="Throughput", value=2.0, unit=unit)
        assert "unit" not in client._build_series("ns", datum, [])
    client.close()
