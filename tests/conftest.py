import json
import httpx
import pytest

from engagement_metrics.domain.services.metrics_publisher import MetricsPublisher, PublisherConfig
from engagement_metrics.infrastructure.datadog.metrics_client import DatadogMetricsClient
from engagement_metrics.infrastructure.engagement.data_source import EngagementDataSource


class RecordingGateway:
    """Stands in for the Datadog client and keeps every submitted datum."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []
        self.closed = False

    def put_metric_data(self, namespace, metric_data, tags=None):
        if self.error is not None:
            raise self.error
        self.calls.append((namespace, list(metric_data), list(tags or [])))
        return {"errors": []}

    def close(self):
        self.closed = True


class FixedDataSource(EngagementDataSource):
    def __init__(self, **counts):
        self.counts = counts
        self.actions = None
        self.window = None

    def get_active_sessions_last_hour(self):
        return self.counts.get("active_sessions_last_hour", 0)

    def get_daily_active_users(self):
        return self.counts.get("daily_active_users", 0)

    def get_users_with_actions(self, actions):
        self.actions = actions
        return self.counts.get("users_with_actions", 0)

    def get_total_active_users(self):
        return self.counts.get("total_active_users", 0)

    def get_returning_users(self, window):
        self.window = window
        return self.counts.get("returning_users", 0)

    def get_total_users(self):
        return self.counts.get("total_users", 0)


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def publisher(gateway):
    return MetricsPublisher(PublisherConfig(namespace="AmygdalaBeta/Staging"), gateway=gateway)


@pytest.fixture
def intake_requests():
    return []


@pytest.fixture
def make_http_publisher(intake_requests):
    """Publisher wired to the real Datadog client over a mock transport."""

    def _make(status_code=202, handler=None, namespace="AmygdalaBeta/Staging", tags=None):
        def record(request):
            intake_requests.append(request)
            return httpx.Response(status_code, json={"errors": []})

        client = DatadogMetricsClient(
            api_key="test-api-key",
            app_key="test-app-key",
            transport=httpx.MockTransport(handler or record),
        )
        config = PublisherConfig(namespace=namespace, api_key="test-api-key", tags=tags or [])
        return MetricsPublisher(config, gateway=client)

    return _make


def request_series(request):
    return json.loads(request.content)["series"]
