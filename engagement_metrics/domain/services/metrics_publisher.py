"""Metrics Publisher - submits single-datapoint custom metrics under one namespace"""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field
from engagement_metrics.config import Settings, settings as default_settings
from engagement_metrics.domain.entities.metric_datum import MetricDatum, MetricUnit
from engagement_metrics.domain.exceptions import PublishError, PublisherInitError
from engagement_metrics.infrastructure.datadog.base_client import BaseDatadogClient
from engagement_metrics.infrastructure.datadog.metrics_client import DatadogMetricsClient

logger = logging.getLogger(__name__)

USER_ENGAGEMENT = "UserEngagement"
ACTIVE_SESSIONS = "ActiveSessions"


class PublisherConfig(BaseModel):
    namespace: str
    api_key: Optional[str] = None
    app_key: Optional[str] = None
    site: str = "datadoghq.com"
    timeout: float = 30.0
    tags: List[str] = Field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Settings, namespace: Optional[str] = None) -> "PublisherConfig":
        return cls(
            namespace=namespace if namespace is not None else settings.METRICS_NAMESPACE,
            api_key=settings.datadog_api_key,
            app_key=settings.datadog_app_key,
            site=settings.DATADOG_SITE,
            timeout=settings.METRICS_TIMEOUT_SECONDS,
            tags=list(settings.METRICS_TAGS),
        )


class MetricsPublisher:
    """Publishes user engagement and active session metrics.

    Every publish is its own synchronous round trip carrying exactly one
    datum. Failures are logged and raised to the caller; nothing is retried.
    """

    def __init__(self, config: PublisherConfig, gateway: Optional[BaseDatadogClient] = None):
        if not config.namespace or not config.namespace.strip():
            raise PublisherInitError("Metrics namespace must be a non-empty string")

        if gateway is None:
            if not config.api_key:
                raise PublisherInitError(
                    "No monitoring credentials found: set DATADOG_API_KEY or DD_API_KEY"
                )
            gateway = DatadogMetricsClient(
                api_key=config.api_key,
                app_key=config.app_key,
                site=config.site,
                timeout=config.timeout,
            )

        self.client = gateway
        self.namespace = config.namespace
        self._tags = list(config.tags)
        logger.info(f"📊 Metrics publisher ready for namespace {self.namespace}")

    @classmethod
    def from_settings(cls, namespace: Optional[str] = None, settings: Optional[Settings] = None) -> "MetricsPublisher":
        """Build a publisher from environment configuration."""
        config = PublisherConfig.from_settings(settings or default_settings, namespace=namespace)
        return cls(config)

    def publish_datum(self, datum: MetricDatum) -> None:
        """Submit one datum. Raises PublishError chained to the backend error."""
        try:
            self.client.put_metric_data(self.namespace, [datum], tags=self._tags)
        except Exception as e:
            raise PublishError(datum.name, str(e)) from e

    def publish_user_engagement(self, engagement_rate: float) -> None:
        """Send the user engagement rate (percent)."""
        datum = MetricDatum(
            name=USER_ENGAGEMENT,
            value=engagement_rate,
            unit=MetricUnit.PERCENT,
            timestamp=datetime.now(timezone.utc),
        )
        try:
            self.publish_datum(datum)
        except PublishError as e:
            logger.error(f"❌ Failed to publish user engagement metric: {e.__cause__}")
            raise

        logger.info(f"✅ Published user engagement: {engagement_rate:.2f}%")

    def publish_active_sessions(self, session_count: int) -> None:
        """Send the active session count."""
        datum = MetricDatum(
            name=ACTIVE_SESSIONS,
            value=float(session_count),
            unit=MetricUnit.COUNT,
            timestamp=datetime.now(timezone.utc),
        )
        try:
            self.publish_datum(datum)
        except PublishError as e:
            logger.error(f"❌ Failed to publish active sessions metric: {e.__cause__}")
            raise

        logger.info(f"✅ Published active sessions: {session_count}")

    def close(self):
        self.client.close()

    def __enter__(self) -> "MetricsPublisher":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
