#!/usr/bin/env python3
"""
Example usage of the metrics publisher.

Computes an engagement rate from user totals and publishes it together
with the active user count under the configured namespace.
"""

import logging

from engagement_metrics.config import settings
from engagement_metrics.domain.exceptions import PublishError
from engagement_metrics.domain.services.metrics_publisher import MetricsPublisher

logger = logging.getLogger(__name__)


def run_example(publisher: MetricsPublisher, total_users: int = 1000, active_users: int = 450) -> float:
    """Publish an example engagement rate and session count; return the rate."""
    engagement_rate = (float(active_users) / float(total_users)) * 100

    # Each publish is independent; a failure in one does not skip the other
    for publish, value in (
        (publisher.publish_user_engagement, engagement_rate),
        (publisher.publish_active_sessions, active_users),
    ):
        try:
            publish(value)
        except PublishError as e:
            logger.warning(f"⚠️ Continuing after failed publish of {e.metric_name}")

    return engagement_rate


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info(f"🚀 Publishing example metrics to namespace {settings.METRICS_NAMESPACE}")

    with MetricsPublisher.from_settings() as publisher:
        rate = run_example(publisher)

    logger.info(f"📊 Example engagement rate: {rate:.2f}%")


if __name__ == "__main__":
    main()
