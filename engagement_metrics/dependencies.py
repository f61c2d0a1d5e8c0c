import logging
from functools import lru_cache

from engagement_metrics.config import settings
from engagement_metrics.domain.services.engagement_calculator import EngagementCalculator
from engagement_metrics.domain.services.metrics_publisher import MetricsPublisher

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_metrics_publisher() -> MetricsPublisher:
    # Built on first use; missing credentials surface as PublisherInitError
    logger.info(f"🔧 Creating metrics publisher for {settings.METRICS_NAMESPACE}")
    return MetricsPublisher.from_settings()


def get_engagement_calculator() -> EngagementCalculator:
    return EngagementCalculator()
