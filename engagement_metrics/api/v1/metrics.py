from fastapi import APIRouter, Depends
from engagement_metrics.dependencies import get_metrics_publisher
from engagement_metrics.domain.services.metrics_publisher import (
    ACTIVE_SESSIONS,
    USER_ENGAGEMENT,
    MetricsPublisher,
)
from engagement_metrics.schemas.metrics import (
    EngagementPublishRequest,
    PublishResponse,
    SessionsPublishRequest,
)

router = APIRouter(prefix="/metrics")

# Publishing blocks on the backend call, so these run in the threadpool (plain def)

@router.post("/engagement", response_model=PublishResponse)
def publish_engagement(body: EngagementPublishRequest, publisher: MetricsPublisher = Depends(get_metrics_publisher)):
    """Publish the user engagement rate."""
    publisher.publish_user_engagement(body.rate)
    return PublishResponse(metric=USER_ENGAGEMENT, namespace=publisher.namespace, value=body.rate)


@router.post("/sessions", response_model=PublishResponse)
def publish_sessions(body: SessionsPublishRequest, publisher: MetricsPublisher = Depends(get_metrics_publisher)):
    """Publish the active session count."""
    publisher.publish_active_sessions(body.count)
    return PublishResponse(metric=ACTIVE_SESSIONS, namespace=publisher.namespace, value=float(body.count))
