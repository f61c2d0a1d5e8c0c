from datetime import datetime, timezone
from pydantic import BaseModel, Field
from engagement_metrics.domain.entities.engagement import EngagementMethod


class EngagementPublishRequest(BaseModel):
    rate: float = Field(..., description="Engagement rate in percent")


class SessionsPublishRequest(BaseModel):
    count: int = Field(..., description="Number of active sessions")


class PublishResponse(BaseModel):
    success: bool = True
    metric: str
    namespace: str
    value: float
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class EngagementResponse(BaseModel):
    method: str
    engagement_rate: float
    known_method: bool = Field(..., description="Whether the method matched a formula")

    @classmethod
    def for_method(cls, method: str, rate: float) -> "EngagementResponse":
        known = method in {m.value for m in EngagementMethod}
        return cls(method=method, engagement_rate=rate, known_method=known)
