from typing import Optional
from fastapi import APIRouter, Depends, Query
from engagement_metrics.config import settings
from engagement_metrics.dependencies import get_engagement_calculator
from engagement_metrics.domain.services.engagement_calculator import EngagementCalculator
from engagement_metrics.schemas.metrics import EngagementResponse

router = APIRouter()

@router.get("/engagement", response_model=EngagementResponse)
async def get_engagement(
    method: Optional[str] = Query(default=None, description="session_based, activity_based or retention_based"),
    calculator: EngagementCalculator = Depends(get_engagement_calculator),
):
    """Calculate an engagement rate; unknown methods yield 0."""
    method = method or settings.ENGAGEMENT_METHOD
    return EngagementResponse.for_method(method, calculator.calculate(method))
