from fastapi import APIRouter
from engagement_metrics.config import settings

router = APIRouter()

@router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "namespace": settings.METRICS_NAMESPACE,
    }
