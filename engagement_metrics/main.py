import logging
from typing import Optional

from fastapi import FastAPI

from engagement_metrics.api.v1 import engagement, health, metrics
from engagement_metrics.config import settings
from engagement_metrics.domain.exceptions import PublishError
from engagement_metrics.middleware import ErrorHandlingMiddleware, LoggingMiddleware, publish_error_handler

logging.basicConfig(level=settings.LOG_LEVEL)


def create_app(detailed_logging: Optional[bool] = None) -> FastAPI:
    if detailed_logging is None:
        detailed_logging = settings.LOG_LEVEL == "DEBUG"

    app = FastAPI(
        title="Engagement Metrics",
        description="Publishes user engagement and active session metrics",
        version=settings.VERSION,
    )

    # Last added runs first: logging wraps error handling
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware, enable_detailed_logging=detailed_logging)
    app.add_exception_handler(PublishError, publish_error_handler)

    # Mount routers
    app.include_router(health.router, prefix="/api/v1")
    app.include_router(metrics.router, prefix="/api/v1")
    app.include_router(engagement.router, prefix="/api/v1")

    return app

app = create_app()


def serve():
    import os
    import uvicorn

    # Get port from environment variable (for deployment) or default to 8001
    port = int(os.getenv("PORT", 8001))
    print(f"🌐 Server: http://localhost:{port}")
    uvicorn.run(
        "engagement_metrics.main:app",
        host="0.0.0.0",
        port=port,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    serve()
