import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_tags(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


class Settings:
    APP_NAME: str = "engagement-metrics"
    VERSION: str = "0.1.0"

    def __init__(self):
        # Namespace varies by deployment environment (staging vs production)
        self.METRICS_NAMESPACE: str = os.getenv("METRICS_NAMESPACE", "AmygdalaBeta/Staging")
        self.METRICS_TIMEOUT_SECONDS: float = float(os.getenv("METRICS_TIMEOUT_SECONDS", "30"))
        self.METRICS_TAGS: List[str] = _split_tags(os.getenv("METRICS_TAGS"))

        # Datadog Configuration
        self.DATADOG_API_KEY: Optional[str] = os.getenv("DATADOG_API_KEY") or os.getenv("DD_API_KEY")
        self.DATADOG_APP_KEY: Optional[str] = os.getenv("DATADOG_APP_KEY") or os.getenv("DD_APP_KEY")
        self.DATADOG_SITE: str = os.getenv("DATADOG_SITE") or os.getenv("DD_SITE") or "datadoghq.com"

        self.ENGAGEMENT_METHOD: str = os.getenv("ENGAGEMENT_METHOD", "session_based")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def datadog_api_key(self) -> Optional[str]:
        """Get Datadog API key."""
        return self.DATADOG_API_KEY

    @property
    def datadog_app_key(self) -> Optional[str]:
        """Get Datadog Application key."""
        return self.DATADOG_APP_KEY


settings = Settings()
