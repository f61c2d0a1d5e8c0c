"""Base Datadog client with common functionality."""
import httpx
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class BaseDatadogClient(ABC):
    """Base class for Datadog API clients with common functionality."""

    def __init__(
        self,
        api_key: Optional[str],
        app_key: Optional[str] = None,
        site: str = "datadoghq.com",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the HTTP client."""
        self._api_key = api_key
        self._app_key = app_key
        self.base_url = f"https://api.{site}"
        self.client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def _get_headers(self, content_type: str = "application/json") -> Dict[str, str]:
        """Get standard Datadog API headers."""
        headers = {
            "DD-API-KEY": self._api_key or "",
        }
        if content_type:
            headers["Content-Type"] = content_type
        if self._app_key:
            headers["DD-APPLICATION-KEY"] = self._app_key
        return headers

    def _make_request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Make HTTP request, raising on transport errors and non-2xx responses."""
        try:
            response = self.client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPError as e:
            logger.error(f"HTTP request failed: {e}")
            raise

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    @abstractmethod
    def put_metric_data(self, namespace: str, metric_data: List[Any], tags: Optional[List[str]] = None) -> Dict[str, Any]:
        """Submit metric data points under a namespace."""
