import logging
from typing import Optional

from tornado.httpclient import AsyncHTTPClient, HTTPClientError, HTTPRequest

logger = logging.getLogger(__name__)


class TelemetryForwarder:
    """Posts raw telemetry JSON to the relay backend."""

    def __init__(self, backend_url: str, http_client: Optional[AsyncHTTPClient] = None):
        self.backend_url = backend_url
        self._http_client = http_client

    @property
    def http_client(self) -> AsyncHTTPClient:
        return self._http_client or AsyncHTTPClient()

    async def send(self, payload: str) -> bool:
        """Return True when the backend answered 2xx. Failures are logged, not raised."""
        request = HTTPRequest(
            self.backend_url,
            method="POST",
            headers={"Content-Type": "application/json"},
            body=payload,
        )
        logger.info("POST %s", self.backend_url)
        try:
            response = await self.http_client.fetch(request, raise_error=False)
        except (HTTPClientError, OSError, ValueError) as exc:
            logger.error("Failed to send telemetry to backend: %s", exc)
            return False

        logger.info("Response status: %s", response.code)
        if not 200 <= response.code < 300:
            logger.error("Backend rejected telemetry with status %s", response.code)
            return False
        return True
