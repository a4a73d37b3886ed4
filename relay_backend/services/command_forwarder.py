import json
import logging
import os
from typing import Any, Optional

from tornado.httpclient import AsyncHTTPClient, HTTPClientError, HTTPRequest, HTTPResponse

from relay_backend.models import Action, CommandRequest, ForwardResult

logger = logging.getLogger(__name__)


class CommandForwarder:
    """Forwards robot commands to the gateway with a single HTTP POST."""

    def __init__(
        self,
        gateway_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[AsyncHTTPClient] = None,
    ):
        self.gateway_url = gateway_url or os.getenv("GATEWAY_URL")
        raw_timeout = timeout if timeout is not None else os.getenv("GATEWAY_TIMEOUT")
        self.timeout = float(raw_timeout) if raw_timeout else None
        self._http_client = http_client

    @property
    def http_client(self) -> AsyncHTTPClient:
        # AsyncHTTPClient instances are cached per IOLoop, so resolve lazily.
        return self._http_client or AsyncHTTPClient()

    async def forward(self, action: Action | str) -> ForwardResult:
        """
        POST ``{"action": action}`` to the gateway and wrap the outcome.

        Never raises for gateway problems: network errors, timeouts and
        non-2xx answers all come back as a failed ``ForwardResult``.
        """
        command = CommandRequest(action=action)
        logger.info("Forwarding '%s' to gateway...", command.action.value)

        if not self.gateway_url:
            logger.error("Cannot forward '%s': GATEWAY_URL is not configured", command.action.value)
            return ForwardResult.failure(500, "GATEWAY_URL is not configured")

        request = self._build_request(command)
        try:
            response = await self.http_client.fetch(request, raise_error=False)
        except (HTTPClientError, OSError, ValueError) as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning("Gateway request for '%s' failed: %s", command.action.value, message)
            return ForwardResult.failure(500, message)

        body = self._decode_body(response)
        if 200 <= response.code < 300:
            logger.info("Gateway accepted '%s' (status %s)", command.action.value, response.code)
            return ForwardResult.success(response.code, body)

        logger.warning("Gateway rejected '%s' (status %s): %s", command.action.value, response.code, body)
        # Falsy bodies (null, "", false, 0) fall back to the status message.
        if body in (None, "", 0):
            body = f"Request failed with status code {response.code}"
        return ForwardResult.failure(response.code, body)

    def _build_request(self, command: CommandRequest) -> HTTPRequest:
        options: dict[str, Any] = {}
        if self.timeout is not None:
            options["connect_timeout"] = self.timeout
            options["request_timeout"] = self.timeout
        return HTTPRequest(
            self.gateway_url,
            method="POST",
            headers={"Content-Type": "application/json"},
            body=command.model_dump_json(),
            **options,
        )

    @staticmethod
    def _decode_body(response: HTTPResponse) -> Any:
        if not response.body:
            return ""
        text = response.body.decode("utf-8", errors="replace")
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
