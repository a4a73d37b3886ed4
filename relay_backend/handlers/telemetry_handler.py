import json
import logging

import tornado.web

from relay_backend.models import TelemetryAck

logger = logging.getLogger(__name__)


class TelemetryHandler(tornado.web.RequestHandler):
    """Gateway -> relay telemetry endpoint. Payloads are logged, never stored."""

    def post(self):
        logger.info("Telemetry: %s", self._parse_body())
        self.write(TelemetryAck().model_dump())

    def _parse_body(self):
        if not self.request.body:
            return None
        text = self.request.body.decode("utf-8", errors="replace")
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Telemetry body is not valid JSON")
            return text
