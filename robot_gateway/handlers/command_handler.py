import logging

import tornado.web

from robot_gateway.handlers.plain_text_handler import PlainTextHandler
from robot_gateway.services import MqttBridge

logger = logging.getLogger(__name__)


class CommandHandler(PlainTextHandler):
    """Publishes the raw request body to the robot command topic."""

    def initialize(self, bridge: MqttBridge, max_body_size: int):
        self.bridge = bridge
        self.max_body_size = max_body_size

    def prepare(self):
        if self.request.method != "POST":
            raise tornado.web.HTTPError(404)

    def post(self):
        body = self.request.body
        # The limit is exclusive: at most max_body_size - 1 bytes are accepted.
        if len(body) >= self.max_body_size:
            logger.warning("Body too large (%d bytes), dropping", len(body))
            self.set_status(413)
            self.write("Command too large\n")
            return

        logger.info("/command body: %s", body.decode("utf-8", errors="replace"))
        if self.bridge.publish_command(body):
            self.write("Command accepted\n")
        else:
            self.set_status(500)
            self.write("Failed to publish command\n")
