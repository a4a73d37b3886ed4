import tornado.web

from relay_backend.models import Action
from relay_backend.services import CommandForwarder


class CommandHandler(tornado.web.RequestHandler):
    """Relays a fixed robot command to the gateway; the request body is ignored."""

    def initialize(self, forwarder: CommandForwarder, action: Action):
        self.forwarder = forwarder
        self.action = action

    async def post(self):
        result = await self.forwarder.forward(self.action)
        self.set_status(result.http_status)
        if result.carries_body:
            self.write(result.to_response())
