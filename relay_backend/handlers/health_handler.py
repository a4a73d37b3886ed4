import tornado.web

from relay_backend.models import HealthStatus
from relay_backend.services import CommandForwarder


class HealthHandler(tornado.web.RequestHandler):
    def initialize(self, forwarder: CommandForwarder):
        self.forwarder = forwarder

    def get(self):
        # Reports configuration only; the gateway is never contacted here.
        self.write(HealthStatus(gateway=self.forwarder.gateway_url).model_dump(mode="json"))
