import logging
import os

import tornado.ioloop
import tornado.web

from relay_backend.handlers import CommandHandler, DocsHandler, HealthHandler, TelemetryHandler
from relay_backend.models import Action
from relay_backend.services import CommandForwarder


def make_app() -> tornado.web.Application:
    forwarder = CommandForwarder()

    return tornado.web.Application(
        [
            (r"/health", HealthHandler, dict(forwarder=forwarder)),
            (r"/docs", DocsHandler),
            (r"/api/start", CommandHandler, dict(forwarder=forwarder, action=Action.START)),
            (r"/api/stop", CommandHandler, dict(forwarder=forwarder, action=Action.STOP)),
            (r"/api/telemetry", TelemetryHandler),
        ]
    )


def setup_logger(name):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[BACKEND] %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def main() -> None:
    logger = setup_logger("relay_backend")
    logger.info(f"Started server process {os.getpid()}")
    port = int(os.environ.get("PORT", "8080"))
    address = os.environ.get("ADDRESS", "0.0.0.0")
    app = make_app()
    logger.info(f"Gateway URL: {os.environ.get('GATEWAY_URL')}")
    app.listen(port=port, address=address)
    logger.info("Application startup complete.")
    logger.info(f"Tornado running on http://{address}:{port} (Press Ctrl+C to quit)")
    tornado.ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
