import asyncio
import contextlib
import logging
import os
import signal
import sys
from typing import Callable

import tornado.web
from tornado.ioloop import IOLoop

from robot_gateway.config import GatewayConfig
from robot_gateway.handlers import CommandHandler, NotFoundHandler
from robot_gateway.services import MqttBridge, TelemetryForwarder


def make_app(bridge: MqttBridge, config: GatewayConfig) -> tornado.web.Application:
    return tornado.web.Application(
        [
            (
                r"/command",
                CommandHandler,
                dict(bridge=bridge, max_body_size=config.max_body_size),
            ),
        ],
        default_handler_class=NotFoundHandler,
    )


def telemetry_dispatcher(io_loop: IOLoop, forwarder: TelemetryForwarder) -> Callable[[str], None]:
    """Build the MQTT telemetry callback; it runs on paho's thread and hops onto ``io_loop``."""

    def dispatch(payload: str) -> None:
        io_loop.add_callback(forwarder.send, payload)

    return dispatch


def setup_logger(name):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[GATEWAY] %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


async def run(config: GatewayConfig) -> int:
    logger = logging.getLogger("robot_gateway")
    logger.info("Starting...")

    forwarder = TelemetryForwarder(config.backend_url)
    bridge = MqttBridge(config, on_telemetry=telemetry_dispatcher(IOLoop.current(), forwarder))
    try:
        bridge.start()
    except OSError as exc:
        logger.error(f"MQTT init failed: {exc}")
        return 1

    try:
        server = make_app(bridge, config).listen(config.http_port)
    except OSError as exc:
        logger.error(f"HTTP server init failed: {exc}")
        bridge.stop()
        return 1
    logger.info(f"Listening on port {config.http_port}")

    shutdown = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Unsupported on Windows event loops, where Ctrl+C raises KeyboardInterrupt instead.
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, shutdown.set)

    logger.info("Running. Press Ctrl+C to exit.")
    try:
        await shutdown.wait()
    finally:
        logger.info("Shutting down...")
        server.stop()
        bridge.stop()
    return 0


def main() -> None:
    logger = setup_logger("robot_gateway")
    logger.info(f"Started gateway process {os.getpid()}")
    config = GatewayConfig.from_env()
    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":
    main()
