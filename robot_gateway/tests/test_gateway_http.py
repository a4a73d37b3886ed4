import asyncio
import json
import threading

import pytest
import tornado.web
from tornado import httpclient, httpserver, testing
from tornado.ioloop import IOLoop

from robot_gateway.config import GatewayConfig
from robot_gateway.services import TelemetryForwarder


class FakeBridge:
    def __init__(self, ok=True):
        self.ok = ok
        self.published = []

    def publish_command(self, payload):
        self.published.append(payload)
        return self.ok


class RecordingTelemetryHandler(tornado.web.RequestHandler):
    def initialize(self, received, status=200):
        self.received = received
        self.status = status

    def post(self):
        self.received.append(json.loads(self.request.body))
        self.set_status(self.status)
        self.write({"success": True})


def serve(app):
    server = httpserver.HTTPServer(app)
    sock, port = testing.bind_unused_port()
    server.add_socket(sock)
    return server, port


def start_gateway(bridge, **config):
    import robot_gateway.main as main

    return serve(main.make_app(bridge, GatewayConfig(**config)))


async def post(port, path, body):
    client = httpclient.AsyncHTTPClient()
    return await client.fetch(
        f"http://127.0.0.1:{port}{path}", method="POST", body=body, raise_error=False
    )


@pytest.mark.asyncio
async def test_command_is_published_verbatim():
    bridge = FakeBridge()
    server, port = start_gateway(bridge)

    try:
        resp = await post(port, "/command", '{"action":"start"}')

        assert resp.code == 200
        assert resp.body == b"Command accepted\n"
        assert bridge.published == [b'{"action":"start"}']
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_publish_failure_returns_500():
    server, port = start_gateway(FakeBridge(ok=False))

    try:
        resp = await post(port, "/command", '{"action":"stop"}')

        assert resp.code == 500
        assert resp.body == b"Failed to publish command\n"
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_oversized_command_is_rejected():
    bridge = FakeBridge()
    server, port = start_gateway(bridge, max_body_size=16)

    try:
        resp = await post(port, "/command", json.dumps({"action": "start", "pad": "x" * 32}))

        assert resp.code == 413
        assert bridge.published == []
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_unknown_path_is_404():
    server, port = start_gateway(FakeBridge())

    try:
        resp = await post(port, "/robots/start", "{}")

        assert resp.code == 404
    finally:
        server.stop()


@pytest.mark.asyncio
async def test_telemetry_forwarder_posts_to_backend():
    received = []
    backend, port = serve(
        tornado.web.Application([(r"/api/telemetry", RecordingTelemetryHandler, dict(received=received))])
    )

    try:
        forwarder = TelemetryForwarder(f"http://127.0.0.1:{port}/api/telemetry")
        assert await forwarder.send('{"battery": 55}') is True
        assert received == [{"battery": 55}]
    finally:
        backend.stop()


@pytest.mark.asyncio
async def test_telemetry_forwarder_reports_rejection():
    received = []
    backend, port = serve(
        tornado.web.Application(
            [(r"/api/telemetry", RecordingTelemetryHandler, dict(received=received, status=500))]
        )
    )

    try:
        forwarder = TelemetryForwarder(f"http://127.0.0.1:{port}/api/telemetry")
        assert await forwarder.send("{}") is False
    finally:
        backend.stop()


@pytest.mark.asyncio
async def test_telemetry_forwarder_unreachable_backend():
    sock, port = testing.bind_unused_port()
    sock.close()

    forwarder = TelemetryForwarder(f"http://127.0.0.1:{port}/api/telemetry")

    assert await forwarder.send("{}") is False


@pytest.mark.asyncio
async def test_dispatcher_hands_telemetry_from_mqtt_thread_to_loop():
    import robot_gateway.main as main

    received = []
    backend, port = serve(
        tornado.web.Application([(r"/api/telemetry", RecordingTelemetryHandler, dict(received=received))])
    )
    forwarder = TelemetryForwarder(f"http://127.0.0.1:{port}/api/telemetry")
    dispatch = main.telemetry_dispatcher(IOLoop.current(), forwarder)

    try:
        worker = threading.Thread(target=dispatch, args=('{"pose": {"x": 1.0}}',))
        worker.start()
        worker.join()

        for _ in range(100):
            if received:
                break
            await asyncio.sleep(0.02)

        assert received == [{"pose": {"x": 1.0}}]
    finally:
        backend.stop()


@pytest.mark.asyncio
async def test_body_limit_is_exclusive():
    bridge = FakeBridge()
    server, port = start_gateway(bridge, max_body_size=16)

    try:
        at_limit = await post(port, "/command", "x" * 16)
        below_limit = await post(port, "/command", "y" * 15)

        assert at_limit.code == 413
        assert below_limit.code == 200
        assert bridge.published == [b"y" * 15]
    finally:
        server.stop()


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/command", "/", "/robots/start"])
async def test_non_command_requests_get_plain_not_found(path):
    bridge = FakeBridge()
    server, port = start_gateway(bridge)

    try:
        client = httpclient.AsyncHTTPClient()
        resp = await client.fetch(f"http://127.0.0.1:{port}{path}", raise_error=False)

        assert resp.code == 404
        assert resp.body == b"Not found\n"
        assert resp.headers["Content-Type"].startswith("text/plain")
        assert bridge.published == []
    finally:
        server.stop()
