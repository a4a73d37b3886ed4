"""
Backend relay service package.

This service is responsible for:
- Forwarding start/stop commands from clients to the robot gateway.
- Receiving telemetry callbacks from the gateway and logging them.

The HTTP server is implemented with Tornado.
"""
