import tornado.web

from relay_backend.models import (
    CommandRequest,
    ForwardResult,
    HealthStatus,
    SchemaDocument,
    TelemetryAck,
    TelemetryPayload,
)


class DocsHandler(tornado.web.RequestHandler):
    def get(self):
        forward_success_example = ForwardResult.success(201, {"state": "started"}).to_response()
        forward_failure_example = ForwardResult.failure(500, "[Errno 111] Connection refused").to_response()
        telemetry_example = {
            "robot_id": "tank-01",
            "battery": 87.5,
            "pose": {"x": 1.2, "y": -0.4, "theta": 1.57},
            "timestamp": "2026-01-01T12:00:00Z",
        }

        schema = SchemaDocument(
            http_endpoints={
                "GET /health": "Static status plus the configured gateway URL.",
                "GET /docs": "This document.",
                "POST /api/start": "Forward {action: start} to the gateway.",
                "POST /api/stop": "Forward {action: stop} to the gateway.",
                "POST /api/telemetry": "Accept and log any JSON payload.",
            },
            request_schemas={
                "GatewayCommand": CommandRequest.model_json_schema(),
                "Telemetry": TelemetryPayload.model_json_schema(),
            },
            response_schemas={
                "HealthStatus": HealthStatus.model_json_schema(),
                "ForwardResult": ForwardResult.model_json_schema(),
                "TelemetryAck": TelemetryAck.model_json_schema(),
            },
            environment={
                "PORT": "Listen port (default 8080).",
                "ADDRESS": "Listen address (default 0.0.0.0).",
                "GATEWAY_URL": "Gateway command endpoint; required for /api/start and /api/stop.",
                "GATEWAY_TIMEOUT": "Optional timeout in seconds for gateway calls.",
            },
            examples={
                "forward_success": forward_success_example,
                "forward_failure": forward_failure_example,
                "telemetry": telemetry_example,
            },
            notes=[
                "Start/stop respond 200 on success and the gateway status (or 500) on failure.",
                "ForwardResult carries 'data' on success and 'error' on failure.",
                "Telemetry always answers {success: true}, even for malformed bodies.",
                "Gateway calls are not retried.",
            ],
        )
        self.set_header("Content-Type", "application/json")
        self.write(schema.model_dump(mode="json"))
