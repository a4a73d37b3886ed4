"""Pydantic models for relay request and response payloads."""

from .messages import (
    Action,
    CommandRequest,
    ForwardResult,
    HealthStatus,
    TelemetryAck,
    TelemetryPayload,
    SchemaDocument,
)

__all__ = [
    "Action",
    "CommandRequest",
    "ForwardResult",
    "HealthStatus",
    "TelemetryAck",
    "TelemetryPayload",
    "SchemaDocument",
]
