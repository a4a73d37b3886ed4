from enum import Enum
from typing import Any, Dict, List, Optional, Literal

from pydantic import BaseModel, Field, ConfigDict


class Action(str, Enum):
    """Robot commands understood by the gateway."""

    START = "start"
    STOP = "stop"


class CommandRequest(BaseModel):
    """Outbound command body sent from the relay to the gateway."""

    action: Action = Field(..., description="Command for the robot gateway.")


class ForwardResult(BaseModel):
    """
    Outcome of forwarding a command to the gateway.

    Successful results carry the gateway body in ``data``; failures carry the
    gateway error body or the exception message in ``error``.
    """

    ok: bool = Field(..., description="True when the gateway answered with a 2xx status.")
    status: int = Field(..., description="Gateway status code, or 500 when no response was received.")
    data: Optional[Any] = Field(default=None, description="Gateway response body on success.")
    error: Optional[Any] = Field(default=None, description="Gateway error body or exception message.")

    @classmethod
    def success(cls, status: int, data: Any) -> "ForwardResult":
        return cls(ok=True, status=status, data=data)

    @classmethod
    def failure(cls, status: int, error: Any) -> "ForwardResult":
        return cls(ok=False, status=status, error=error)

    @property
    def http_status(self) -> int:
        return 200 if self.ok else self.status

    @property
    def carries_body(self) -> bool:
        # HTTP forbids a body on 1xx, 204 and 304 responses.
        status = self.http_status
        return status >= 200 and status not in (204, 304)

    def to_response(self) -> Dict[str, Any]:
        # Only one of data/error is ever part of the payload, even when it is null.
        exclude = {"error"} if self.ok else {"data"}
        return self.model_dump(mode="json", exclude=exclude)


class HealthStatus(BaseModel):
    status: Literal["ok"] = "ok"
    gateway: Optional[str] = Field(default=None, description="Configured gateway URL.")


class TelemetryAck(BaseModel):
    success: bool = True


class TelemetryPayload(BaseModel):
    """Telemetry posted by the gateway. Any JSON object is accepted."""

    model_config = ConfigDict(extra="allow")


class SchemaDocument(BaseModel):
    """Documentation payload served at /docs for quick reference."""

    http_endpoints: Dict[str, str]
    request_schemas: Dict[str, Dict[str, Any]]
    response_schemas: Dict[str, Dict[str, Any]]
    environment: Dict[str, str] = Field(default_factory=dict)
    examples: Dict[str, Any] = Field(default_factory=dict)
    notes: List[str] = []
