from .health_handler import HealthHandler
from .docs_handler import DocsHandler
from .command_handler import CommandHandler
from .telemetry_handler import TelemetryHandler

__all__ = [
    "HealthHandler",
    "DocsHandler",
    "CommandHandler",
    "TelemetryHandler",
]
