from .mqtt_bridge import MqttBridge
from .telemetry_client import TelemetryForwarder

__all__ = ["MqttBridge", "TelemetryForwarder"]
