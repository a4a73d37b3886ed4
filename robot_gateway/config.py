import os

from pydantic import BaseModel, Field


class GatewayConfig(BaseModel):
    """Gateway settings, overridable through environment variables."""

    mqtt_host: str = Field(default="127.0.0.1", description="MQTT broker host.")
    mqtt_port: int = Field(default=1883, description="MQTT broker port.")
    mqtt_keepalive: int = Field(default=60, description="MQTT keepalive in seconds.")
    topic_command: str = Field(default="robot/command", description="Topic robot commands are published to.")
    topic_telemetry: str = Field(default="robot/telemetry", description="Topic robot telemetry arrives on.")
    http_port: int = Field(default=8000, description="Port of the gateway HTTP server.")
    backend_url: str = Field(
        default="http://localhost:8080/api/telemetry",
        description="Relay endpoint that receives telemetry.",
    )
    max_body_size: int = Field(
        default=1024, gt=1, description="Command body size limit in bytes; bodies must be strictly smaller."
    )

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        env = {
            "mqtt_host": os.getenv("MQTT_HOST"),
            "mqtt_port": os.getenv("MQTT_PORT"),
            "topic_command": os.getenv("MQTT_TOPIC_COMMAND"),
            "topic_telemetry": os.getenv("MQTT_TOPIC_TELEMETRY"),
            "http_port": os.getenv("GATEWAY_HTTP_PORT"),
            "backend_url": os.getenv("BACKEND_URL"),
            "max_body_size": os.getenv("MAX_BODY_SIZE"),
        }
        return cls(**{key: value for key, value in env.items() if value})
