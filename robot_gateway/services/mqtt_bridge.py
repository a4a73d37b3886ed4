import logging
from typing import Callable, Optional

import paho.mqtt.client as mqtt

from robot_gateway.config import GatewayConfig

logger = logging.getLogger(__name__)


class MqttBridge:
    """
    Owns the MQTT connection of the gateway.

    Commands are published to the command topic; payloads arriving on the
    telemetry topic are handed to ``on_telemetry``. Note that paho invokes the
    callbacks on its own network thread, so ``on_telemetry`` must be
    thread-safe.
    """

    def __init__(
        self,
        config: GatewayConfig,
        on_telemetry: Callable[[str], None],
        client: Optional[mqtt.Client] = None,
    ):
        self.config = config
        self.on_telemetry = on_telemetry
        self.client = client or mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, client_id="gateway")
        self.client.on_connect = self._on_connect
        self.client.on_disconnect = self._on_disconnect
        self.client.on_message = self._on_message
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        """Connect to the broker and start the network thread. Raises OSError when unreachable."""
        logger.info("Connecting to %s:%s", self.config.mqtt_host, self.config.mqtt_port)
        self.client.connect(self.config.mqtt_host, self.config.mqtt_port, self.config.mqtt_keepalive)
        self.client.loop_start()
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        self.client.disconnect()
        self.client.loop_stop()
        logger.info("Disconnected from broker")

    def publish_command(self, payload: bytes | str) -> bool:
        if not self._started:
            logger.error("Cannot publish command: MQTT client not started")
            return False
        try:
            info = self.client.publish(self.config.topic_command, payload, qos=1, retain=False)
        except ValueError as exc:
            logger.error("Publish failed: %s", exc)
            return False
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            logger.error("Publish failed: %s", mqtt.error_string(info.rc))
            return False
        logger.info("Published to %s: %s", self.config.topic_command, _as_text(payload))
        return True

    def _on_connect(self, client, userdata, flags, reason_code, properties):
        if reason_code.is_failure:
            logger.error("Broker refused connection: %s", reason_code)
            return
        # Subscribing here restores the subscription after automatic reconnects.
        client.subscribe(self.config.topic_telemetry, qos=1)
        logger.info("Subscribed to %s", self.config.topic_telemetry)

    def _on_disconnect(self, client, userdata, disconnect_flags, reason_code, properties):
        if self._started:
            logger.warning("Lost broker connection (%s); paho will reconnect", reason_code)

    def _on_message(self, client, userdata, msg):
        logger.info("Message on topic '%s'", msg.topic)
        if msg.topic != self.config.topic_telemetry:
            logger.info("Topic is not telemetry, ignoring.")
            return
        payload = _as_text(msg.payload)
        logger.info("Telemetry received: %s", payload)
        self.on_telemetry(payload)


def _as_text(payload: bytes | str) -> str:
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    return payload
