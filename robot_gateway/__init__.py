"""
Robot gateway package.

Bridges the relay and the robot:
- ``POST /command`` bodies are published to the MQTT command topic.
- Messages on the MQTT telemetry topic are posted to the relay backend.

The HTTP server is implemented with Tornado; MQTT uses paho-mqtt.
"""
