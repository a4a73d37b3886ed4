"""
Standalone robot-route server.

Acknowledges robot start/stop requests with static JSON and has no
downstream effect. Served with FastAPI.
"""
