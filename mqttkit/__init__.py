"""MQTT v5 packet models, user properties, topic routing, message ids, packet stores and topic aliases."""

__version__ = "0.1.0"